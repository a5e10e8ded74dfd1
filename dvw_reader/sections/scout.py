"""Parser for the [3SCOUT] section (play-by-play actions)."""

from __future__ import annotations

from dvw_reader.codes import decode_code
from dvw_reader.exceptions import CodeDecodeError
from dvw_reader.models.action import Action
from dvw_reader.scanner import Fields, LineCursor, split_fields
from dvw_reader.sections.base import SectionParser

SCOUT_HEADER = "[3SCOUT]"


class ScoutParser(SectionParser):
    """
    Action lines until a blank line or the end of input.

    Only the code token (field 0) is decoded. With ``strict_codes`` disabled,
    lines whose code does not decode (point, rotation and other non-skill
    lines) are kept with ``code_explanation=None``.
    """

    header = SCOUT_HEADER
    prefix_match = True

    def parse_body(self, cursor: LineCursor) -> list[Action]:
        actions = []
        undecoded = 0
        while not cursor.at_end:
            line = cursor.next_line(section=self.header)
            if not line.strip():
                break
            fields = split_fields(line, section=self.header, line_number=cursor.line_number)
            action = self.parse_action(fields)
            if action.code_explanation is None:
                undecoded += 1
            actions.append(action)

        self.logger.debug("Parsed actions", count=len(actions), undecoded=undecoded)
        return actions

    def parse_action(self, fields: Fields) -> Action:
        code = fields.get(0, "code")
        try:
            explanation = decode_code(
                code, section=self.header, line=fields.line, line_number=fields.line_number
            )
        except CodeDecodeError:
            if self.settings.strict_codes:
                raise
            self.logger.debug("Undecoded action code", code=code, line_number=fields.line_number)
            explanation = None

        return Action(code=code, code_explanation=explanation, raw_fields=fields.values)
