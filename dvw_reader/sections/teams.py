"""Parser for the [3TEAMS] section."""

from __future__ import annotations

from dvw_reader.models.match import Team
from dvw_reader.scanner import LineCursor
from dvw_reader.sections.base import SectionParser

TEAMS_HEADER = "[3TEAMS]"


class TeamParser(SectionParser):
    """
    One team line of the teams section.

    The section holds the home line then the visiting line under a single
    header, so the visiting parser is built with ``read_header=False``.
    """

    header = TEAMS_HEADER

    def parse_body(self, cursor: LineCursor) -> Team:
        fields = self.read_fields(cursor)
        return self.build(
            Team,
            fields,
            team_id=fields.get(0, "team_id"),
            team_name=fields.get(1, "team_name"),
            sets_won=fields.integer(2, "sets_won"),
            head_coach=fields.get(3, "head_coach"),
            assistant_coaches=fields.get(4, "assistant_coaches"),
        )
