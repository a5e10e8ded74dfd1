"""Parser for the [3SET] section."""

from __future__ import annotations

from dvw_reader.exceptions import ConversionError, TruncationError
from dvw_reader.models.match import Set, SetPoints
from dvw_reader.scanner import Fields, LineCursor, is_section_header
from dvw_reader.sections.base import SectionParser

SETS_HEADER = "[3SET]"

# field index -> Set attribute for the four partial scores
_QUARTER_FIELDS = {
    1: "first_quarter",
    2: "second_quarter",
    3: "third_quarter",
    4: "fourth_quarter",
}
_DURATION_FIELD = 5


def parse_set_points(
    value: str,
    *,
    section: str | None = None,
    line: str | None = None,
    line_number: int | None = None,
) -> SetPoints:
    """
    Parse a ``home-visiting`` partial score.

    An empty value means the partial was not played and yields 0-0.

    Examples:
        "25-20" -> SetPoints(home=25, visiting=20)
        ""      -> SetPoints(home=0, visiting=0)
    """
    value = value.strip()
    if not value:
        return SetPoints(home=0, visiting=0)

    home, sep, visiting = value.partition("-")
    try:
        if not sep:
            raise ValueError("missing '-' separator")
        return SetPoints(home=int(home.strip()), visiting=int(visiting.strip()))
    except ValueError as e:
        # pydantic.ValidationError is a ValueError subclass
        raise ConversionError(
            f"Invalid set score {value!r}: expected 'home-visiting'",
            section=section,
            line=line,
            line_number=line_number,
        ) from e


class SetsParser(SectionParser):
    """
    Exactly ``settings.set_count`` set lines, numbered from 1.

    DataVolley pads the section with empty lines for sets that were not
    played, so a five-set layout is read even for shorter matches.
    """

    header = SETS_HEADER

    def parse_body(self, cursor: LineCursor) -> list[Set]:
        sets = []
        for set_number in range(1, self.settings.set_count + 1):
            line = cursor.peek()
            if line is None or is_section_header(line):
                raise TruncationError(
                    f"Expected {self.settings.set_count} set lines, found {set_number - 1}",
                    section=self.header,
                    line=line,
                    line_number=cursor.line_number + 1,
                )
            sets.append(self.parse_set(self.read_fields(cursor), set_number))

        self.logger.debug("Parsed sets", count=len(sets))
        return sets

    def parse_set(self, fields: Fields, set_number: int) -> Set:
        context = {"section": self.header, "line": fields.line, "line_number": fields.line_number}
        quarters = {
            attr: parse_set_points(fields.get(index, attr), **context)
            for index, attr in _QUARTER_FIELDS.items()
        }
        return self.build(
            Set,
            fields,
            set_number=set_number,
            duration=fields.get(_DURATION_FIELD, "duration"),
            **quarters,
        )
