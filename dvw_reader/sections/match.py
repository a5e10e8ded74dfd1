"""Parser for the [3MATCH] section."""

from __future__ import annotations

from dvw_reader.models.match import Game
from dvw_reader.scanner import LineCursor
from dvw_reader.sections.base import SectionParser

MATCH_HEADER = "[3MATCH]"


class MatchParser(SectionParser):
    """One data line (date, time, season, game type) and one line that is skipped."""

    header = MATCH_HEADER

    def parse_body(self, cursor: LineCursor) -> Game:
        fields = self.read_fields(cursor)
        game = Game(
            date=fields.get(0, "date"),
            time=fields.get(2, "time"),
            season=fields.get(3, "season"),
            game_type=fields.get(4, "game_type"),
        )
        # Second match line is not decoded
        cursor.next_line(section=self.header)
        return game
