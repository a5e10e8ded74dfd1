"""Parser for the [3PLAYERS-H] and [3PLAYERS-V] sections."""

from __future__ import annotations

from dvw_reader.models.player import Player
from dvw_reader.scanner import Fields, LineCursor, is_section_header, split_fields
from dvw_reader.sections.base import SectionParser

PLAYERS_HEADER = "[3PLAYERS"


class PlayersParser(SectionParser):
    """
    Roster lines until the next bracketed header, which is left for the next
    parser, or until end of input.

    Columns used: team id (0), jersey number (1), player id (8), last name (9)
    and given name (10); the others are not decoded.
    """

    header = PLAYERS_HEADER
    prefix_match = True

    def parse_body(self, cursor: LineCursor) -> list[Player]:
        players = []
        while not cursor.at_end:
            line = cursor.next_line(section=self.header)
            if is_section_header(line):
                cursor.push_back(line)
                break
            fields = split_fields(line, section=self.header, line_number=cursor.line_number)
            players.append(self.parse_player(fields))

        self.logger.debug("Parsed roster", count=len(players))
        return players

    def parse_player(self, fields: Fields) -> Player:
        return self.build(
            Player,
            fields,
            team_id=fields.get(0, "team_id"),
            player_number=fields.integer(1, "player_number"),
            player_id=fields.get(8, "player_id"),
            last_name=fields.get(9, "last_name"),
            name=fields.get(10, "name"),
        )
