"""Section parsers, one per supported section of a scout file."""

from dvw_reader.sections.base import SectionParser
from dvw_reader.sections.match import MATCH_HEADER, MatchParser
from dvw_reader.sections.metadata import METADATA_HEADER, MetadataParser
from dvw_reader.sections.players import PLAYERS_HEADER, PlayersParser
from dvw_reader.sections.scout import SCOUT_HEADER, ScoutParser
from dvw_reader.sections.sets import SETS_HEADER, SetsParser, parse_set_points
from dvw_reader.sections.teams import TEAMS_HEADER, TeamParser

# Declared by the format but not decoded; the reader skips over them.
UNPARSED_SECTIONS = (
    "[3MORE]",
    "[3COMMENTS]",
    "[3ATTACKCOMBINATION]",
    "[3SETTERCALL]",
    "[3WINNINGSYMBOLS]",
    "[3RESERVE]",
)

__all__ = [
    "MATCH_HEADER",
    "METADATA_HEADER",
    "PLAYERS_HEADER",
    "SCOUT_HEADER",
    "SETS_HEADER",
    "TEAMS_HEADER",
    "UNPARSED_SECTIONS",
    "MatchParser",
    "MetadataParser",
    "PlayersParser",
    "ScoutParser",
    "SectionParser",
    "SetsParser",
    "TeamParser",
    "parse_set_points",
]
