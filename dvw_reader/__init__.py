"""Decoder for DataVolley Scout (.dvw) match files."""

from dvw_reader.codes import decode_code
from dvw_reader.exceptions import (
    CodeDecodeError,
    ConversionError,
    DVWError,
    FieldMissingError,
    ScoutDecodeError,
    SectionHeaderError,
    SourceReadError,
    TruncationError,
)
from dvw_reader.models import (
    Action,
    ActionType,
    CodeExplanation,
    Evaluation,
    Game,
    Metadata,
    Player,
    ReleaseData,
    ScoutFile,
    Set,
    SetPoints,
    Skill,
    Team,
    TeamSide,
)
from dvw_reader.reader import SectionStep, build_pipeline, decode, read, read_from_file, read_text
from dvw_reader.scanner import LineCursor, split_fields
from dvw_reader.sections import UNPARSED_SECTIONS

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionType",
    "CodeDecodeError",
    "CodeExplanation",
    "ConversionError",
    "DVWError",
    "Evaluation",
    "FieldMissingError",
    "Game",
    "LineCursor",
    "Metadata",
    "Player",
    "ReleaseData",
    "ScoutDecodeError",
    "ScoutFile",
    "SectionHeaderError",
    "SectionStep",
    "Set",
    "SetPoints",
    "Skill",
    "SourceReadError",
    "Team",
    "TeamSide",
    "TruncationError",
    "UNPARSED_SECTIONS",
    "build_pipeline",
    "decode",
    "decode_code",
    "read",
    "read_from_file",
    "read_text",
    "split_fields",
]
