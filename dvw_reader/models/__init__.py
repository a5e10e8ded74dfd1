"""Pydantic models for decoded scout files."""

from dvw_reader.models.action import (
    Action,
    ActionType,
    CodeExplanation,
    Evaluation,
    Skill,
    TeamSide,
)
from dvw_reader.models.base import ScoutModel
from dvw_reader.models.match import Game, Set, SetPoints, Team
from dvw_reader.models.metadata import Metadata, ReleaseData
from dvw_reader.models.player import Player
from dvw_reader.models.scout_file import ScoutFile

__all__ = [
    "Action",
    "ActionType",
    "CodeExplanation",
    "Evaluation",
    "Game",
    "Metadata",
    "Player",
    "ReleaseData",
    "ScoutFile",
    "ScoutModel",
    "Set",
    "SetPoints",
    "Skill",
    "Team",
    "TeamSide",
]
