"""Play-by-play action models and the closed enumerations of the main code."""

from enum import Enum

from pydantic import Field

from dvw_reader.models.base import ScoutModel


class TeamSide(str, Enum):
    """Team that performed an action (code position 0)."""

    HOME = "*"
    VISITING = "a"


class Skill(str, Enum):
    """Skill of an action (code position 3)."""

    SERVE = "S"
    RECEPTION = "R"
    ATTACK = "A"
    BLOCK = "B"
    DIG = "D"
    SET = "E"
    FREE_BALL = "F"


class ActionType(str, Enum):
    """Tempo / type of an action (code position 4)."""

    HIGH = "H"
    MEDIUM = "M"
    QUICK = "Q"
    TENSE = "T"
    SUPER = "S"
    FAST = "N"
    OTHER = "O"


# Meaning depends on the skill; see the evaluation tables of the DataVolley handbook.
class Evaluation(str, Enum):
    """Outcome grade of an action (code position 5)."""

    EQUAL = "="
    SLASH = "/"
    MINUS = "-"
    EXCLAMATION = "!"
    PLUS = "+"
    HASHTAG = "#"


class CodeExplanation(ScoutModel):
    """Decoded main code (first six characters) of an action."""

    team: TeamSide
    player_number: int = Field(..., ge=0, le=99)
    skill: Skill
    action_type: ActionType
    evaluation: Evaluation


class Action(ScoutModel):
    """
    One line of the [3SCOUT] section.

    Only the code token is decoded. The remaining columns are kept verbatim in
    ``raw_fields``; the typed fields below them are not decoded yet and are
    always None.
    """

    code: str = Field(..., description="Raw action code token")
    code_explanation: CodeExplanation | None = Field(
        None, description="Decoded main code; None only when lenient decoding skipped it"
    )
    raw_fields: tuple[str, ...] = Field(default=(), description="All trimmed fields of the line")

    point_phase: str | None = None
    attack_phase: str | None = None
    start_coordinate: str | None = None
    mid_coordinate: str | None = None
    end_coordinate: str | None = None
    time: str | None = None
    set: int | None = None
    home_rotation: int | None = None
    visiting_rotation: int | None = None
    video_file_number: int | None = None
    video_time: str | None = None
