"""Match, team and set models."""

from pydantic import Field

from dvw_reader.models.base import ScoutModel


class Game(ScoutModel):
    """Match information from the [3MATCH] section. Values are kept as written."""

    date: str = Field(..., description="Match date")
    time: str = Field(..., description="Match start time")
    season: str = Field(..., description="Season label")
    game_type: str = Field(..., description="Competition / game type label")


class Team(ScoutModel):
    """One team line of the [3TEAMS] section."""

    team_id: str = Field(..., description="Team identifier")
    team_name: str = Field(..., description="Display name")
    sets_won: int = Field(..., ge=0, le=5, description="Sets won in the match")
    head_coach: str = Field(..., description="Head coach")
    assistant_coaches: str = Field(..., description="Assistant coaches")


class SetPoints(ScoutModel):
    """Home/visiting point counts at one partial score of a set."""

    home: int = Field(default=0, ge=0, description="Home team points")
    visiting: int = Field(default=0, ge=0, description="Visiting team points")


class Set(ScoutModel):
    """One line of the [3SET] section."""

    set_number: int = Field(..., ge=1, description="1-based set number")
    first_quarter: SetPoints = Field(default_factory=SetPoints)
    second_quarter: SetPoints = Field(default_factory=SetPoints)
    third_quarter: SetPoints = Field(default_factory=SetPoints)
    fourth_quarter: SetPoints = Field(default_factory=SetPoints)
    duration: str = Field(..., description="Set duration as written in the file")

    @property
    def quarters(self) -> tuple[SetPoints, SetPoints, SetPoints, SetPoints]:
        return (self.first_quarter, self.second_quarter, self.third_quarter, self.fourth_quarter)
