"""Roster models."""

from pydantic import Field

from dvw_reader.models.base import ScoutModel


class Player(ScoutModel):
    """One roster line of a [3PLAYERS-H] / [3PLAYERS-V] section."""

    team_id: str = Field(..., description="Identifier of the team the player belongs to")
    player_number: int = Field(..., ge=0, le=99, description="Jersey number")
    player_id: str = Field(..., description="Player identifier")
    last_name: str = Field(..., description="Last name")
    name: str = Field(..., description="Given name")
