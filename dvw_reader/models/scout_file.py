"""Root model of a decoded scout file."""

from pydantic import Field

from dvw_reader.models.action import Action
from dvw_reader.models.base import ScoutModel
from dvw_reader.models.match import Game, Set, Team
from dvw_reader.models.metadata import Metadata
from dvw_reader.models.player import Player


class ScoutFile(ScoutModel):
    """Everything decoded from one .dvw file."""

    metadata: Metadata
    game: Game
    home_team: Team
    visiting_team: Team
    sets: list[Set] = Field(default_factory=list)
    home_players: list[Player] = Field(default_factory=list)
    visiting_players: list[Player] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)

    @property
    def teams(self) -> tuple[Team, Team]:
        """Home and visiting team, in that order."""
        return (self.home_team, self.visiting_team)

    @property
    def players(self) -> list[Player]:
        """Home roster followed by the visiting roster."""
        return [*self.home_players, *self.visiting_players]
