"""The state a galaxy keeps about its settings, teams, clusters and players."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from flattiverse.cluster import Cluster
from flattiverse.events import (
    DeactivatedClusterEvent,
    DeactivatedTeamEvent,
    JoinedPlayerEvent,
    PartedPlayerEvent,
    UpdatedClusterEvent,
    UpdatedGalaxyEvent,
    UpdatedPlayerEvent,
    UpdatedTeamEvent,
)
from flattiverse.holders import UniversalArcHolder
from flattiverse.kinds import GameMode, PlayerKind
from flattiverse.player import Player
from flattiverse.team import Team

TEAM_SLOTS = 33
CLUSTER_SLOTS = 64
PLAYER_SLOTS = 193
SPECTATORS_TEAM_ID = 32

_MAX_TEAM_ID = 32
_MAX_CLUSTER_ID = 64
_MAX_PLAYER_ID = 193


def _require_id(id: int, limit: int, what: str) -> None:
    if not 0 <= id < limit:
        raise ValueError(f"invalid {what} id {id!r}: must be below {limit}")


@dataclass(frozen=True)
class GalaxyLimits:
    """How many players, spectators, ships and bases the galaxy allows."""

    max_players: int = 0
    max_spectators: int = 0
    galaxy_max_total_ships: int = 0
    galaxy_max_classic_ships: int = 0
    galaxy_max_new_ships: int = 0
    galaxy_max_bases: int = 0
    team_max_total_ships: int = 0
    team_max_classic_ships: int = 0
    team_max_new_ships: int = 0
    team_max_bases: int = 0
    player_max_total_ships: int = 0
    player_max_classic_ships: int = 0
    player_max_new_ships: int = 0
    player_max_bases: int = 0


class GalaxyState:
    """Settings, teams, clusters and players of a galaxy, kept up to date from the server."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection
        self.name = ""
        self.description = ""
        self.game_mode = GameMode.MISSION
        self.limits = GalaxyLimits()
        self.maintenance = False
        self.active = True
        self._teams: UniversalArcHolder[Team] = UniversalArcHolder(TEAM_SLOTS)
        self._clusters: UniversalArcHolder[Cluster] = UniversalArcHolder(CLUSTER_SLOTS)
        self._players: UniversalArcHolder[Player] = UniversalArcHolder(PLAYER_SLOTS)
        self._player_id = 0
        self._teams.populate(Team(self, SPECTATORS_TEAM_ID, "Spectators", 128, 128, 128))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, active={self.active!r})"

    @property
    def player(self) -> Player:
        """Yourself."""
        return self._players.get(self._player_id)

    def setup_self(self, id: int) -> None:
        """Remember which of the players is this connection's own."""
        _require_id(id, _MAX_PLAYER_ID, "player")
        if self._players.has_not(id):
            raise KeyError(f"player {id!r} has not been set up")
        self._player_id = id

    def update_galaxy(
        self, game_mode: GameMode, name: str, description: str, limits: GalaxyLimits
    ) -> UpdatedGalaxyEvent:
        self.game_mode = game_mode
        self.name = name
        self.description = description
        self.limits = limits
        return UpdatedGalaxyEvent(galaxy=self)

    def update_team(
        self, id: int, red: int, green: int, blue: int, name: str
    ) -> UpdatedTeamEvent:
        """Update the team with that id, creating it if it is new."""
        _require_id(id, _MAX_TEAM_ID, "team")
        team = self._teams.get_opt(id)
        if team is None:
            team = self._teams.populate(Team(self, id, name, red, green, blue))
        else:
            team.update(name, red, green, blue)
        return UpdatedTeamEvent(team=team)

    def deactivate_team(self, id: int) -> DeactivatedTeamEvent:
        _require_id(id, _MAX_TEAM_ID, "team")
        self._teams.get(id).deactivate()
        return DeactivatedTeamEvent(team=self._teams.remove(id))

    def update_cluster(self, id: int, name: str) -> UpdatedClusterEvent:
        """Rename the cluster with that id, creating it if it is new."""
        _require_id(id, _MAX_CLUSTER_ID, "cluster")
        cluster = self._clusters.get_opt(id)
        if cluster is None:
            cluster = self._clusters.populate(Cluster(self, id, name))
        else:
            cluster.update(name)
        return UpdatedClusterEvent(cluster=cluster)

    def deactivate_cluster(self, id: int) -> DeactivatedClusterEvent:
        _require_id(id, _MAX_CLUSTER_ID, "cluster")
        self._clusters.get(id).deactivate()
        return DeactivatedClusterEvent(cluster=self._clusters.remove(id))

    def create_player(
        self, id: int, kind: PlayerKind, team: int, name: str, ping: float
    ) -> JoinedPlayerEvent:
        _require_id(id, _MAX_PLAYER_ID, "player")
        if self._players.has(id):
            raise ValueError(f"player {id!r} does already exist")
        player = Player(self, id, kind, self._teams.get(team), name, ping)
        return JoinedPlayerEvent(player=self._players.populate(player))

    def update_player(self, id: int, ping: float) -> UpdatedPlayerEvent:
        _require_id(id, _MAX_PLAYER_ID, "player")
        player = self._players.get(id)
        player.update(ping)
        return UpdatedPlayerEvent(player=player)

    def deactivate_player(self, id: int) -> PartedPlayerEvent:
        _require_id(id, _MAX_PLAYER_ID, "player")
        self._players.get(id).deactivate()
        return PartedPlayerEvent(player=self._players.remove(id))

    def iter_teams(self) -> Iterator[Team]:
        return iter(self._teams)

    def get_team(self, id: int) -> Team:
        return self._teams.get(id)

    def get_team_opt(self, id: int) -> Optional[Team]:
        return self._teams.get_opt(id)

    def iter_clusters(self) -> Iterator[Cluster]:
        return iter(self._clusters)

    def get_cluster(self, id: int) -> Cluster:
        return self._clusters.get(id)

    def get_cluster_opt(self, id: int) -> Optional[Cluster]:
        return self._clusters.get_opt(id)

    def iter_players(self) -> Iterator[Player]:
        return iter(self._players)

    def get_player(self, id: int) -> Player:
        return self._players.get(id)

    def get_player_opt(self, id: int) -> Optional[Player]:
        return self._players.get_opt(id)