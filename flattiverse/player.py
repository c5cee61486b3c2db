"""Players connected to a galaxy."""

from __future__ import annotations

import weakref
from typing import Any, Iterator, Optional

from flattiverse.controllable_info import ControllableInfo
from flattiverse.holders import UniversalArcHolder
from flattiverse.kinds import PlayerKind

_CONTROLLABLE_INFO_SLOTS = 256


def _upgrade(reference: "weakref.ReferenceType[Any]", what: str) -> Any:
    target = reference()
    if target is None:
        raise ReferenceError(f"the {what} this object belongs to no longer exists")
    return target


class Player:
    """A player in the galaxy."""

    def __init__(
        self, galaxy: Any, id: int, kind: PlayerKind, team: Any, name: str, ping: float
    ) -> None:
        self._galaxy = weakref.ref(galaxy)
        self.id = id
        self.kind = kind
        self._team = weakref.ref(team)
        self.name = name
        self.ping = ping
        self.active = True
        self.controllable_infos: UniversalArcHolder[ControllableInfo] = UniversalArcHolder(
            _CONTROLLABLE_INFO_SLOTS
        )

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id!r}, name={self.name!r}, kind={self.kind!r}, "
            f"active={self.active!r})"
        )

    @property
    def galaxy(self) -> Any:
        """The galaxy the player is in."""
        return _upgrade(self._galaxy, "galaxy")

    @property
    def team(self) -> Any:
        """The team the player belongs to."""
        return _upgrade(self._team, "team")

    async def chat(self, message: str) -> None:
        """Send a private chat message to this player."""
        await self.galaxy.connection.chat_player(self.id, message)

    def update(self, ping: float) -> None:
        self.ping = ping

    def deactivate(self) -> None:
        """Mark the player as gone, along with all of its controllables."""
        self.ping = -1.0
        self.active = False
        for info in self.controllable_infos:
            info.deactivate()

    def get_controllable_info(self, id: int) -> ControllableInfo:
        return self.controllable_infos.get(id)

    def get_controllable_info_opt(self, id: int) -> Optional[ControllableInfo]:
        return self.controllable_infos.get_opt(id)

    def iter_controllable_infos(self) -> Iterator[ControllableInfo]:
        return iter(self.controllable_infos)