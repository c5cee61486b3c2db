"""What is known about the controllables of other players."""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Any

from flattiverse.errors import GameError, GameErrorKind, InvalidArgumentKind


def _upgrade(reference: "weakref.ReferenceType[Any]", what: str) -> Any:
    target = reference()
    if target is None:
        raise ReferenceError(f"the {what} this object belongs to no longer exists")
    return target


class ControllableKind(Enum):
    """The kinds of player units a ControllableInfo can describe."""

    CLASSIC_SHIP_PLAYER_UNIT = "classic_ship_player_unit"
    NEW_SHIP_PLAYER_UNIT = "new_ship_player_unit"


class ControllableInfo:
    """Information about a player's unit: its name, kind and whether it lives."""

    def __init__(
        self,
        galaxy: Any,
        player: Any,
        id: int,
        name: str,
        alive: bool,
        kind: ControllableKind,
    ) -> None:
        self._galaxy = weakref.ref(galaxy)
        self._player = weakref.ref(player)
        self.id = id
        self.name = name
        self.alive = alive
        self.active = True
        self.kind = kind

    def __repr__(self) -> str:
        return (
            f"ControllableInfo(id={self.id!r}, name={self.name!r}, kind={self.kind.name}, "
            f"alive={self.alive!r}, active={self.active!r})"
        )

    @classmethod
    def from_packet(
        cls, kind: Any, galaxy: Any, player: Any, id: int, name: str, alive: bool
    ) -> "ControllableInfo":
        """Build the info for a unit kind; other kinds raise an invalid argument error."""
        try:
            controllable_kind = ControllableKind(kind)
        except ValueError:
            raise GameError(
                GameErrorKind.INVALID_ARGUMENT, (InvalidArgumentKind.UNKNOWN, "kind")
            ) from None
        return cls(galaxy, player, id, name, alive, controllable_kind)

    @property
    def galaxy(self) -> Any:
        """The galaxy this info belongs to."""
        return _upgrade(self._galaxy, "galaxy")

    @property
    def player(self) -> Any:
        """The player owning the unit."""
        return _upgrade(self._player, "player")

    def deactivate(self) -> None:
        self.active = False
        self.alive = False

    def set_alive(self) -> None:
        self.alive = True

    def set_dead(self) -> None:
        self.alive = False