"""Teams of a galaxy."""

from __future__ import annotations

import threading
import weakref
from typing import Any


def _upgrade(reference: "weakref.ReferenceType[Any]", what: str) -> Any:
    target = reference()
    if target is None:
        raise ReferenceError(f"the {what} this object belongs to no longer exists")
    return target


class Team:
    """A team of the galaxy, with its name and colour."""

    def __init__(self, galaxy: Any, id: int, name: str, red: int, green: int, blue: int) -> None:
        self._galaxy = weakref.ref(galaxy)
        self.id = id
        self._lock = threading.Lock()
        self.name = name
        self.red = red
        self.green = green
        self.blue = blue
        self.active = True

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r}, active={self.active!r})"

    @property
    def galaxy(self) -> Any:
        """The galaxy this team belongs to."""
        return _upgrade(self._galaxy, "galaxy")

    @property
    def color(self) -> tuple:
        """The team colour as a (red, green, blue) triple."""
        with self._lock:
            return (self.red, self.green, self.blue)

    async def chat(self, message: str) -> None:
        """Send a chat message to this team."""
        await self.galaxy.connection.chat_team(self.id, message)

    def update(self, name: str, red: int, green: int, blue: int) -> None:
        with self._lock:
            self.name = name
            self.red = red
            self.green = green
            self.blue = blue

    def deactivate(self) -> None:
        self.active = False