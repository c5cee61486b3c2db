"""Clusters: the separate maps a galaxy consists of."""

from __future__ import annotations

import threading
import weakref
from typing import Any, Dict, List, Optional


def _upgrade(reference: "weakref.ReferenceType[Any]", what: str) -> Any:
    target = reference()
    if target is None:
        raise ReferenceError(f"the {what} this object belongs to no longer exists")
    return target


class Cluster:
    """A map of the galaxy, holding the units seen in it by name."""

    def __init__(self, galaxy: Any, id: int, name: str) -> None:
        self._galaxy = weakref.ref(galaxy)
        self.id = id
        self.name = name
        self.active = True
        self._units: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Cluster(id={self.id!r}, name={self.name!r}, active={self.active!r})"

    @property
    def galaxy(self) -> Any:
        """The galaxy this cluster belongs to."""
        return _upgrade(self._galaxy, "galaxy")

    def update(self, name: str) -> None:
        self.name = name

    def deactivate(self) -> None:
        self.active = False

    def add_unit(self, unit: Any) -> None:
        """Store a unit under its name, replacing one of the same name."""
        with self._lock:
            self._units[unit.name] = unit

    def remove_unit(self, name: str) -> Optional[Any]:
        """Remove and return the unit with that name, or None if there is none."""
        with self._lock:
            return self._units.pop(name, None)

    def get_unit(self, name: str) -> Any:
        unit = self.get_unit_opt(name)
        if unit is None:
            raise KeyError(f"there is no unit named {name!r}")
        return unit

    def get_unit_opt(self, name: str) -> Optional[Any]:
        with self._lock:
            return self._units.get(name)

    def get_units(self) -> List[Any]:
        with self._lock:
            return list(self._units.values())