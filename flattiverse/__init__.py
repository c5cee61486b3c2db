"""Galaxy state, events and errors for flattiverse game clients."""

__version__ = "43.0.0"

__all__ = [
    "cluster",
    "controllable_info",
    "errors",
    "events",
    "galaxy",
    "galaxy_state",
    "holders",
    "kinds",
    "player",
    "team",
]