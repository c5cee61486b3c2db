"""Small enumerations used on the wire: account states, player kinds, game modes."""

from __future__ import annotations

from enum import IntEnum

_UNKNOWN_NAME = "UNKNOWN"


class _CatchAllEnum(IntEnum):
    """Byte-coded enumeration where any unlisted byte becomes an UNKNOWN member."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = _UNKNOWN_NAME
            member._value_ = value
            return member
        return None

    @property
    def known(self) -> bool:
        """False if the code is not one this connector understands."""
        return self._name_ != _UNKNOWN_NAME


class AccountStatus(IntEnum):
    """The status of an account - does it need to opt in, etc?"""

    OPT_IN = 0x00
    RE_OPT_IN = 0x01
    USER = 0x10
    BANNED = 0x80
    DELETED = 0xF0
    UNKNOWN = 0xFF

    @classmethod
    def from_code(cls, code: int) -> "AccountStatus":
        """Decode a status byte; unlisted bytes map to UNKNOWN."""
        if isinstance(code, bool) or not 0 <= int(code) <= 0xFF:
            raise ValueError(f"{code!r} is not a valid account status byte")
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


class PlayerUnitDestroyedReason(_CatchAllEnum):
    """Specifies why a PlayerUnit has been destroyed."""

    BY_RULES = 0x00
    SUICIDED = 0x10
    COLLIDED_WITH_NEUTRAL_UNIT = 0x20
    COLLIDED_WITH_ENEMY_PLAYER_UNIT = 0x28
    COLLIDED_WITH_FRIENDLY_PLAYER_UNIT = 0x29
    SHOT_BY_ENEMY_PLAYER_UNIT = 0x38
    SHOT_BY_FRIENDLY_PLAYER_UNIT = 0x39

    @classmethod
    def from_code(cls, code: int) -> "PlayerUnitDestroyedReason":
        """Decode a reason byte; unlisted bytes yield an unknown member."""
        return cls(code)


class GameMode(_CatchAllEnum):
    """The game mode of the galaxy."""

    MISSION = 0x00
    SHOOT_THE_FLAG = 0x01
    DOMINATION = 0x02
    RACE = 0x03

    @classmethod
    def from_code(cls, code: int) -> "GameMode":
        """Decode a game mode byte; unlisted bytes yield an unknown member."""
        return cls(code)


class PlayerKind(_CatchAllEnum):
    """Specifies the kind of the client connected to the server."""

    PLAYER = 0x01
    SPECTATOR = 0x02
    ADMIN = 0x04

    @classmethod
    def from_code(cls, code: int) -> "PlayerKind":
        """Decode a player kind byte; unlisted bytes yield an unknown member."""
        return cls(code)