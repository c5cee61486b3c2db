"""Errors reported by the game server or raised locally by the connector."""

from __future__ import annotations

from enum import Enum
from typing import Any

from flattiverse.kinds import AccountStatus, PlayerKind

_UNKNOWN_NAME = "UNKNOWN"


class InvalidArgumentKind(Enum):
    """Why a parameter was rejected."""

    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    NAME_CONSTRAINT = "name_constraint"
    CHAT_CONSTRAINT = "chat_constraint"
    ENTITY_NOT_FOUND = "entity_not_found"
    NAME_IN_USE = "name_in_use"
    CONTAINED_NAN = "contained_nan"
    CONSTRAINED_INFINITY = "constrained_infinity"
    UNKNOWN = "unknown"


_REASON_TEXT = {
    InvalidArgumentKind.TOO_SMALL: "is wrong due to an too small value.",
    InvalidArgumentKind.TOO_LARGE: "is wrong due to an too large value.",
    InvalidArgumentKind.NAME_CONSTRAINT: "doesn't match the name constraint.",
    InvalidArgumentKind.CHAT_CONSTRAINT: "doesn't match the chat constraint.",
    InvalidArgumentKind.ENTITY_NOT_FOUND: "doesn't point to an existing entity.",
    InvalidArgumentKind.NAME_IN_USE: "references a name which is already in use.",
    InvalidArgumentKind.CONTAINED_NAN: 'contained a "Not a Number" value.',
    InvalidArgumentKind.CONSTRAINED_INFINITY: 'contained a "Infinity" value.',
    InvalidArgumentKind.UNKNOWN: "is wrong due to an invalid value.",
}


class GameErrorKind(Enum):
    """The kind of a game error, valued by its wire code.

    Calling ``GameErrorKind(code)`` with an unlisted byte yields an unknown kind
    that keeps the code. ``INVALID_PRIMITIVE_VALUE`` is local only and has no code.
    """

    CANT_CONNECT = 0x01
    INVALID_PROTOCOL_VERSION = 0x02
    AUTH_FAILED = 0x03
    WRONG_ACCOUNT_STATE = 0x04
    INVALID_OR_MISSING_TEAM = 0x05
    SERVER_FULL_OF_PLAYER_KIND = 0x08
    SESSIONS_EXHAUSTED = 0x0C
    CONNECTION_TERMINATED = 0x0F
    SPECIFIED_ELEMENT_NOT_FOUND = 0x10
    CANT_CALL_THIS_CONCURRENT = 0x11
    INVALID_ARGUMENT = 0x12
    PERMISSION_FAILED = 0x13
    FLOODCONTROL_TRIGGERED = 0x14
    UNIT_CONSTRAINT_VIOLATION = 0x15
    YOU_NEED_TO_CONTINUE_FIRST = 0x20
    YOU_NEED_TO_DIE_FIRST = 0x21
    ALL_START_LOCATIONS_ARE_OVERCROWDED = 0x22
    CAN_ONLY_SHOOT_ONCE_PER_TICK = 0x30
    INVALID_PRIMITIVE_VALUE = None

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF:
            member = object.__new__(cls)
            member._name_ = _UNKNOWN_NAME
            member._value_ = value
            return member
        return None

    @property
    def known(self) -> bool:
        """False for codes this connector does not understand."""
        return self._name_ != _UNKNOWN_NAME


_FIXED_TEXT = {
    GameErrorKind.CANT_CONNECT: "[0x01] Couldn't connect to the flattiverse galaxy.",
    GameErrorKind.INVALID_PROTOCOL_VERSION: "[0x02] Invalid protocol version. Consider up(- or down)grading the connector.",
    GameErrorKind.AUTH_FAILED: "[0x03] Authentication failed: Missing, wrong or unused API key.",
    GameErrorKind.INVALID_OR_MISSING_TEAM: "[0x05] No or non-existent team specified.",
    GameErrorKind.SESSIONS_EXHAUSTED: "[0x0C] Sessions exhausted: You cannot have more than 255 calls in progress.",
    GameErrorKind.CONNECTION_TERMINATED: "[0x0F] Connection has been terminated for unknown reason.",
    GameErrorKind.SPECIFIED_ELEMENT_NOT_FOUND: "[0x10] Specified element not found.",
    GameErrorKind.CANT_CALL_THIS_CONCURRENT: "[0x11] This method cannot be called concurrently.",
    GameErrorKind.PERMISSION_FAILED: "[0x13] Permission denied. Did you try to call a command where you don't have access to?",
    GameErrorKind.FLOODCONTROL_TRIGGERED: "[0x14] You probably type too fast: Don't flood the chat.",
    GameErrorKind.UNIT_CONSTRAINT_VIOLATION: "[0x15] You tried to register too much units of a specific kind.",
    GameErrorKind.YOU_NEED_TO_CONTINUE_FIRST: "[0x20] This controllable is dead. You need to Continue() first.",
    GameErrorKind.YOU_NEED_TO_DIE_FIRST: "[0x21] This controllable is alive. The controllable needs to die first.",
    GameErrorKind.ALL_START_LOCATIONS_ARE_OVERCROWDED: "[0x22] All start locations are currently overcrowded.",
    GameErrorKind.CAN_ONLY_SHOOT_ONCE_PER_TICK: "[0x30] You tried to register too much units of a specific kind.",
}

_WRONG_STATE_UNKNOWN = (
    "[0x04] Your account is in the wrong state - however, this connector version "
    "doesn't understand the state submitted."
)

_ACCOUNT_STATE_TEXT = {
    AccountStatus.UNKNOWN: _WRONG_STATE_UNKNOWN,
    AccountStatus.OPT_IN: "[0x04] You need to opt-in first to use the game.",
    AccountStatus.RE_OPT_IN: "[0x04] You need to re-opt-in first to use the game.",
    AccountStatus.USER: "[0x04] Well, the game server should have you let in. Please report this issue.",
    AccountStatus.BANNED: "[0x04] Your account has been banned from using the game.",
    AccountStatus.DELETED: "[0x04] Your account is deleted.",
}

_PLAYER_KIND_TEXT = {
    PlayerKind.ADMIN: "[0x08] Server is full of admins. (Too many admins connected to the galaxy server.)",
    PlayerKind.SPECTATOR: "[0x08] Server is full of spectators. (Too many spectators connected to the galaxy server.)",
    PlayerKind.PLAYER: "[0x08] All player slots are taken. Please wait until players leave the galaxy.",
}

_PAIR_KINDS = (GameErrorKind.INVALID_ARGUMENT, GameErrorKind.INVALID_PRIMITIVE_VALUE)


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class GameError(Exception):
    """An error of a given kind, with the detail that kind carries.

    ``detail`` is an ``AccountStatus`` (or None) for WRONG_ACCOUNT_STATE, a
    ``PlayerKind`` (or None) for SERVER_FULL_OF_PLAYER_KIND, a
    ``(InvalidArgumentKind, parameter)`` pair for INVALID_ARGUMENT and a
    ``(value, type_name)`` pair for INVALID_PRIMITIVE_VALUE.
    """

    def __init__(self, kind: GameErrorKind, detail: Any = None) -> None:
        if kind in _PAIR_KINDS and not (isinstance(detail, tuple) and len(detail) == 2):
            raise TypeError(f"{kind.name} needs a pair as detail, got {detail!r}")
        super().__init__(kind, detail)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        kind = self.kind
        if not kind.known:
            return f"[{kind.value:#02x}] Unknown error code."
        if kind is GameErrorKind.WRONG_ACCOUNT_STATE:
            return _ACCOUNT_STATE_TEXT.get(self.detail, _WRONG_STATE_UNKNOWN)
        if kind is GameErrorKind.SERVER_FULL_OF_PLAYER_KIND:
            player_kind = self.detail
            if player_kind is None:
                return "[0x08] Server is full of unknown things."
            if player_kind in _PLAYER_KIND_TEXT and player_kind.known:
                return _PLAYER_KIND_TEXT[player_kind]
            return f"[0x08] Server is full of things with code {int(player_kind):#02x}."
        if kind is GameErrorKind.INVALID_ARGUMENT:
            reason, parameter = self.detail
            return f"[0x12] Parameter {_quote(parameter)} {_REASON_TEXT[reason]}"
        if kind is GameErrorKind.INVALID_PRIMITIVE_VALUE:
            value, type_name = self.detail
            return f"[0x??] Value {_quote(str(value))} not expected for  {_quote(type_name)}"
        return _FIXED_TEXT[kind]