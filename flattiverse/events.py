"""Events a galaxy reports: joins, chats, unit updates, ticks and more."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional

from flattiverse.kinds import PlayerUnitDestroyedReason


def _now() -> datetime:
    return datetime.now().astimezone()


def _format_stamp(stamp: datetime) -> str:
    return stamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def _quote(text: str) -> str:
    escaped = (
        str(text)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _debug(value: Any) -> str:
    """Render a value the way a debug listing shows it."""
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, Enum):
        if not getattr(value, "known", True):
            return f"Unknown({value.value})"
        return "".join(part.capitalize() for part in value.name.split("_"))
    return str(value)


def _display_float(value: float) -> str:
    number = float(value)
    if number == number and number not in (float("inf"), float("-inf")) and number.is_integer():
        return str(int(number))
    return repr(number)


def _trim(number: float) -> str:
    return f"{number:.6f}".rstrip("0").rstrip(".")


def _format_duration(duration: timedelta) -> str:
    micros = duration // timedelta(microseconds=1)
    if micros >= 1_000_000:
        return f"{_trim(micros / 1_000_000)}s"
    if micros >= 1_000:
        return f"{_trim(micros / 1_000)}ms"
    return f"{micros}µs"


def _team_name(player: Any) -> str:
    return player.team.name


def _owner_prefix(player: Any, controllable: Any) -> str:
    return (
        f"Player {_quote(player.name)} of Team {_quote(_team_name(player))}"
        f" controllable {_quote(controllable.name)} of type {_debug(controllable.kind)}"
    )


def _unit_text(verb: str, unit: Any) -> str:
    cluster = _quote(unit.cluster.name)
    tail = (
        f"of Kind {_debug(unit.kind)} with name {_quote(unit.name)} on position {unit.position}"
        f" and with radius {_display_float(unit.radius)} and gravity {float(unit.gravity):.3f}."
    )
    team = getattr(unit, "team", None)
    if team is None:
        return f"{verb} Unit in cluster {cluster} {tail}"
    return f"{verb} Unit in cluster {cluster} and with team {_quote(team.name)} {tail}"


@dataclass(frozen=True)
class FlattiverseEvent:
    """Something that happened in the galaxy, stamped with the time it was seen."""

    timestamp: datetime = field(default_factory=_now, kw_only=True, compare=False)

    def describe(self) -> str:
        """A human-readable description without the timestamp."""
        return type(self).__name__.removesuffix("Event") + "."

    def __str__(self) -> str:
        return f"{_format_stamp(self.timestamp)} {self.describe()}"


@dataclass(frozen=True)
class JoinedPlayerEvent(FlattiverseEvent):
    """A player has joined the galaxy."""

    player: Any

    def describe(self) -> str:
        return (
            f"{_quote(self.player.name)} joined the galaxy with team "
            f"{_quote(_team_name(self.player))} as {_debug(self.player.kind)}"
        )


@dataclass(frozen=True)
class PartedPlayerEvent(FlattiverseEvent):
    """A player has parted the galaxy."""

    player: Any

    def describe(self) -> str:
        return (
            f"{_quote(self.player.name)} parted the galaxy with team "
            f"{_quote(_team_name(self.player))} as {_debug(self.player.kind)}"
        )


@dataclass(frozen=True)
class ControllableInfoRegisteredEvent(FlattiverseEvent):
    """A player unit has been registered."""

    player: Any
    controllable: Any

    def describe(self) -> str:
        return (
            f"Player {_quote(self.player.name)} of Team {_quote(_team_name(self.player))}"
            f" registered controllable {_quote(self.controllable.name)}"
            f" of type {_debug(self.controllable.kind)}"
        )


@dataclass(frozen=True)
class ControllableInfoContinuedEvent(FlattiverseEvent):
    """A player unit continued the game."""

    player: Any
    controllable: Any

    def describe(self) -> str:
        return (
            f"Player {_quote(self.player.name)} of Team {_quote(_team_name(self.player))}"
            f" continued controllable {_quote(self.controllable.name)}"
            f" of type {_debug(self.controllable.kind)}"
        )


@dataclass(frozen=True)
class ControllableInfoDestroyedEvent(FlattiverseEvent):
    """A player unit was destroyed."""

    player: Any
    controllable: Any
    reason: PlayerUnitDestroyedReason

    def describe(self) -> str:
        if self.reason is PlayerUnitDestroyedReason.BY_RULES:
            outcome = "got destroyed due to applied rules"
        elif self.reason is PlayerUnitDestroyedReason.SUICIDED:
            outcome = "suicided"
        else:
            outcome = "got destroyed"
        return f"{_owner_prefix(self.player, self.controllable)} {outcome}."


@dataclass(frozen=True)
class ControllableInfoDestroyedByNeutralCollisionEvent(FlattiverseEvent):
    """A player unit got destroyed by colliding with a neutral unit."""

    player: Any
    controllable: Any
    reason: PlayerUnitDestroyedReason
    colliders_kind: Any
    colliders_name: str

    def describe(self) -> str:
        return (
            f"{_owner_prefix(self.player, self.controllable)} collided with a "
            f"{_debug(self.colliders_kind)} named {_quote(self.colliders_name)}."
        )


@dataclass(frozen=True)
class ControllableInfoDestroyedByPlayerUnitEvent(FlattiverseEvent):
    """A player unit got destroyed by another player's unit."""

    player: Any
    controllable: Any
    reason: PlayerUnitDestroyedReason
    destroyed_unit: Any
    destroyer_player: Any

    def describe(self) -> str:
        victim = (
            f"Player {_quote(self.player.name)} of Team {_quote(_team_name(self.player))},"
            f" controllable {_quote(self.controllable.name)}"
            f" of type {_debug(self.controllable.kind)}"
        )
        destroyer = _quote(self.destroyer_player.name)
        destroyer_team = _quote(_team_name(self.destroyer_player))
        unit = f"unit {_quote(self.destroyed_unit.name)} of type {_debug(self.destroyed_unit.kind)}"
        reason = self.reason
        if reason is PlayerUnitDestroyedReason.COLLIDED_WITH_ENEMY_PLAYER_UNIT:
            return (
                f"{victim}, got destroyed by colliding with enemy player {destroyer}"
                f" of Team {destroyer_team}, {unit}."
            )
        if reason is PlayerUnitDestroyedReason.COLLIDED_WITH_FRIENDLY_PLAYER_UNIT:
            return f"{victim}, got destroyed by colliding with friendly player {destroyer}, {unit}."
        if reason is PlayerUnitDestroyedReason.SHOT_BY_ENEMY_PLAYER_UNIT:
            return f"{victim}, wa shot by enemy player {destroyer} of Team {destroyer_team}, {unit}."
        if reason is PlayerUnitDestroyedReason.SHOT_BY_FRIENDLY_PLAYER_UNIT:
            return f"{victim}, wa shot by enemy player {destroyer}, {unit}."
        return f"{victim} got destroyed."


@dataclass(frozen=True)
class ControllableInfoClosedEvent(FlattiverseEvent):
    """A player unit was unregistered."""

    player: Any
    controllable: Any

    def describe(self) -> str:
        return (
            f"Player {_quote(self.player.name)} of Team {_quote(_team_name(self.player))}"
            f" closed/disposed controllable {_quote(self.controllable.name)}"
            f" of type {_debug(self.controllable.kind)}"
        )


@dataclass(frozen=True)
class NewUnitEvent(FlattiverseEvent):
    """A unit came into view."""

    unit: Any

    def describe(self) -> str:
        return _unit_text("New", self.unit)


@dataclass(frozen=True)
class UpdatedUnitEvent(FlattiverseEvent):
    """A unit in view has been updated."""

    unit: Any

    def describe(self) -> str:
        return _unit_text("Updated", self.unit)


@dataclass(frozen=True)
class RemovedUnitEvent(FlattiverseEvent):
    """A unit is no longer in view."""

    unit: Any

    def describe(self) -> str:
        return _unit_text("Removed", self.unit)


@dataclass(frozen=True)
class GalaxyChatEvent(FlattiverseEvent):
    """A chat message sent to the whole galaxy."""

    player: Any
    destination: Any
    message: str

    def describe(self) -> str:
        return f"<[{_team_name(self.player)}]{self.player.name}> {self.message}"


@dataclass(frozen=True)
class TeamChatEvent(FlattiverseEvent):
    """A chat message sent to the team."""

    player: Any
    destination: Any
    message: str

    def describe(self) -> str:
        return (
            f"<[{_team_name(self.player)}]{self.player.name}->{self.destination.name}> "
            f"{self.message}"
        )


@dataclass(frozen=True)
class PlayerChatEvent(FlattiverseEvent):
    """A private chat message from a player."""

    player: Any
    destination: Any
    message: str

    def describe(self) -> str:
        return (
            f"<[{_team_name(self.player)}]{self.player.name}->{self.destination.name}> "
            f"{self.message}"
        )


@dataclass(frozen=True)
class ConnectionTerminatedEvent(FlattiverseEvent):
    """The connection has been terminated."""

    message: Optional[str] = None

    def describe(self) -> str:
        if self.message is None:
            return "Connection terminated."
        return f"Connection terminated: {self.message}"


@dataclass(frozen=True)
class GalaxyTickEvent(FlattiverseEvent):
    """A tick of the galaxy happened."""

    tick: int

    def describe(self) -> str:
        return f"Tick/Tack #{self.tick}"


@dataclass(frozen=True)
class PingMeasuredEvent(FlattiverseEvent):
    """The round trip time to the server has been measured."""

    ping: timedelta

    def describe(self) -> str:
        return f"Ping measured: {_format_duration(self.ping)}"


@dataclass(frozen=True)
class RespondedToPingMeasurementEvent(FlattiverseEvent):
    """The connector answered a ping challenge of the server."""

    challenge: int

    def describe(self) -> str:
        return f"Responded to Ping measurement: {self.challenge}"


@dataclass(frozen=True)
class UpdatedGalaxyEvent(FlattiverseEvent):
    """The galaxy settings have been updated."""

    galaxy: Any

    def describe(self) -> str:
        return f"Updated galaxy: {_quote(self.galaxy.name)}"


@dataclass(frozen=True)
class UpdatedTeamEvent(FlattiverseEvent):
    """A team has been created or updated."""

    team: Any

    def describe(self) -> str:
        return f"Updated team: {_quote(self.team.name)}"


@dataclass(frozen=True)
class DeactivatedTeamEvent(FlattiverseEvent):
    """A team has been removed."""

    team: Any

    def describe(self) -> str:
        return f"Deactivated team: {_quote(self.team.name)}"


@dataclass(frozen=True)
class UpdatedClusterEvent(FlattiverseEvent):
    """A cluster has been created or updated."""

    cluster: Any

    def describe(self) -> str:
        return f"Updated cluster: {_quote(self.cluster.name)}"


@dataclass(frozen=True)
class DeactivatedClusterEvent(FlattiverseEvent):
    """A cluster has been removed."""

    cluster: Any

    def describe(self) -> str:
        return f"Deactivated cluster: {_quote(self.cluster.name)}"


@dataclass(frozen=True)
class UpdatedPlayerEvent(FlattiverseEvent):
    """A player's data has been updated."""

    player: Any

    def describe(self) -> str:
        return f"Updated player: {_quote(self.player.name)}"