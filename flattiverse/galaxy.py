"""A galaxy: its state plus the handlers that turn server messages into events."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from flattiverse.controllable_info import ControllableInfo
from flattiverse.errors import GameError, GameErrorKind
from flattiverse.events import (
    ControllableInfoClosedEvent,
    ControllableInfoContinuedEvent,
    ControllableInfoDestroyedByNeutralCollisionEvent,
    ControllableInfoDestroyedByPlayerUnitEvent,
    ControllableInfoDestroyedEvent,
    ControllableInfoRegisteredEvent,
    FlattiverseEvent,
    GalaxyChatEvent,
    GalaxyTickEvent,
    NewUnitEvent,
    PlayerChatEvent,
    RemovedUnitEvent,
    RespondedToPingMeasurementEvent,
    TeamChatEvent,
    UpdatedUnitEvent,
)
from flattiverse.galaxy_state import GalaxyState
from flattiverse.kinds import PlayerUnitDestroyedReason

_log = logging.getLogger(__name__)


class Galaxy(GalaxyState):
    """A connected galaxy.

    Events produced for the user are put into ``events``; putting ``None``
    into it marks the end of the connection.
    """

    AUTH_ANONYMOUS = "0" * 64
    URI_BASE = "www.flattiverse.com"
    URI_GALAXY_DEFAULT = "wss://www.flattiverse.com/game/galaxies/0"

    def __init__(self, connection: Any) -> None:
        super().__init__(connection)
        self.events: "asyncio.Queue[Optional[FlattiverseEvent]]" = asyncio.Queue()

    async def chat(self, message: str) -> None:
        """Send a chat message to all players in this galaxy."""
        await self.connection.chat_galaxy(message)

    def ping_pong(self, challenge: int) -> RespondedToPingMeasurementEvent:
        """Answer a ping challenge of the server."""
        _log.debug("Responding to ping with challenge=%#06x", challenge)
        self.connection.respond_to_ping(challenge)
        return RespondedToPingMeasurementEvent(challenge=challenge)

    def controllable_info_new(
        self, player: int, kind: Any, id: int, name: str, alive: bool
    ) -> ControllableInfoRegisteredEvent:
        owner = self.get_player(player)
        info = ControllableInfo.from_packet(kind, self, owner, id, name, alive)
        owner.controllable_infos.populate(info)
        return ControllableInfoRegisteredEvent(player=owner, controllable=info)

    def controllable_info_alive(self, player: int, id: int) -> ControllableInfoContinuedEvent:
        owner = self.get_player(player)
        info = owner.get_controllable_info(id)
        info.set_alive()
        return ControllableInfoContinuedEvent(player=owner, controllable=info)

    def controllable_info_dead_by_reason(
        self, player: int, id: int, reason: PlayerUnitDestroyedReason
    ) -> ControllableInfoDestroyedEvent:
        owner = self.get_player(player)
        info = owner.get_controllable_info(id)
        info.set_dead()
        return ControllableInfoDestroyedEvent(player=owner, controllable=info, reason=reason)

    def controllable_info_dead_by_neutral_collision(
        self, player: int, id: int, colliders_kind: Any, colliders_name: str
    ) -> ControllableInfoDestroyedByNeutralCollisionEvent:
        owner = self.get_player(player)
        info = owner.get_controllable_info(id)
        info.set_dead()
        return ControllableInfoDestroyedByNeutralCollisionEvent(
            player=owner,
            controllable=info,
            reason=PlayerUnitDestroyedReason.COLLIDED_WITH_NEUTRAL_UNIT,
            colliders_kind=colliders_kind,
            colliders_name=colliders_name,
        )

    def controllable_info_dead_by_player_unit(
        self,
        player: int,
        id: int,
        reason: PlayerUnitDestroyedReason,
        causer: int,
        causer_controllable_info: int,
    ) -> ControllableInfoDestroyedByPlayerUnitEvent:
        owner = self.get_player(player)
        info = owner.get_controllable_info(id)
        info.set_dead()
        destroyer = self.get_player(causer)
        destroyer_unit = destroyer.get_controllable_info(causer_controllable_info)
        return ControllableInfoDestroyedByPlayerUnitEvent(
            player=owner,
            controllable=info,
            reason=reason,
            destroyed_unit=destroyer_unit,
            destroyer_player=destroyer,
        )

    def controllable_info_removed(
        self, player: int, id: int
    ) -> Optional[ControllableInfoClosedEvent]:
        """Drop a controllable info; None if the player has no such info."""
        owner = self.get_player(player)
        info = owner.controllable_infos.remove_opt(id)
        if info is None:
            _log.error("Failed to remove ControllableInfo %r: it does not exist for %r.", id, owner)
            return None
        return ControllableInfoClosedEvent(player=owner, controllable=info)

    def unit_new(self, cluster: int, unit: Any) -> NewUnitEvent:
        """Add a unit that came into view to its cluster."""
        self.get_cluster(cluster).add_unit(unit)
        return NewUnitEvent(unit=unit)

    def unit_updated_movement(
        self, cluster: int, name: str, reader: Any
    ) -> Optional[UpdatedUnitEvent]:
        unit = self.get_cluster(cluster).get_unit_opt(name)
        if unit is None:
            _log.error("Failed to find unit with name %r", name)
            return None
        unit.update_movement(reader)
        return UpdatedUnitEvent(unit=unit)

    def unit_removed(self, cluster: int, name: str) -> Optional[RemovedUnitEvent]:
        unit = self.get_cluster(cluster).remove_unit(name)
        if unit is None:
            _log.error("Failed to remove unit with name %r", name)
            return None
        return RemovedUnitEvent(unit=unit)

    def universe_tick(self, number: int) -> GalaxyTickEvent:
        return GalaxyTickEvent(tick=number)

    def chat_galaxy(self, player: int, message: str) -> GalaxyChatEvent:
        return GalaxyChatEvent(player=self.get_player(player), destination=self, message=message)

    def chat_team(self, player: int, message: str) -> TeamChatEvent:
        return TeamChatEvent(
            player=self.get_player(player), destination=self.player, message=message
        )

    def chat_player(self, player: int, message: str) -> PlayerChatEvent:
        return PlayerChatEvent(
            player=self.get_player(player), destination=self.player, message=message
        )

    def _terminated(self) -> GameError:
        # Keep the end marker so every later call reports the same.
        self.events.put_nowait(None)
        self.active = False
        return GameError(GameErrorKind.CONNECTION_TERMINATED)

    async def next_event(self) -> FlattiverseEvent:
        """Wait for the next event; raises once the connection has ended."""
        event = await self.events.get()
        if event is None:
            raise self._terminated()
        return event

    def poll_next_event(self) -> Optional[FlattiverseEvent]:
        """Return the next event if one is waiting, else None."""
        try:
            event = self.events.get_nowait()
        except asyncio.QueueEmpty:
            return None
        if event is None:
            raise self._terminated()
        return event