import gc

import pytest

from flattiverse.controllable_info import ControllableInfo, ControllableKind
from flattiverse.kinds import PlayerKind
from flattiverse.player import Player


class _Connection:
    def __init__(self):
        self.calls = []

    async def chat_player(self, player_id, message):
        self.calls.append((player_id, message))


class _Galaxy:
    def __init__(self):
        self.connection = _Connection()


class _Team:
    pass


@pytest.fixture
def world():
    galaxy = _Galaxy()
    team = _Team()
    player = Player(galaxy, 9, PlayerKind.PLAYER, team, "alice", 12.5)
    return galaxy, team, player


def _info(galaxy, player, id, alive=True):
    return ControllableInfo(galaxy, player, id, f"ship{id}", alive, ControllableKind.CLASSIC_SHIP_PLAYER_UNIT)


def test_player_holds_values(world):
    galaxy, team, player = world
    assert player.id == 9
    assert player.kind is PlayerKind.PLAYER
    assert player.name == "alice"
    assert player.ping == 12.5
    assert player.active is True
    assert player.team is team
    assert player.galaxy is galaxy


def test_update_changes_ping(world):
    _, _, player = world
    player.update(40.0)
    assert player.ping == 40.0


def test_deactivate_marks_player_and_infos(world):
    galaxy, _, player = world
    infos = [player.controllable_infos.populate(_info(galaxy, player, n)) for n in (0, 5)]
    player.deactivate()
    assert player.ping == -1.0
    assert player.active is False
    assert all(not info.active and not info.alive for info in infos)


def test_controllable_info_lookup(world):
    galaxy, _, player = world
    info = player.controllable_infos.populate(_info(galaxy, player, 3))
    assert player.get_controllable_info(3) is info
    assert player.get_controllable_info_opt(3) is info
    assert player.get_controllable_info_opt(4) is None
    assert list(player.iter_controllable_infos()) == [info]


def test_missing_controllable_info_raises(world):
    _, _, player = world
    with pytest.raises(KeyError):
        player.get_controllable_info(1)


def test_team_gone_raises_reference_error():
    galaxy = _Galaxy()
    team = _Team()
    player = Player(galaxy, 1, PlayerKind.SPECTATOR, team, "bob", 0.0)
    assert player.team is team
    del team
    gc.collect()
    with pytest.raises(ReferenceError):
        player.team
    assert player.name == "bob"


@pytest.mark.asyncio
async def test_chat_goes_to_connection_with_player_id(world):
    galaxy, _, player = world
    await player.chat("hi alice")
    assert galaxy.connection.calls == [(9, "hi alice")]