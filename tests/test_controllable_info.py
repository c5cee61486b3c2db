import gc

import pytest

from flattiverse.controllable_info import ControllableInfo, ControllableKind
from flattiverse.errors import GameError, GameErrorKind, InvalidArgumentKind


class _Galaxy:
    pass


class _Player:
    pass


@pytest.fixture
def owners():
    return _Galaxy(), _Player()


@pytest.mark.parametrize("kind", list(ControllableKind))
def test_from_packet_keeps_kind_and_values(owners, kind):
    galaxy, player = owners
    info = ControllableInfo.from_packet(kind, galaxy, player, 7, "ship", True)
    assert info.kind is kind
    assert info.id == 7
    assert info.name == "ship"
    assert info.alive is True
    assert info.active is True
    assert info.galaxy is galaxy
    assert info.player is player


def test_from_packet_rejects_other_kinds(owners):
    galaxy, player = owners
    with pytest.raises(GameError) as caught:
        ControllableInfo.from_packet("sun", galaxy, player, 1, "x", False)
    assert caught.value.kind is GameErrorKind.INVALID_ARGUMENT
    assert caught.value.detail == (InvalidArgumentKind.UNKNOWN, "kind")


def test_alive_toggles(owners):
    galaxy, player = owners
    info = ControllableInfo(galaxy, player, 2, "a", False, ControllableKind.CLASSIC_SHIP_PLAYER_UNIT)
    info.set_alive()
    assert info.alive is True
    info.set_dead()
    assert info.alive is False
    assert info.active is True


def test_deactivate_clears_alive_and_active(owners):
    galaxy, player = owners
    info = ControllableInfo(galaxy, player, 3, "b", True, ControllableKind.NEW_SHIP_PLAYER_UNIT)
    info.deactivate()
    assert (info.alive, info.active) == (False, False)


def test_missing_player_raises_reference_error():
    galaxy = _Galaxy()
    player = _Player()
    info = ControllableInfo(galaxy, player, 4, "c", True, ControllableKind.NEW_SHIP_PLAYER_UNIT)
    assert info.player is player
    del player
    gc.collect()
    with pytest.raises(ReferenceError):
        info.player
    assert info.galaxy is galaxy