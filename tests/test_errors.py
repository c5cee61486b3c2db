import pytest

from flattiverse.errors import GameError, GameErrorKind, InvalidArgumentKind
from flattiverse.kinds import AccountStatus, PlayerKind


def test_fixed_message():
    assert str(GameError(GameErrorKind.CANT_CONNECT)) == (
        "[0x01] Couldn't connect to the flattiverse galaxy."
    )


def test_kind_and_detail_are_kept():
    error = GameError(GameErrorKind.WRONG_ACCOUNT_STATE, AccountStatus.BANNED)
    assert error.kind is GameErrorKind.WRONG_ACCOUNT_STATE
    assert error.detail is AccountStatus.BANNED


def test_wrong_account_state_messages():
    banned = GameError(GameErrorKind.WRONG_ACCOUNT_STATE, AccountStatus.BANNED)
    assert str(banned) == "[0x04] Your account has been banned from using the game."
    missing = GameError(GameErrorKind.WRONG_ACCOUNT_STATE)
    unknown = GameError(GameErrorKind.WRONG_ACCOUNT_STATE, AccountStatus.UNKNOWN)
    assert str(missing) == str(unknown)
    assert "doesn't understand the state submitted" in str(missing)


def test_server_full_messages():
    spectators = GameError(GameErrorKind.SERVER_FULL_OF_PLAYER_KIND, PlayerKind.SPECTATOR)
    assert str(spectators).startswith("[0x08] Server is full of spectators.")
    nothing = GameError(GameErrorKind.SERVER_FULL_OF_PLAYER_KIND)
    assert str(nothing) == "[0x08] Server is full of unknown things."
    odd = GameError(GameErrorKind.SERVER_FULL_OF_PLAYER_KIND, PlayerKind.from_code(0x09))
    assert str(odd) == "[0x08] Server is full of things with code 0x9."


def test_invalid_argument_message():
    error = GameError(
        GameErrorKind.INVALID_ARGUMENT, (InvalidArgumentKind.NAME_IN_USE, "name")
    )
    assert str(error) == '[0x12] Parameter "name" references a name which is already in use.'


def test_invalid_argument_quotes_parameter():
    error = GameError(
        GameErrorKind.INVALID_ARGUMENT, (InvalidArgumentKind.CONTAINED_NAN, 'mov"e')
    )
    assert str(error) == '[0x12] Parameter "mov\\"e" contained a "Not a Number" value.'


@pytest.mark.parametrize(
    "kind", [GameErrorKind.INVALID_ARGUMENT, GameErrorKind.INVALID_PRIMITIVE_VALUE]
)
def test_pair_kinds_need_pair_detail(kind):
    with pytest.raises(TypeError):
        GameError(kind)


def test_invalid_primitive_message():
    error = GameError(GameErrorKind.INVALID_PRIMITIVE_VALUE, ("7", "GameMode"))
    assert str(error) == '[0x??] Value "7" not expected for  "GameMode"'


def test_unknown_code_keeps_code():
    kind = GameErrorKind(0x42)
    assert not kind.known
    assert kind.value == 0x42
    assert str(GameError(kind)) == "[0x42] Unknown error code."


def test_known_code_lookup():
    assert GameErrorKind(0x22) is GameErrorKind.ALL_START_LOCATIONS_ARE_OVERCROWDED
    assert GameErrorKind(0x22).known


def test_code_outside_byte_is_rejected():
    with pytest.raises(ValueError):
        GameErrorKind(0x100)


def test_die_first_message_and_kind():
    error = GameError(GameErrorKind.YOU_NEED_TO_DIE_FIRST)
    assert error.kind is GameErrorKind.YOU_NEED_TO_DIE_FIRST
    assert str(error) == (
        "[0x21] This controllable is alive. The controllable needs to die first."
    )