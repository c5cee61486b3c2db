# flattiverse

A Python library that keeps the client-side state of a flattiverse galaxy: its settings, teams,
clusters, players and the controllables those players own. Each update to that state returns a
typed event object. Failures are raised as `GameError` exceptions.

The library has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `flattiverse.kinds` has the byte-coded enumerations `AccountStatus`, `PlayerKind`, `GameMode`
  and `PlayerUnitDestroyedReason`. Each one has a `from_code` class method. For `PlayerKind`,
  `GameMode` and `PlayerUnitDestroyedReason`, a byte that is not listed gives an unknown member
  that keeps the code, and its `known` property is `False`. For `AccountStatus`, a byte that is
  not listed gives `AccountStatus.UNKNOWN`. A value outside 0–255 raises `ValueError`.
- `flattiverse.errors`
  - `GameError` is the exception the library raises. Its `kind` is a `GameErrorKind`, whose
    value is the error's wire code. `GameErrorKind(code)` with an unlisted code gives an unknown
    kind.
  - Its `detail` carries extra information, depending on the kind:
    - an `AccountStatus` for `WRONG_ACCOUNT_STATE`;
    - a `PlayerKind` for `SERVER_FULL_OF_PLAYER_KIND`;
    - an `(InvalidArgumentKind, parameter)` pair for `INVALID_ARGUMENT`;
    - a `(value, type_name)` pair for `INVALID_PRIMITIVE_VALUE`.
  - `str(error)` gives the numbered message, for example
    `[0x10] Specified element not found.`
- `flattiverse.holders` provides two fixed-capacity tables indexed by small integer ids:
  - `UniversalHolder` is a plain table of slots, with lookup by index or by `name`.
  - `UniversalArcHolder` is thread-safe. It stores objects in the slot named by their `id` and
    counts its entries. `get` and `remove` raise `KeyError` for an empty slot. `get_opt` and
    `remove_opt` return `None` instead.
- The galaxy hierarchy is made up of these classes:
  - `flattiverse.team.Team`
  - `flattiverse.player.Player`
  - `flattiverse.cluster.Cluster`, which holds the units seen in it by name
  - `flattiverse.controllable_info.ControllableInfo`, whose kind is a `ControllableKind`
  These objects keep weak references to the objects they belong to. If one of those is gone,
  reading it raises `ReferenceError`.
- `flattiverse.events` has `FlattiverseEvent` and its subclasses, for example
  `JoinedPlayerEvent`, `GalaxyChatEvent`, `GalaxyTickEvent` and `NewUnitEvent`. Every event
  records the time it was created in `timestamp`. `describe()` gives a one-line description, and
  `str(event)` puts the timestamp in front of it.
- `flattiverse.galaxy_state` has `GalaxyState` and `GalaxyLimits`.
  - `GalaxyState` applies updates to the galaxy, its teams, its clusters and its players, and
    returns the matching events. It always contains the "Spectators" team with id 32.
  - `GalaxyLimits` holds the player, spectator, ship and base limits.
- `flattiverse.galaxy` has `Galaxy`, which extends `GalaxyState`. It adds:
  - chat;
  - the ping answer;
  - tracking of controllable infos and units;
  - an `asyncio.Queue` of events, read with `next_event()` and `poll_next_event()`.

## Example

A `Galaxy` is given a connection object. That object must provide the coroutines
`chat_galaxy(message)`, `chat_team(team_id, message)` and `chat_player(player_id, message)`,
and the method `respond_to_ping(challenge)`.

```python
from flattiverse.galaxy import Galaxy
from flattiverse.kinds import PlayerKind


class Connection:
    async def chat_galaxy(self, message): ...
    async def chat_team(self, team_id, message): ...
    async def chat_player(self, player_id, message): ...
    def respond_to_ping(self, challenge): ...


galaxy = Galaxy(Connection())
galaxy.update_team(0, 255, 0, 0, "Red")
joined = galaxy.create_player(0, PlayerKind.PLAYER, 0, "alice", 12.5)
galaxy.setup_self(0)

print(joined.describe())                 # "alice" joined the galaxy with team "Red" as Player
print(galaxy.universe_tick(7).describe())  # Tick/Tack #7
```

## Consuming events

The handler methods return events, and they do not queue them. Whatever drives the galaxy puts
those events into `galaxy.events`. Putting `None` into the queue marks the end of the
connection.

```python
from flattiverse.errors import GameError
from flattiverse.events import GalaxyTickEvent


async def log_events(galaxy):
    try:
        while True:
            event = await galaxy.next_event()
            if not isinstance(event, GalaxyTickEvent):
                print(event)
    except GameError as error:
        print(error)
```

`poll_next_event()` returns the next queued event, or `None` if no event is waiting. Once the
end marker has been reached, both `next_event()` and `poll_next_event()` do two things:

- set `galaxy.active` to `False`;
- raise a `GameError` of kind `CONNECTION_TERMINATED`, here and on every later call.

## What this package does not do

- It does not open network connections.
- It does not speak the server's wire protocol.
- It does not log in or create ships.
- It has no command-line program.

Connecting to a server, reading its packets and calling the `Galaxy` handlers are left to the
caller's connection object.

Units are likewise supplied by the caller. `Galaxy.unit_new` stores any object that has a
`name`. `Galaxy.unit_updated_movement` calls the unit's own `update_movement(reader)`. The
unit-event descriptions read these attributes of the unit:

- `cluster`
- `kind`
- `name`
- `position`
- `radius`
- `gravity`
- `team`