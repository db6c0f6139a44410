# villagesim

A small agent-based simulation of a medieval village. Villagers take
gathering quests from bulletin boards. They harvest bushes, wells and trees and
carry what they gather to storage buildings. When they get hungry or thirsty,
they drop their work to fetch food or water. A manager watches the stored
resources and posts new quests when stocks run low.

The package is a plain library that depends only on the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building blocks

- `villagesim.events.Signal`: a multicast event.
  - `connect` adds a handler. Connecting the same handler twice does nothing.
  - `disconnect` removes a handler and raises `ValueError` if it is not
    connected.
  - `emit` calls every handler in the order they were connected.
- `villagesim.resources`:
  - `ResourceType` has the members `BERRIES`, `WOOD` and `WATER`, plus
    `ERROR`, which stands for "none".
  - `Resource` pairs a type with an amount.
  - `Quest` is a request for an amount of one resource. Sorting quests puts
    the larger amounts first. The default `Quest()` is empty (`is_empty`).
- `villagesim.inventory.Inventory`: amounts of each resource, starting at zero
  for berries, wood and water.
  - `add`, `extract` and `set` announce the new amount through
    `on_resource_changed`. Adding zero does nothing and announces nothing.
  - `extract` needs the amount to be strictly less than what is held;
    otherwise it raises `InsufficientResourcesError`.
  - `reset` sets everything to zero without announcing it.
  - `amount(type)` returns what is held, or 0 for a type never stored.
  - `items()` iterates over `(type, amount)` pairs.
- `villagesim.stats.PawnStats`: hunger, thirst, energy and happiness.
  - Each stat is clamped to the range 0 to 100. The `modify_*` methods emit
    the matching `on_*_changed` signal when the value actually changes.
  - `decrease()` applies one second of decay. It then sets the `hungry`,
    `thirsty`, `tired` and `sad` flags from their thresholds and emits
    `on_state_changed`.
  - `advance(seconds)` calls `decrease()` once for every whole second that
    has passed and returns how many times it did so.
- `villagesim.pathfinding`:
  - `Node` holds a position, a grid key and its neighbours.
  - `heuristic` is the Manhattan distance between two grid keys.
  - `Pathfinder.find_path(start, goal)` runs an A* search. It returns the
    list of nodes from start to goal, or an empty list if the goal cannot be
    reached.
  - `find_closest_node(location)` raises `LookupError` if there are no
    nodes.
  - `add_node_at_position(position)` adds a node keyed by the rounded x and
    y, and links it to every node within twice the node separation.
- `villagesim.navgrid.NodeGridBuilder`: builds the node grid by breadth-first
  flood fill from a starting point.
  - It takes two callbacks: `is_floor(position)` and `is_clear(start, end)`.
  - `generate` returns the node map.
  - `build_pathfinder` wraps the node map in a `Pathfinder` and emits
    `on_node_map_ready`.
- `villagesim.workplace`: places where resources are gathered.
  - `WorkPlace` is the base class. `BushWorkPlace` gives berries,
    `WellWorkPlace` gives water and `TreeWorkPlace` gives wood.
  - `take_resources(now)` hands out the resource. A workplace that is not
    infinite is then used up. If its `respawn_time` is positive it grows back
    once `update(now)` is called at or after `now + respawn_time`.
  - `WorkPlacePool.add_from_scene` adds workplaces and gives each one a node
    in the pathfinder.
- `villagesim.storage`: `StorageBuilding` has an `Inventory`.
  `StorageBuildingPool.add_from_scene` registers the buildings with the
  pathfinder.
- `villagesim.bulletin`:
  - `BulletinBoard.add_quest` posts a quest and emits `on_quest_available`.
  - `get_quest` returns the largest quest and emits `on_quest_obtained`. If
    the board has no quests it returns an empty `Quest()`.
  - `BulletinBoardPool.add_from_scene` registers the boards and then emits
    `on_initialized`.
- `villagesim.manager`:
  - `AIManager` copies every storage inventory into its own. While
    `sending_quests` is true, each `tick()` splits the shortfall below 50 of
    each resource into quests of at most 15. It posts each quest that is not
    already active to a random board, and raises `LookupError` if there are
    no boards. A quest taken from a board stops being active.
  - `PoolManager` holds the three pools and creates any that are not given.
- `villagesim.controller.AIController`: `possess(agent)` seeds a blackboard
  dict of decision flags, and `unpossess()` stops it.
- `villagesim.agent.Villager`: a villager with an inventory, stats, a current
  quest and a path. It is possessed by its own controller.
  - `on_overlap(other, now)` acts only on the current `Target`. At a storage
    building it deposits or fetches supplies, at a board it takes a quest,
    and at a workplace it harvests.
  - `create_movement_path(target)` plans a path with the pathfinder.
  - `move_to(location)` moves the villager there at once.
- `villagesim.tasks`: the behaviour steps.
  - The steps are `get_task`, `find_nearest_bulletin_board`,
    `find_nearest_work_site`, `execute_work`, `find_nearest_storage`,
    `store_items`, `get_items` and `consume_directly`. Each takes a villager
    and returns a `TaskResult`.
  - `PathFollower` walks a villager along its path, one node per `tick()`.

## Example: pathfinding

```python
from villagesim.navgrid import NodeGridBuilder

builder = NodeGridBuilder(
    is_floor=lambda pos: abs(pos[0]) <= 1000 and abs(pos[1]) <= 1000,
    is_clear=lambda start, end: True,
    separation_x=250,
    separation_y=250,
)
pathfinder = builder.build_pathfinder((0.0, 0.0, 0.0))
start = pathfinder.find_closest_node((0.0, 0.0, 0.0))
goal = pathfinder.find_closest_node((1000.0, 1000.0, 0.0))
path = pathfinder.find_path(start, goal)
```

## Example: quests

```python
from villagesim.bulletin import BulletinBoard
from villagesim.resources import Quest, ResourceType

board = BulletinBoard((0.0, 0.0, 0.0))
board.add_quest(Quest(ResourceType.WOOD, 5))
board.add_quest(Quest(ResourceType.BERRIES, 15))
print(board.get_quest())   # the berries quest: larger amounts come first
```

## What it does not do

- It has no rendering, physics or collision detection. The floor and
  line-of-sight checks are callbacks that you supply. Arrival at a target is
  reported by calling `Villager.on_overlap` yourself.
- It has no behaviour-tree runner and no main loop. You decide the order in
  which the `tasks` steps run, and you drive time by calling `PawnStats.advance`,
  `WorkPlace.update` and `AIManager.tick`.
- It has no command-line program and saves nothing to disk.