"""A villager: needs, inventory, current quest and reactions to what it meets."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from .bulletin import BulletinBoard, BulletinBoardPool
from .controller import AIController
from .inventory import InsufficientResourcesError, Inventory
from .pathfinding import Node, Pathfinder, Vector
from .resources import Quest, ResourceType
from .stats import PawnStats
from .storage import StorageBuilding, StorageBuildingPool
from .workplace import WorkPlace, WorkPlacePool

logger = logging.getLogger(__name__)

STORAGE_TAKE_AMOUNT = 20
FORCED_QUEST_AMOUNT = 10
CONSUME_RESTORE = 100


def _location_of(thing: Any) -> Vector:
    location = getattr(thing, "location", thing)
    x, y, z = (float(value) for value in location)
    return (x, y, z)


class Villager:
    """An AI-driven villager.

    Its controller's blackboard holds the decision flags; its stats decay over
    time and every decay re-evaluates whether it should fetch food or water.
    """

    def __init__(
        self,
        location: Vector,
        pathfinder: Pathfinder,
        workplace_pool: WorkPlacePool,
        storage_pool: StorageBuildingPool,
        board_pool: BulletinBoardPool,
    ) -> None:
        self.location: Vector = _location_of(location)
        self.pathfinder = pathfinder
        self.workplace_pool = workplace_pool
        self.storage_pool = storage_pool
        self.board_pool = board_pool

        self.inventory = Inventory()
        self.stats = PawnStats()
        self.quest = Quest()
        self.target: Optional[Any] = None

        self.path: list[Node] = []
        self.current_node_index = 0
        self.current_target_location: Vector = self.location

        self.controller = AIController()
        self.controller.possess(self)

        self.stats.on_state_changed.connect(self.check_if_hungry)
        self.attach_boards()

    @property
    def blackboard(self) -> dict[str, Any]:
        """The controller's blackboard."""
        return self.controller.blackboard

    def _flag(self, key: str) -> bool:
        return bool(self.blackboard.get(key, False))

    def attach_boards(self) -> None:
        """Listen for new quests on every board currently in the pool."""
        for board in self.board_pool:
            board.on_quest_available.connect(self.new_quest_added)

    def check_if_hungry(self) -> None:
        """Update the blackboard's food and water flags from the stats."""
        board = self.blackboard
        if self.stats.hungry:
            board["Working"] = False
            board["GettingFood"] = True
        if self.stats.thirsty:
            board["Working"] = False
            board["GettingWater"] = True
        if not self.stats.thirsty:
            board["Working"] = True
            board["GettingWater"] = False
        if not self.stats.hungry:
            board["Working"] = True
            board["GettingFood"] = False

    def _deposit_into(self, storage: StorageBuilding) -> None:
        for resource_type, amount in self.inventory.items():
            storage.inventory.add(resource_type, amount)
        self.inventory.reset()

    def _fetch_need(
        self,
        storage: StorageBuilding,
        resource_type: ResourceType,
        restore: Any,
    ) -> None:
        if storage.inventory.amount(resource_type) < STORAGE_TAKE_AMOUNT:
            self._deposit_into(storage)
            self.blackboard["Ignoring"] = True
            self.quest = Quest(resource_type, FORCED_QUEST_AMOUNT)
            return
        try:
            storage.inventory.extract(resource_type, STORAGE_TAKE_AMOUNT)
        except InsufficientResourcesError:
            logger.warning("Storage could not hand out %s.", resource_type.name)
        restore(CONSUME_RESTORE)

    def _meet_storage(self, storage: StorageBuilding) -> None:
        if self._flag("Working"):
            self._deposit_into(storage)
            logger.info("Villager has entered the storage.")
        if self._flag("GettingFood"):
            self._fetch_need(storage, ResourceType.BERRIES, self.stats.modify_hunger)
        if self._flag("GettingWater"):
            self._fetch_need(storage, ResourceType.WATER, self.stats.modify_thirst)

    def _meet_board(self, board: BulletinBoard) -> None:
        logger.info("Villager has entered the bulletin board.")
        quest = board.get_quest()
        if quest.type is ResourceType.ERROR:
            self.blackboard["Working"] = False
        else:
            self.quest = quest

    def _meet_workplace(self, workplace: WorkPlace, now: float) -> None:
        if not workplace.resource_available:
            return
        if not self._flag("Ignoring"):
            received = workplace.take_resources(now)
            self.inventory.add(received.type, received.amount)
        logger.info("Villager has entered the workplace.")

    def on_overlap(self, other: Any, now: float) -> None:
        """React to reaching something; only the current target is acted on."""
        if other is None or other is self:
            return
        if self.blackboard.get("Target") is not other:
            return
        if isinstance(other, StorageBuilding):
            self._meet_storage(other)
        if isinstance(other, BulletinBoard):
            self._meet_board(other)
        if isinstance(other, WorkPlace):
            self._meet_workplace(other, now)

    def consume_resource_directly(
        self, resource_type: ResourceType, amount: int
    ) -> None:
        """Eat or drink straight from a workplace instead of storing."""
        if resource_type is ResourceType.BERRIES:
            self.stats.modify_hunger(CONSUME_RESTORE)
        elif resource_type is ResourceType.WATER:
            self.stats.modify_thirst(CONSUME_RESTORE)

    def new_quest_added(self) -> None:
        """A quest was posted somewhere: go back to work."""
        self.blackboard["Working"] = True

    def create_movement_path(self, target: Any) -> list[Node]:
        """Plan a node path from here to the target and keep it as the path."""
        try:
            begin = self.pathfinder.find_closest_node(self.location)
            end = self.pathfinder.find_closest_node(_location_of(target))
        except LookupError:
            logger.warning("No nodes to plan a path over.")
            self.path = []
            return self.path
        self.path = self.pathfinder.find_path(begin, end)
        return self.path

    def distance_to(self, other: Any) -> float:
        """Straight-line distance to another thing with a location."""
        return math.dist(self.location, _location_of(other))

    def move_to(self, location: Vector) -> None:
        """Walk to a location; the move completes at once."""
        destination = _location_of(location)
        self.current_target_location = destination
        self.location = destination

    def __repr__(self) -> str:
        return f"Villager(location={self.location!r}, quest={self.quest!r})"