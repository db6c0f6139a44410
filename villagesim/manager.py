"""Village-wide coordination: the pool registry and the quest-posting manager."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from .bulletin import BulletinBoardPool
from .inventory import Inventory
from .pathfinding import Pathfinder
from .resources import Quest, ResourceType
from .storage import StorageBuildingPool
from .workplace import WorkPlacePool

LOW_RESOURCE_THRESHOLD = 50
MAX_RESOURCE_PER_QUEST = 15


@dataclass
class PoolManager:
    """Holds the scene's pools, creating any that were not supplied.

    Every pool it creates shares the manager's pathfinder.
    """

    pathfinder: Pathfinder = field(default_factory=Pathfinder)
    bulletin_boards: Optional[BulletinBoardPool] = None
    storages: Optional[StorageBuildingPool] = None
    workplaces: Optional[WorkPlacePool] = None

    def __post_init__(self) -> None:
        if self.bulletin_boards is None:
            self.bulletin_boards = BulletinBoardPool(self.pathfinder)
        if self.storages is None:
            self.storages = StorageBuildingPool(self.pathfinder)
        if self.workplaces is None:
            self.workplaces = WorkPlacePool(self.pathfinder)


class AIManager:
    """Watches the stock in storage and posts quests for what runs low.

    The manager mirrors every storage inventory into its own. While
    ``sending_quests`` is on, each tick splits the shortfall of every resource
    below the threshold into quests of at most ``MAX_RESOURCE_PER_QUEST`` and
    posts those not already active to a randomly chosen bulletin board.
    """

    def __init__(
        self,
        storage_pool: StorageBuildingPool,
        board_pool: BulletinBoardPool,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.storage_pool = storage_pool
        self.board_pool = board_pool
        self.rng = rng if rng is not None else random.Random()
        self.inventory = Inventory()
        self.active_quests: list[Quest] = []
        self.sending_quests = False

        for storage in storage_pool:
            storage.inventory.on_resource_changed.connect(self.update_resources)
        board_pool.on_initialized.connect(self.on_board_pool_ready)

    def on_board_pool_ready(self) -> None:
        """Listen for quests being taken from every board in the pool."""
        for board in self.board_pool:
            board.on_quest_obtained.connect(self.remove_quest)

    def tick(self) -> None:
        """Post quests for every resource below the low-stock threshold."""
        if not self.sending_quests:
            return
        for resource_type, amount in self.inventory.items():
            if amount >= LOW_RESOURCE_THRESHOLD:
                continue
            needed = LOW_RESOURCE_THRESHOLD - amount
            while needed > 0:
                quest = Quest(resource_type, min(needed, MAX_RESOURCE_PER_QUEST))
                if quest not in self.active_quests:
                    self._post(quest)
                needed -= quest.amount

    def _post(self, quest: Quest) -> None:
        boards = self.board_pool.boards
        if not boards:
            raise LookupError("there are no bulletin boards to post quests to")
        boards[self.rng.randrange(len(boards))].add_quest(quest)
        self.active_quests.append(quest)

    def update_resources(self, resource_type: ResourceType, amount: int) -> None:
        """Mirror a storage's new amount of a resource."""
        self.inventory.set(resource_type, amount)

    def remove_quest(self, quest: Quest) -> None:
        """Forget the first matching active quest so it can be posted again."""
        for index, active in enumerate(self.active_quests):
            if active.type is quest.type and active.amount == quest.amount:
                del self.active_quests[index]
                return