"""Storage buildings that hold the village's stock, and their pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .inventory import Inventory
from .pathfinding import GridPoint, Pathfinder, Vector


@dataclass(eq=False)
class StorageBuilding:
    """A building with its own inventory; compares by identity."""

    location: Vector = (0.0, 0.0, 0.0)
    inventory: Inventory = field(default_factory=Inventory)
    grid_position: Optional[GridPoint] = None


class StorageBuildingPool:
    """All storage buildings in the scene, each linked into the navigation graph."""

    def __init__(self, pathfinder: Pathfinder) -> None:
        self.pathfinder = pathfinder
        self.storages: list[StorageBuilding] = []

    def add_from_scene(self, storages: Iterable[Optional[StorageBuilding]]) -> None:
        """Add storages, skipping missing ones, and give each a node."""
        for storage in storages:
            if storage is None:
                continue
            self.storages.append(storage)
            storage.grid_position = self.pathfinder.add_node_at_position(
                storage.location
            )

    @property
    def count(self) -> int:
        return len(self.storages)

    def __len__(self) -> int:
        return len(self.storages)

    def __iter__(self) -> Iterator[StorageBuilding]:
        return iter(self.storages)