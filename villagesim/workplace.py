"""Places where villagers gather resources, and the pool that tracks them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .pathfinding import GridPoint, Pathfinder, Vector
from .resources import Resource, ResourceType


@dataclass(eq=False)
class WorkPlace:
    """A source of one resource that is used up and later grows back.

    Time is passed in explicitly: ``take_resources(now)`` schedules the
    respawn and ``update(now)`` applies it once it is due. A respawn time of
    zero or less schedules nothing, so a finite workplace then stays spent.
    Workplaces compare by identity.
    """

    resource_type: ResourceType = ResourceType.ERROR
    resource_amount: int = 0
    infinite_resource: bool = False
    respawn_time: float = 0.0
    location: Vector = (0.0, 0.0, 0.0)
    resource_available: bool = True
    grid_position: Optional[GridPoint] = None
    _occupied: bool = field(default=False, init=False, repr=False)
    _reset_at: Optional[float] = field(default=None, init=False, repr=False)

    @property
    def occupied(self) -> bool:
        """Whether a villager has reserved this place."""
        return self._occupied

    @property
    def reset_at(self) -> Optional[float]:
        """The time at which the resource grows back, if one is pending."""
        return self._reset_at

    def reserve(self) -> None:
        """Mark the place as taken by a villager."""
        self._occupied = True

    def take_resources(self, now: float) -> Resource:
        """Hand out the resource; a finite place becomes free and spent."""
        if not self.infinite_resource:
            self._occupied = False
            self.resource_available = False
            self._reset_at = now + self.respawn_time if self.respawn_time > 0 else None
        return Resource(self.resource_type, self.resource_amount)

    def reset(self) -> None:
        """Make the resource available again."""
        self.resource_available = True

    def update(self, now: float) -> bool:
        """Apply a pending respawn if it is due; returns whether it happened."""
        if self._reset_at is None or now < self._reset_at:
            return False
        self._reset_at = None
        self.reset()
        return True


@dataclass(eq=False)
class BushWorkPlace(WorkPlace):
    """A bush that yields berries."""

    resource_type: ResourceType = ResourceType.BERRIES


@dataclass(eq=False)
class WellWorkPlace(WorkPlace):
    """A well that yields water."""

    resource_type: ResourceType = ResourceType.WATER


@dataclass(eq=False)
class TreeWorkPlace(WorkPlace):
    """A tree that yields wood."""

    resource_type: ResourceType = ResourceType.WOOD


class WorkPlacePool:
    """All workplaces in the scene, each linked into the navigation graph."""

    def __init__(self, pathfinder: Pathfinder) -> None:
        self.pathfinder = pathfinder
        self.workplaces: list[WorkPlace] = []

    def add_from_scene(self, workplaces: Iterable[Optional[WorkPlace]]) -> None:
        """Add workplaces, skipping missing ones, and give each a node."""
        for workplace in workplaces:
            if workplace is None:
                continue
            self.workplaces.append(workplace)
            workplace.grid_position = self.pathfinder.add_node_at_position(
                workplace.location
            )

    @property
    def count(self) -> int:
        return len(self.workplaces)

    def __len__(self) -> int:
        return len(self.workplaces)

    def __iter__(self) -> Iterator[WorkPlace]:
        return iter(self.workplaces)