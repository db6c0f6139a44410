"""Resource kinds and the quests that request them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ResourceType(enum.Enum):
    """Kinds of resource the village gathers; ERROR marks "none"."""

    ERROR = "Error"
    BERRIES = "Berries"
    WOOD = "Wood"
    WATER = "Water"


@dataclass(frozen=True)
class Resource:
    """An amount of one kind of resource."""

    type: ResourceType
    amount: int


@dataclass(frozen=True)
class Quest:
    """A request for an amount of one resource.

    Quests order so that larger amounts come first.
    """

    type: ResourceType = ResourceType.ERROR
    amount: int = 0

    def __lt__(self, other: Quest) -> bool:
        if not isinstance(other, Quest):
            return NotImplemented
        return self.amount > other.amount

    @property
    def is_empty(self) -> bool:
        """True for the placeholder quest that requests nothing."""
        return self.type is ResourceType.ERROR