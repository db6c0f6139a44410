"""A store of resource amounts that announces every change."""

from __future__ import annotations

from typing import Iterator

from .events import Signal
from .resources import ResourceType


class InsufficientResourcesError(Exception):
    """Raised when more is extracted than an inventory can give."""


class Inventory:
    """Amounts per resource type.

    ``on_resource_changed`` is emitted with ``(resource_type, new_amount)``.
    """

    def __init__(self) -> None:
        self._resources: dict[ResourceType, int] = {
            ResourceType.BERRIES: 0,
            ResourceType.WOOD: 0,
            ResourceType.WATER: 0,
        }
        self.on_resource_changed = Signal()

    def add(self, resource_type: ResourceType, amount: int) -> None:
        """Add to a resource; adding zero changes nothing and emits nothing."""
        if amount == 0:
            return
        value = self._resources.get(resource_type, 0) + amount
        self._resources[resource_type] = value
        self.on_resource_changed.emit(resource_type, value)

    def extract(self, resource_type: ResourceType, amount: int) -> int:
        """Take an amount out, which must be strictly less than what is held."""
        held = self.amount(resource_type)
        if not amount < held:
            raise InsufficientResourcesError(
                f"cannot extract {amount} {resource_type.name} from {held}"
            )
        value = held - amount
        self._resources[resource_type] = value
        self.on_resource_changed.emit(resource_type, value)
        return amount

    def set(self, resource_type: ResourceType, amount: int) -> None:
        """Replace the amount held of a resource."""
        self._resources[resource_type] = amount
        self.on_resource_changed.emit(resource_type, amount)

    def amount(self, resource_type: ResourceType) -> int:
        """The amount held of a resource, zero if it was never stored."""
        return self._resources.get(resource_type, 0)

    def reset(self) -> None:
        """Set every held resource to zero without announcing it."""
        for resource_type in self._resources:
            self._resources[resource_type] = 0

    def items(self) -> Iterator[tuple[ResourceType, int]]:
        """Pairs of resource type and amount, as a snapshot."""
        return iter(list(self._resources.items()))

    def __getitem__(self, resource_type: ResourceType) -> int:
        return self.amount(resource_type)