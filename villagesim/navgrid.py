"""Flood-fills a walkable grid of navigation nodes from a starting point."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable

from .events import Signal
from .pathfinding import GridPoint, Node, Pathfinder, Vector

logger = logging.getLogger(__name__)

FloorProbe = Callable[[Vector], bool]
ClearProbe = Callable[[Vector, Vector], bool]

_DIRECTIONS: tuple[GridPoint, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class NodeGridBuilder:
    """Builds the node map by breadth-first expansion over walkable floor.

    ``is_floor(position)`` says whether a node may stand at a position;
    ``is_clear(start, end)`` says whether two positions can be walked between.
    ``on_node_map_ready`` is emitted once a pathfinder has been built.
    """

    def __init__(
        self,
        is_floor: FloorProbe,
        is_clear: ClearProbe,
        separation_x: int = 250,
        separation_y: int = 250,
    ) -> None:
        self.is_floor = is_floor
        self.is_clear = is_clear
        self.separation_x = separation_x
        self.separation_y = separation_y
        self.node_map: dict[GridPoint, Node] = {}
        self.on_node_map_ready = Signal()

    def generate(self, first_position: Iterable[float]) -> dict[GridPoint, Node]:
        """Expand from a floor position and return the node map keyed by grid."""
        x, y, z = (float(value) for value in first_position)
        start = Node(position=(x, y, z), grid_position=(0, 0))
        node_map: dict[GridPoint, Node] = {start.grid_position: start}
        visited: set[GridPoint] = {start.grid_position}
        queue: deque[Node] = deque([start])

        while queue:
            current = queue.popleft()
            cx, cy, cz = current.position
            gx, gy = current.grid_position

            for dx, dy in _DIRECTIONS:
                grid = (gx + dx, gy + dy)
                position = (
                    cx + dx * self.separation_x,
                    cy + dy * self.separation_y,
                    cz,
                )
                available = self.is_floor(position)
                traversable = self.is_clear(current.position, position)
                if not available:
                    continue

                neighbor = node_map.get(grid)
                if neighbor is None:
                    neighbor = Node(position=position, grid_position=grid)
                    node_map[grid] = neighbor

                if traversable:
                    current.neighbors.append(neighbor)

                if grid not in visited:
                    visited.add(grid)
                    queue.append(neighbor)

        self.node_map = node_map
        return node_map

    def build_pathfinder(self, first_position: Iterable[float]) -> Pathfinder:
        """Generate the grid, hand it to a new pathfinder and announce it.

        If the first position is not on floor the pathfinder starts empty.
        """
        position = tuple(float(value) for value in first_position)
        if self.is_floor(position):
            node_map = self.generate(position)
        else:
            logger.warning("No floor found at %s.", position)
            self.node_map = {}
            node_map = {}
        pathfinder = Pathfinder(node_map, self.separation_x)
        self.on_node_map_ready.emit()
        return pathfinder