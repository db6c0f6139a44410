"""Navigation nodes and A* path search over them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

Vector = tuple[float, float, float]
GridPoint = tuple[int, int]


@dataclass(eq=False)
class Node:
    """A walkable point: world position, grid key and reachable neighbours.

    Nodes compare and hash by identity so they can key search bookkeeping.
    """

    position: Vector
    grid_position: GridPoint
    neighbors: list[Node] = field(default_factory=list, repr=False)


def heuristic(node_a: Node, node_b: Node) -> int:
    """Manhattan distance between two nodes' grid positions."""
    ax, ay = node_a.grid_position
    bx, by = node_b.grid_position
    return abs(ax - bx) + abs(ay - by)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class Pathfinder:
    """Holds the node map and answers path and nearest-node queries."""

    def __init__(
        self,
        node_map: Optional[Mapping[GridPoint, Node]] = None,
        node_separation: int = 0,
    ) -> None:
        self.node_map: dict[GridPoint, Node] = dict(node_map or {})
        self.node_separation = node_separation

    def find_path(self, start: Node, goal: Node) -> list[Node]:
        """Nodes from start to goal inclusive, or an empty list if unreachable."""
        if start is None or goal is None:
            raise ValueError("find_path needs both a start and a goal node")

        closed: set[Node] = set()
        g_score: dict[Node, float] = {start: 0.0}
        f_score: dict[Node, float] = {start: float(heuristic(start, goal))}
        came_from: dict[Node, Node] = {}
        queue: list[Node] = [start]

        while queue:
            current = queue.pop(0)

            if current is goal:
                path = []
                while current in came_from:
                    path.append(current)
                    current = came_from[current]
                path.append(start)
                path.reverse()
                return path

            closed.add(current)

            for neighbor in current.neighbors:
                if neighbor in closed:
                    continue
                tentative = g_score[current] + math.dist(
                    current.position, neighbor.position
                )
                if neighbor not in g_score or tentative < g_score[neighbor]:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + math.dist(
                        current.position, goal.position
                    )
                    if neighbor not in queue:
                        queue.append(neighbor)

            queue.sort(key=f_score.__getitem__)

        return []

    def find_closest_node(self, location: Iterable[float]) -> Node:
        """The node nearest to a world location; the first wins on ties."""
        point = tuple(location)
        closest: Optional[Node] = None
        best = math.inf
        for node in self.node_map.values():
            distance = math.dist(node.position, point)
            if distance < best:
                best = distance
                closest = node
        if closest is None:
            raise LookupError("the node map holds no nodes")
        return closest

    def add_node_at_position(self, position: Iterable[float]) -> GridPoint:
        """Create a node at a world position and link it to nodes nearby.

        The grid key is the position's x and y rounded to whole numbers. If a
        node already holds that key the map keeps the old one, but the new
        node is still linked to its surroundings.
        """
        x, y, z = (float(value) for value in position)
        grid = (_round_half_up(x), _round_half_up(y))
        new_node = Node(position=(x, y, z), grid_position=grid)

        if grid in self.node_map:
            logger.warning("Node at %s already exists in the node map.", (x, y, z))
        else:
            self.node_map[grid] = new_node

        reach = self.node_separation * 2
        for existing in list(self.node_map.values()):
            if existing is new_node:
                continue
            if math.dist(new_node.position, existing.position) <= reach:
                new_node.neighbors.append(existing)
                existing.neighbors.append(new_node)

        return grid