"""Bulletin boards where quests are posted and taken, and their pool."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .events import Signal
from .pathfinding import GridPoint, Pathfinder, Vector
from .resources import Quest


class BulletinBoard:
    """Holds posted quests and hands out the largest first.

    ``on_quest_available`` is emitted with no arguments when a quest is
    posted; ``on_quest_obtained`` is emitted with the quest taken.
    """

    def __init__(self, location: Vector = (0.0, 0.0, 0.0)) -> None:
        self.location = tuple(float(value) for value in location)
        self.quests: list[Quest] = []
        self.grid_position: Optional[GridPoint] = None
        self.on_quest_obtained = Signal()
        self.on_quest_available = Signal()

    def get_quest(self) -> Quest:
        """Take the quest with the largest amount, or an empty quest if none."""
        self.quests.sort()
        if not self.quests:
            return Quest()
        quest = self.quests.pop(0)
        self.on_quest_obtained.emit(quest)
        return quest

    def add_quest(self, quest: Quest) -> None:
        """Post a quest and announce it."""
        self.quests.append(quest)
        self.on_quest_available.emit()

    def __repr__(self) -> str:
        return f"BulletinBoard(location={self.location!r}, quests={len(self.quests)})"


class BulletinBoardPool:
    """All bulletin boards in the scene, each linked into the navigation graph.

    ``on_initialized`` is emitted after boards have been added from the scene.
    """

    def __init__(self, pathfinder: Pathfinder) -> None:
        self.pathfinder = pathfinder
        self.boards: list[BulletinBoard] = []
        self.on_initialized = Signal()

    def add_from_scene(self, boards: Iterable[Optional[BulletinBoard]]) -> None:
        """Add boards, skipping missing ones, give each a node, then announce."""
        for board in boards:
            if board is None:
                continue
            self.boards.append(board)
            board.grid_position = self.pathfinder.add_node_at_position(board.location)
        self.on_initialized.emit()

    @property
    def count(self) -> int:
        return len(self.boards)

    def __len__(self) -> int:
        return len(self.boards)

    def __iter__(self) -> Iterator[BulletinBoard]:
        return iter(self.boards)