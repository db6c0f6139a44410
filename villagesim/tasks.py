"""Behaviour steps a villager runs through, each reporting how it went."""

from __future__ import annotations

import enum
import logging
import math
from typing import Any, Optional

from .bulletin import BulletinBoard
from .resources import Quest
from .storage import StorageBuilding
from .workplace import WorkPlace

logger = logging.getLogger(__name__)

ARRIVAL_DISTANCE = 100.0


class TaskResult(enum.Enum):
    """Outcome of running a behaviour step."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


def _set_flags(agent: Any, **flags: bool) -> None:
    agent.blackboard.update(flags)


def consume_directly(agent: Any) -> TaskResult:
    """Eat or drink from the target workplace and go back to looking for work."""
    if agent is None:
        return TaskResult.FAILED
    workplace = agent.blackboard.get("Target")
    if not isinstance(workplace, WorkPlace):
        return TaskResult.FAILED

    agent.consume_resource_directly(workplace.resource_type, workplace.resource_amount)
    agent.check_if_hungry()

    _set_flags(
        agent,
        Ignoring=False,
        DoingTask=False,
        GettingTask=True,
        Working=True,
        StoringItems=False,
    )
    agent.quest = Quest()
    return TaskResult.SUCCEEDED


def execute_work(agent: Any) -> TaskResult:
    """Succeed once the villager carries what its quest asks for."""
    if agent is None:
        return TaskResult.FAILED
    quest = agent.quest
    if agent.inventory.amount(quest.type) < quest.amount:
        return TaskResult.FAILED
    _set_flags(agent, DoingTask=False, GettingTask=False, StoringItems=True)
    return TaskResult.SUCCEEDED


def _closest(agent: Any, candidates: list[Any]) -> tuple[Optional[Any], float]:
    closest = None
    best = math.inf
    for candidate in candidates:
        distance = agent.distance_to(candidate)
        if distance < best:
            best = distance
            closest = candidate
    return closest, best


def find_nearest_bulletin_board(agent: Any) -> TaskResult:
    """Target the closest board that has quests; stop working if none has any."""
    if agent is None:
        return TaskResult.FAILED
    boards: list[BulletinBoard] = list(agent.board_pool)
    if not boards:
        return TaskResult.FAILED

    closest, _ = _closest(agent, [board for board in boards if board.quests])
    if closest is not None:
        agent.create_movement_path(closest)
        agent.blackboard["Target"] = closest
    else:
        agent.blackboard["Working"] = False
    return TaskResult.SUCCEEDED


def find_nearest_storage(agent: Any) -> TaskResult:
    """Target the closest storage building."""
    if agent is None:
        return TaskResult.FAILED
    storages: list[StorageBuilding] = list(agent.storage_pool)
    closest, _ = _closest(agent, storages)
    if closest is None:
        return TaskResult.FAILED
    agent.create_movement_path(closest)
    agent.blackboard["Target"] = closest
    return TaskResult.SUCCEEDED


def find_nearest_work_site(agent: Any) -> TaskResult:
    """Target the closest available workplace yielding the quest's resource.

    The workplace targeted before is passed over.
    """
    if agent is None:
        return TaskResult.FAILED
    workplaces: list[WorkPlace] = list(agent.workplace_pool)
    if not workplaces:
        return TaskResult.FAILED

    previous = agent.blackboard.get("Target")
    candidates = [
        workplace
        for workplace in workplaces
        if workplace.resource_type is agent.quest.type
        and workplace.resource_available
        and workplace is not previous
    ]
    closest, distance = _closest(agent, candidates)
    logger.info("Closest workplace distance: %f", distance)

    if closest is None:
        return TaskResult.FAILED
    agent.create_movement_path(closest)
    agent.blackboard["Target"] = closest
    return TaskResult.SUCCEEDED


def get_items(agent: Any) -> TaskResult:
    """Needs are met: drop food and water errands and look for work again."""
    if agent is None:
        return TaskResult.FAILED
    _set_flags(
        agent,
        GettingWater=False,
        GettingFood=False,
        Working=True,
        DoingTask=False,
        GettingTask=True,
        StoringItems=False,
    )
    return TaskResult.SUCCEEDED


def get_task(agent: Any) -> TaskResult:
    """A task has been taken: start doing it."""
    if agent is None:
        return TaskResult.FAILED
    _set_flags(agent, DoingTask=True, GettingTask=False, StoringItems=False)
    return TaskResult.SUCCEEDED


def store_items(agent: Any) -> TaskResult:
    """Items are stored: look for the next task."""
    if agent is None:
        return TaskResult.FAILED
    _set_flags(
        agent, DoingTask=False, GettingTask=True, Working=True, StoringItems=False
    )
    return TaskResult.SUCCEEDED


class PathFollower:
    """Walks a villager along its planned path, node by node.

    ``start`` begins the walk; each ``tick`` moves on to the next node once
    the villager is within ``ARRIVAL_DISTANCE`` of the current one. Both
    return the task's state, which becomes final once the path is done.
    """

    def __init__(self, agent: Any) -> None:
        self.agent = agent
        self.result: Optional[TaskResult] = None

    def start(self) -> TaskResult:
        if self.agent is None or not self.agent.path:
            logger.warning("No path found on the villager.")
            self.result = TaskResult.FAILED
            return self.result
        self.agent.current_node_index = 0
        self.result = TaskResult.IN_PROGRESS
        self._move_to_next_node()
        return self.result

    def tick(self) -> TaskResult:
        if self.result is None:
            raise RuntimeError("the path follower has not been started")
        if self.result is not TaskResult.IN_PROGRESS:
            return self.result
        if self.agent is None:
            self.result = TaskResult.FAILED
            return self.result
        if (
            math.dist(self.agent.location, self.agent.current_target_location)
            < ARRIVAL_DISTANCE
        ):
            self._move_to_next_node()
        return self.result

    def _move_to_next_node(self) -> None:
        agent = self.agent
        if agent.current_node_index >= len(agent.path):
            self.result = TaskResult.SUCCEEDED
            return
        node = agent.path[agent.current_node_index]
        if node is None:
            self.result = TaskResult.FAILED
            return
        agent.current_target_location = node.position
        agent.move_to(node.position)
        agent.current_node_index += 1