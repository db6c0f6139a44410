"""The controller that drives a villager's decision state."""

from __future__ import annotations

from typing import Any, Optional

INITIAL_FLAGS: dict[str, bool] = {
    "GettingTask": True,
    "Working": True,
    "DoingTask": False,
    "StoringItems": False,
    "GettingFood": False,
    "GettingWater": False,
    "Ignoring": False,
}


class AIController:
    """Owns a villager's blackboard and whether its behaviour is running.

    The blackboard is a plain mapping of key to value; absent flags read as
    false through ``blackboard.get(key, False)``.
    """

    def __init__(self) -> None:
        self.blackboard: dict[str, Any] = {}
        self.agent: Optional[Any] = None
        self.running = False

    def possess(self, agent: Any) -> None:
        """Take control of an agent, seed its blackboard and start behaviour."""
        if agent is None:
            raise ValueError("cannot possess a missing agent")
        self.agent = agent
        self.blackboard = {
            "SelfActor": agent,
            "Target": getattr(agent, "target", None),
            **INITIAL_FLAGS,
        }
        self.running = True

    def unpossess(self) -> None:
        """Stop driving the agent's behaviour."""
        self.running = False
        self.agent = None