"""Agent-based medieval village simulation: quests, resources, needs and pathfinding."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "resources",
    "inventory",
    "stats",
    "pathfinding",
    "navgrid",
    "workplace",
    "storage",
    "bulletin",
    "manager",
    "controller",
    "agent",
    "tasks",
]