"""Agents package."""

from sololife.agents.quest_generator import QuestGenerator

__all__ = [
    "QuestGenerator",
]
