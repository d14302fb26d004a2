"""Game engine package."""

from sololife.engine.notifications import NotificationCenter
from sololife.engine.progression import ProgressionEngine
from sololife.engine.quest_ledger import QuestLedger
from sololife.engine.session import GameSession

__all__ = [
    "GameSession",
    "NotificationCenter",
    "ProgressionEngine",
    "QuestLedger",
]
