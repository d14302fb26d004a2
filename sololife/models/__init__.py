"""Data models module for SoloLife."""

# Stats
from sololife.models.stats import Attribute, PlayerStats, exp_to_next_level

# Quests
from sololife.models.quest import (
    Quest,
    QuestReward,
    quests_from_json,
    quests_from_records,
    quests_to_json,
    quests_to_records,
)

# Player class
from sololife.models.player_class import PlayerClass

# Notifications
from sololife.models.notifications import Notification, NotificationKind

__all__ = [
    # Stats
    "Attribute",
    "PlayerStats",
    "exp_to_next_level",
    # Quests
    "Quest",
    "QuestReward",
    "quests_from_json",
    "quests_from_records",
    "quests_to_json",
    "quests_to_records",
    # Player class
    "PlayerClass",
    # Notifications
    "Notification",
    "NotificationKind",
]
