"""Saves and restores player progress through the preferences store."""

import logging
from typing import Iterable

from pydantic import ValidationError

from sololife.config import DEFAULT_ATTRIBUTE_VALUE, DEFAULT_EXP, DEFAULT_LEVEL
from sololife.errors import InvalidArgumentError
from sololife.models.player_class import PlayerClass
from sololife.models.quest import Quest, quests_from_json, quests_to_json
from sololife.models.stats import Attribute, PlayerStats
from sololife.persistence.preferences import PreferencesStore

logger = logging.getLogger(__name__.split(".")[-1])

LEVEL_KEY = "level"
EXP_KEY = "exp"
QUESTS_KEY = "questsJson"
PLAYER_CLASS_KEY = "playerClass"


class ProgressStore:
    """Reads and writes stats, quests and the selected class by fixed keys."""

    def __init__(self, preferences: PreferencesStore) -> None:
        self.preferences = preferences

    def load_stats(self) -> PlayerStats:
        """Rehydrate stats. Missing or invalid fields take their defaults."""
        values: dict[str, int] = {}
        for attribute in Attribute:
            stored = self.preferences.get_int(attribute.value)
            values[attribute.value] = DEFAULT_ATTRIBUTE_VALUE if stored is None else stored

        level = self.preferences.get_int(LEVEL_KEY)
        exp = self.preferences.get_int(EXP_KEY)
        values[LEVEL_KEY] = DEFAULT_LEVEL if level is None or level < 1 else level
        values[EXP_KEY] = DEFAULT_EXP if exp is None or exp < 0 else exp

        stats = PlayerStats(**values)
        # Stored exp may be past the threshold if the file was edited by hand
        stats.gain_experience(0)
        return stats

    def load_quests(self) -> list[Quest]:
        """Rehydrate pending quests. Missing or corrupt data yields no quests."""
        text = self.preferences.get_string(QUESTS_KEY)
        if text is None:
            return []
        try:
            return quests_from_json(text)
        except ValidationError as e:
            logger.error(f"Discarding unreadable saved quests: {e}")
            return []

    def load_player_class(self) -> PlayerClass:
        """Selected class, or the default class if none was saved."""
        stored = self.preferences.get_string(PLAYER_CLASS_KEY)
        if stored is None:
            return PlayerClass.default()
        try:
            return PlayerClass.parse(stored)
        except InvalidArgumentError:
            logger.warning(f"Unknown saved player class {stored!r}, using default")
            return PlayerClass.default()

    def save_player_class(self, player_class: PlayerClass) -> None:
        self.preferences.set_string(PLAYER_CLASS_KEY, player_class.value)

    def save_progress(self, stats: PlayerStats, quests: Iterable[Quest]) -> None:
        """Persist the eight scalar fields and the quest list in one write."""
        values: dict[str, int | str] = dict(stats.to_map())
        values[LEVEL_KEY] = stats.level
        values[EXP_KEY] = stats.exp
        values[QUESTS_KEY] = quests_to_json(quests)
        self.preferences.set_many(values)
        logger.debug(f"Saved progress: level {stats.level}, exp {stats.exp}")

    def has_saved_class(self) -> bool:
        return self.preferences.contains(PLAYER_CLASS_KEY)
