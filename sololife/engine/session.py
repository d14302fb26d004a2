"""Game session: owns player progress and wires quest completion and generation."""

import logging
import threading
from typing import Any, Optional, Union

from sololife.agents.quest_generator import QuestGenerator
from sololife.engine.notifications import NotificationCenter
from sololife.engine.progression import ProgressionEngine
from sololife.engine.quest_ledger import QuestLedger
from sololife.errors import OutOfRangeError, QuestGenerationError
from sololife.models.notifications import NotificationKind
from sololife.models.player_class import PlayerClass
from sololife.models.quest import Quest, QuestReward
from sololife.models.stats import PlayerStats
from sololife.persistence.progress_store import ProgressStore

logger = logging.getLogger(__name__)


class GameSession:
    """Single source of truth for one player's progress.

    User actions are handled one at a time. Quest generation is the only call
    that waits on the network; while it runs the quest list is hidden and
    cannot be completed. A generation result always replaces the current
    quest list, even if a newer request was started in the meantime.
    """

    def __init__(
        self,
        store: ProgressStore,
        generator: QuestGenerator,
        notifications: Optional[NotificationCenter] = None,
    ) -> None:
        """
        Initialize game session with default progress.

        Call ``load_progress`` to rehydrate saved state.

        Args:
            store: Persistence for stats, quests and class
            generator: Quest generation client
            notifications: Where user-facing messages go
        """
        self._store = store
        self._generator = generator
        self._notifications = notifications or NotificationCenter()
        self._stats = PlayerStats()
        self._ledger = QuestLedger()
        self._player_class = PlayerClass.default()
        self._pending_generations = 0
        self._lock = threading.RLock()

    @property
    def stats(self) -> PlayerStats:
        """Current player stats."""
        return self._stats

    @property
    def ledger(self) -> QuestLedger:
        """Pending quests."""
        return self._ledger

    @property
    def player_class(self) -> PlayerClass:
        return self._player_class

    @property
    def notifications(self) -> NotificationCenter:
        return self._notifications

    @property
    def generator(self) -> QuestGenerator:
        return self._generator

    @property
    def loading(self) -> bool:
        """Whether a quest generation request is in flight."""
        return self._pending_generations > 0

    @property
    def visible_quests(self) -> list[Quest]:
        """Quests offered to the player; none while new quests are loading."""
        with self._lock:
            if self.loading:
                return []
            return self._ledger.quests

    def load_progress(self, generate_if_empty: bool = True) -> None:
        """
        Rehydrate stats, quests and class from storage.

        Args:
            generate_if_empty: Request new quests when none were saved
        """
        with self._lock:
            self._player_class = self._store.load_player_class()
            self._stats = self._store.load_stats()
            self._ledger = QuestLedger(self._store.load_quests())
            logger.info(
                f"Loaded progress: {self._player_class.value} level {self._stats.level} "
                f"with {len(self._ledger)} pending quest(s)"
            )
            should_generate = generate_if_empty and self._ledger.is_empty

        if should_generate:
            self.generate_quests()

    def select_class(self, player_class: Union[str, PlayerClass]) -> PlayerClass:
        """Select and persist the character class."""
        selected = PlayerClass.parse(player_class)
        with self._lock:
            self._player_class = selected
            self._store.save_player_class(selected)
        logger.info(f"Selected class {selected.value}")
        return selected

    def generate_quests(self) -> tuple[bool, Optional[str]]:
        """
        Replace pending quests with a freshly generated batch.

        On failure the user is notified and the current quests are kept.

        Returns:
            Tuple of (success, error_message)
        """
        with self._lock:
            self._pending_generations += 1
            player_class = self._player_class
            attributes = self._stats.to_map()

        try:
            # Lock is not held while waiting on the network
            new_quests = self._generator.generate(player_class, attributes)
        except QuestGenerationError as e:
            logger.warning(f"Quest generation failed: {e}")
            self._notifications.notify(f"Failed to load quests: {e}", NotificationKind.ERROR)
            return False, str(e)
        else:
            with self._lock:
                self._ledger.replace(new_quests)
                self._save()
            return True, None
        finally:
            with self._lock:
                self._pending_generations -= 1

    def complete_quest(self, index: int) -> QuestReward:
        """
        Complete a pending quest and apply its reward.

        Args:
            index: Position of the quest in ``visible_quests``

        Returns:
            The reward that was applied
        """
        with self._lock:
            if self.loading:
                raise OutOfRangeError("Quests are being generated; no quest can be completed right now")

            quest = self._ledger.get(index)
            reward = self._ledger.complete(index)
            # Exp and stats are applied together; progress is saved only afterwards
            outcome = ProgressionEngine.apply_reward(self._stats, reward)
            self._save()

        logger.info(f"Completed quest {quest.title!r}: {outcome}")
        self._notifications.notify("Quest completed! Stats updated.", NotificationKind.SUCCESS)
        if outcome["levels_gained"]:
            self._notifications.notify(f"Level up! You reached level {self._stats.level}.", NotificationKind.SUCCESS)
        return reward

    def snapshot(self) -> dict[str, Any]:
        """Serializable view of the session for the host UI."""
        with self._lock:
            return {
                "player_class": self._player_class.value,
                "stats": self._stats.to_map(),
                "level": self._stats.level,
                "exp": self._stats.exp,
                "exp_to_next_level": self._stats.next_level_threshold,
                "loading": self.loading,
                "quests": [quest.to_record() for quest in self.visible_quests],
            }

    def _save(self) -> None:
        self._store.save_progress(self._stats, self._ledger.quests)
