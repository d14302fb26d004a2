"""Ordered collection of pending quests."""

from typing import Iterable, Iterator, Optional

from sololife.errors import OutOfRangeError
from sololife.models.quest import Quest, QuestReward, quests_from_json, quests_to_json


class QuestLedger:
    """Holds pending quests in display order.

    Completing a quest removes it and hands its reward back to the caller; the
    ledger never touches player stats itself.
    """

    def __init__(self, quests: Optional[Iterable[Quest]] = None) -> None:
        """Initialize with optional quests."""
        self._quests: list[Quest] = list(quests or [])

    @property
    def quests(self) -> list[Quest]:
        """Pending quests (copy)."""
        return self._quests.copy()

    @property
    def is_empty(self) -> bool:
        return not self._quests

    def __len__(self) -> int:
        return len(self._quests)

    def __iter__(self) -> Iterator[Quest]:
        return iter(self._quests.copy())

    def get(self, index: int) -> Quest:
        """Get a pending quest without completing it."""
        self._check_index(index)
        return self._quests[index]

    def complete(self, index: int) -> QuestReward:
        """
        Complete the quest at ``index``.

        Args:
            index: Position of the quest, 0 <= index < len(ledger)

        Returns:
            The completed quest's reward
        """
        self._check_index(index)
        quest = self._quests.pop(index)
        return quest.reward

    def replace(self, quests: Iterable[Quest]) -> None:
        """Replace all pending quests with a new batch."""
        self._quests = list(quests)

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than counted from the end
        if not isinstance(index, int) or not 0 <= index < len(self._quests):
            raise OutOfRangeError(
                f"Quest index {index} out of range (pending quests: {len(self._quests)})"
            )

    def to_json(self) -> str:
        """Serialize pending quests to a JSON array."""
        return quests_to_json(self._quests)

    @classmethod
    def from_json(cls, text: str) -> "QuestLedger":
        """Build a ledger from a JSON array of quest records."""
        return cls(quests_from_json(text))
