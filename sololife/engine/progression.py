"""Reward application for the progression model."""

import logging
from typing import Any

from sololife.errors import InvalidArgumentError
from sololife.models.quest import QuestReward
from sololife.models.stats import Attribute, PlayerStats

logger = logging.getLogger(__name__)


class ProgressionEngine:
    """Applies quest rewards to player stats."""

    @staticmethod
    def apply_reward(stats: PlayerStats, reward: QuestReward) -> dict[str, Any]:
        """
        Apply a quest reward (experience and attribute increments) in one step.

        The reward is checked before anything is changed, so a rejected reward
        leaves ``stats`` untouched.

        Args:
            stats: Player stats to mutate
            reward: Reward to apply

        Returns:
            Dictionary with 'levels_gained', 'applied_stats' and 'ignored_stats' keys
        """
        if reward.exp_reward < 0:
            raise InvalidArgumentError(f"Experience reward must be >= 0, got {reward.exp_reward}")

        applied_stats: dict[str, int] = {}
        ignored_stats: list[str] = []
        for stat_name in reward.stat_rewards:
            attribute = Attribute.parse(stat_name)
            if attribute is None:
                ignored_stats.append(stat_name)

        levels_gained = stats.gain_experience(reward.exp_reward)
        for stat_name, amount in reward.stat_rewards.items():
            if stats.increase_stat(stat_name, amount):
                key = Attribute.parse(stat_name).value
                applied_stats[key] = applied_stats.get(key, 0) + amount

        if ignored_stats:
            logger.warning(f"Ignored unknown stat rewards: {ignored_stats}")
        if levels_gained:
            logger.info(f"Level up! +{levels_gained} -> level {stats.level}")

        return {
            "levels_gained": levels_gained,
            "applied_stats": applied_stats,
            "ignored_stats": ignored_stats,
        }
