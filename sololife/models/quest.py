"""Quest and quest reward models."""

import math
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def _truncate_reward(value: Any, default: int = 0) -> Any:
    """Null -> default, floats truncated toward zero, anything else left to pydantic."""
    if value is None:
        return default
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Reward must be a finite number, got {value}")
        return math.trunc(value)
    return value


def _normalize_stat_rewards(value: Any) -> Any:
    if value is None:
        return {}
    if isinstance(value, dict):
        return {str(key): _truncate_reward(amount) for key, amount in value.items()}
    return value


class QuestReward(BaseModel):
    """Experience and attribute increments granted by a completed quest."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    exp_reward: int = Field(default=0, ge=0, alias="expReward", description="Experience granted")
    stat_rewards: dict[str, int] = Field(
        default_factory=dict, alias="statRewards", description="Attribute name -> increment"
    )

    @field_validator("exp_reward", mode="before")
    @classmethod
    def truncate_exp_reward(cls, value: Any) -> Any:
        return _truncate_reward(value)

    @field_validator("stat_rewards", mode="before")
    @classmethod
    def normalize_stat_rewards(cls, value: Any) -> Any:
        return _normalize_stat_rewards(value)


class Quest(BaseModel):
    """A single completable task. Records use the camelCase field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", description="Short quest title")
    description: str = Field(default="", description="What the player has to do")
    exp_reward: int = Field(default=0, ge=0, alias="expReward", description="Experience granted")
    stat_rewards: dict[str, int] = Field(
        default_factory=dict, alias="statRewards", description="Attribute name -> increment"
    )

    @field_validator("title", "description", mode="before")
    @classmethod
    def default_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("exp_reward", mode="before")
    @classmethod
    def truncate_exp_reward(cls, value: Any) -> Any:
        return _truncate_reward(value)

    @field_validator("stat_rewards", mode="before")
    @classmethod
    def normalize_stat_rewards(cls, value: Any) -> Any:
        return _normalize_stat_rewards(value)

    @property
    def reward(self) -> QuestReward:
        """Reward payload handed back when the quest is completed."""
        return QuestReward(exp_reward=self.exp_reward, stat_rewards=dict(self.stat_rewards))

    def to_record(self) -> dict[str, Any]:
        """Serialize to a record with the persisted field names."""
        return self.model_dump(by_alias=True)


_quest_list_adapter = TypeAdapter(list[Quest])


def quests_to_records(quests: Iterable[Quest]) -> list[dict[str, Any]]:
    """Serialize quests to a list of records."""
    return [quest.to_record() for quest in quests]


def quests_from_records(records: Any) -> list[Quest]:
    """Build quests from a list of records, applying the field defaults."""
    return _quest_list_adapter.validate_python(records)


def quests_to_json(quests: Iterable[Quest]) -> str:
    """Serialize quests to a JSON array string."""
    return _quest_list_adapter.dump_json(list(quests), by_alias=True).decode("utf-8")


def quests_from_json(text: str) -> list[Quest]:
    """Parse a JSON array string into quests."""
    return _quest_list_adapter.validate_json(text)
