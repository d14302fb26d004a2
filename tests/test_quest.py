"""Tests for Quest records and quest list serialization."""

import json

import pytest
from pydantic import ValidationError

from sololife.models.quest import (
    Quest,
    QuestReward,
    quests_from_json,
    quests_from_records,
    quests_to_json,
    quests_to_records,
)


class TestQuest:
    """Test suite for Quest."""

    def test_from_record(self, quest_records):
        """Test building a quest from a camelCase record."""
        quest = Quest.model_validate(quest_records[1])
        assert quest.title == "Tome of Knowledge"
        assert quest.exp_reward == 60
        assert quest.stat_rewards == {"intelligence": 1, "learning": 2}

    def test_to_record_uses_persisted_names(self, sample_quests):
        """Test that records use the persisted field names."""
        record = sample_quests[0].to_record()
        assert set(record) == {"title", "description", "expReward", "statRewards"}

    def test_missing_fields_default(self):
        """Test defaults for missing fields."""
        quest = Quest.model_validate({})
        assert quest.title == ""
        assert quest.description == ""
        assert quest.exp_reward == 0
        assert quest.stat_rewards == {}

    def test_null_fields_default(self):
        """Test defaults for null fields."""
        quest = Quest.model_validate(
            {"title": None, "description": None, "expReward": None, "statRewards": None}
        )
        assert quest.title == ""
        assert quest.description == ""
        assert quest.exp_reward == 0
        assert quest.stat_rewards == {}

    def test_fractional_rewards_truncated(self):
        """Test that non-integer rewards are truncated toward zero."""
        quest = Quest.model_validate(
            {"title": "t", "expReward": 42.9, "statRewards": {"logic": 2.7, "skills": -1.5}}
        )
        assert quest.exp_reward == 42
        assert quest.stat_rewards == {"logic": 2, "skills": -1}

    def test_negative_exp_reward_rejected(self):
        """Test that negative experience rewards are rejected."""
        with pytest.raises(ValidationError):
            Quest.model_validate({"title": "t", "expReward": -10})

    def test_quest_is_immutable(self, sample_quests):
        """Test that quests cannot be reassigned."""
        with pytest.raises(ValidationError):
            sample_quests[0].title = "changed"

    def test_reward_payload(self, sample_quests):
        """Test the reward payload of a quest."""
        reward = sample_quests[1].reward
        assert isinstance(reward, QuestReward)
        assert reward.exp_reward == 60
        assert reward.stat_rewards == {"intelligence": 1, "learning": 2}


class TestQuestListSerialization:
    """Test suite for quest list serialization."""

    def test_json_round_trip(self, sample_quests):
        """Test that serialize -> deserialize preserves every field."""
        restored = quests_from_json(quests_to_json(sample_quests))
        assert restored == sample_quests

    def test_records_round_trip(self, quest_records):
        """Test that records survive a round trip unchanged."""
        assert quests_to_records(quests_from_records(quest_records)) == quest_records

    def test_json_is_list_of_records(self, sample_quests):
        """Test the persisted JSON shape."""
        data = json.loads(quests_to_json(sample_quests))
        assert isinstance(data, list)
        assert data[0] == {
            "title": "Morning Drill",
            "description": "Do 20 push-ups before breakfast.",
            "expReward": 40,
            "statRewards": {"physique": 2},
        }

    def test_missing_stat_rewards_yields_empty_mapping(self):
        """Test that a record without statRewards deserializes fine."""
        quests = quests_from_json('[{"title": "Walk", "description": "Go outside", "expReward": 10}]')
        assert quests[0].stat_rewards == {}

    def test_empty_list(self):
        """Test the empty quest list."""
        assert quests_from_json("[]") == []
        assert quests_to_json([]) == "[]"

    def test_invalid_json_rejected(self):
        """Test that malformed JSON fails validation."""
        with pytest.raises(ValidationError):
            quests_from_json("[{")
