"""Pytest configuration and fixtures."""

import json

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from sololife.agents.quest_generator import QuestGenerator
from sololife.engine.notifications import NotificationCenter
from sololife.engine.session import GameSession
from sololife.models.quest import Quest
from sololife.persistence.preferences import PreferencesStore
from sololife.persistence.progress_store import ProgressStore


@pytest.fixture
def quest_records():
    """Well-formed quest records as the quest service returns them."""
    return [
        {
            "title": "Morning Drill",
            "description": "Do 20 push-ups before breakfast.",
            "expReward": 40,
            "statRewards": {"physique": 2},
        },
        {
            "title": "Tome of Knowledge",
            "description": "Read one chapter of a non-fiction book.",
            "expReward": 60,
            "statRewards": {"intelligence": 1, "learning": 2},
        },
        {
            "title": "Puzzle Trial",
            "description": "Solve a logic puzzle.",
            "expReward": 250,
            "statRewards": {"Logic": 3},
        },
    ]


@pytest.fixture
def sample_quests(quest_records):
    """Quests built from the sample records."""
    return [Quest.model_validate(record) for record in quest_records]


@pytest.fixture
def preferences_path(tmp_path):
    """Location of a not-yet-created preferences file."""
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture
def progress_store(preferences_path):
    """Progress store backed by a temporary preferences file."""
    return ProgressStore(PreferencesStore(preferences_path))


@pytest.fixture
def make_generator():
    """Build a quest generator whose model replies with the given responses in turn.

    The exp cap is raised so the 250 exp sample quest is accepted.
    """

    def _make(*responses: str) -> QuestGenerator:
        return QuestGenerator(llm=FakeListChatModel(responses=list(responses)), max_exp_reward=500)

    return _make


@pytest.fixture
def make_session(progress_store, make_generator):
    """Build a session whose model replies with the given responses in turn."""

    def _make(*responses: str) -> GameSession:
        return GameSession(
            store=progress_store,
            generator=make_generator(*responses),
            notifications=NotificationCenter(),
        )

    return _make


@pytest.fixture
def quests_response(quest_records):
    """Model response carrying the sample quests."""
    return json.dumps(quest_records)
