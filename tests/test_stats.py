"""Tests for PlayerStats and the level curve."""

import pytest

from sololife.errors import InvalidArgumentError
from sololife.models.stats import Attribute, PlayerStats, exp_to_next_level


class TestExpToNextLevel:
    """Test suite for the level-up curve."""

    def test_first_levels(self):
        """Test thresholds for the first levels."""
        assert exp_to_next_level(1) == 100
        assert exp_to_next_level(2) == 150
        assert exp_to_next_level(3) == 200
        assert exp_to_next_level(10) == 550

    def test_strictly_increasing(self):
        """Test that a higher level always needs more experience."""
        thresholds = [exp_to_next_level(level) for level in range(1, 200)]
        assert all(later > earlier for earlier, later in zip(thresholds, thresholds[1:]))

    def test_level_below_one_rejected(self):
        """Test that levels below 1 are rejected."""
        with pytest.raises(InvalidArgumentError):
            exp_to_next_level(0)


class TestPlayerStats:
    """Test suite for PlayerStats."""

    def test_defaults(self):
        """Test default stats."""
        stats = PlayerStats()
        assert stats.level == 1
        assert stats.exp == 0
        assert stats.to_map() == {
            "intelligence": 5,
            "physique": 5,
            "logic": 5,
            "skills": 5,
            "attractiveness": 5,
            "learning": 5,
        }
        assert stats.next_level_threshold == 100

    def test_gain_experience_zero_is_noop(self):
        """Test that gaining zero experience changes nothing."""
        stats = PlayerStats(level=4, exp=37)
        assert stats.gain_experience(0) == 0
        assert stats.level == 4
        assert stats.exp == 37

    def test_gain_experience_below_threshold(self):
        """Test gaining experience without leveling up."""
        stats = PlayerStats()
        stats.gain_experience(99)
        assert stats.level == 1
        assert stats.exp == 99

    def test_gain_experience_exact_threshold(self):
        """Test that reaching the threshold exactly levels up."""
        stats = PlayerStats()
        assert stats.gain_experience(100) == 1
        assert stats.level == 2
        assert stats.exp == 0

    def test_gain_experience_multiple_rollovers(self):
        """Test 250 exp from level 1: 100 then 150 consumed, level 3."""
        stats = PlayerStats()
        assert stats.gain_experience(250) == 2
        assert stats.level == 3
        assert stats.exp == 0

    def test_gain_experience_large_amount(self):
        """Test that a huge reward jumps several levels at once."""
        stats = PlayerStats()
        # 100 + 150 + 200 + 250 + 300 = 1000 -> level 6, plus 10 left over
        assert stats.gain_experience(1010) == 5
        assert stats.level == 6
        assert stats.exp == 10

    @pytest.mark.parametrize("amount", [1, 49, 100, 151, 999, 12345, 10**6])
    def test_exp_below_threshold_after_gain(self, amount):
        """Test that exp always ends below the current threshold."""
        stats = PlayerStats(level=2, exp=20)
        stats.gain_experience(amount)
        assert 0 <= stats.exp < exp_to_next_level(stats.level)

    def test_gain_experience_negative_rejected(self):
        """Test that negative experience fails and leaves stats unchanged."""
        stats = PlayerStats(level=2, exp=10)
        with pytest.raises(InvalidArgumentError):
            stats.gain_experience(-5)
        assert stats.level == 2
        assert stats.exp == 10

    def test_increase_stat_case_insensitive(self):
        """Test that stat names match regardless of case."""
        upper = PlayerStats()
        lower = PlayerStats()
        assert upper.increase_stat("INTELLIGENCE", 3) is True
        assert lower.increase_stat("intelligence", 3) is True
        assert upper == lower
        assert upper.intelligence == 8

    def test_increase_stat_with_enum(self):
        """Test increasing a stat by Attribute member."""
        stats = PlayerStats()
        stats.increase_stat(Attribute.ATTRACTIVENESS, 2)
        assert stats.attractiveness == 7

    def test_increase_stat_unknown_ignored(self):
        """Test that unknown stat names leave all attributes unchanged."""
        stats = PlayerStats()
        before = stats.to_map()
        assert stats.increase_stat("unknown", 5) is False
        assert stats.to_map() == before

    def test_increase_stat_does_not_touch_level(self):
        """Test that stat names never reach level or exp."""
        stats = PlayerStats()
        assert stats.increase_stat("level", 5) is False
        assert stats.increase_stat("exp", 5) is False
        assert stats.level == 1
        assert stats.exp == 0

    def test_get_stat(self):
        """Test reading an attribute by name."""
        stats = PlayerStats(skills=9)
        assert stats.get_stat("Skills") == 9
        assert stats.get_stat("mana") is None


class TestAttribute:
    """Test suite for Attribute parsing."""

    def test_parse_known(self):
        """Test parsing known names in any case."""
        assert Attribute.parse("Physique") is Attribute.PHYSIQUE
        assert Attribute.parse("LEARNING") is Attribute.LEARNING

    def test_parse_unknown(self):
        """Test that unknown names parse to None."""
        assert Attribute.parse("strength") is None

    def test_six_attributes(self):
        """Test that exactly six attributes exist."""
        assert len(list(Attribute)) == 6
