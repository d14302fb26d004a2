"""Player progression models."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from sololife.config import (
    DEFAULT_ATTRIBUTE_VALUE,
    DEFAULT_EXP,
    DEFAULT_LEVEL,
    EXP_CURVE_BASE,
    EXP_CURVE_STEP,
)
from sololife.errors import InvalidArgumentError


class Attribute(str, Enum):
    """The six progression attributes."""

    INTELLIGENCE = "intelligence"
    PHYSIQUE = "physique"
    LOGIC = "logic"
    SKILLS = "skills"
    ATTRACTIVENESS = "attractiveness"
    LEARNING = "learning"

    @classmethod
    def parse(cls, name: Union[str, "Attribute"]) -> Optional["Attribute"]:
        """Case-insensitive lookup. Returns None for unknown names."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            return None


def exp_to_next_level(level: int) -> int:
    """Experience needed to advance from ``level`` to ``level + 1``."""
    if level < 1:
        raise InvalidArgumentError(f"Level must be >= 1, got {level}")
    return EXP_CURVE_BASE + (level - 1) * EXP_CURVE_STEP


class PlayerStats(BaseModel):
    """Attributes, level and experience of the player.

    This is the one mutable aggregate in the game. It is changed only through
    ``gain_experience`` and ``increase_stat``; after either call
    ``exp < exp_to_next_level(level)`` holds.
    """

    model_config = ConfigDict(validate_assignment=True)

    intelligence: int = Field(default=DEFAULT_ATTRIBUTE_VALUE, description="Intelligence attribute")
    physique: int = Field(default=DEFAULT_ATTRIBUTE_VALUE, description="Physique attribute")
    logic: int = Field(default=DEFAULT_ATTRIBUTE_VALUE, description="Logic attribute")
    skills: int = Field(default=DEFAULT_ATTRIBUTE_VALUE, description="Skills attribute")
    attractiveness: int = Field(default=DEFAULT_ATTRIBUTE_VALUE, description="Attractiveness attribute")
    learning: int = Field(default=DEFAULT_ATTRIBUTE_VALUE, description="Learning attribute")

    level: int = Field(ge=1, default=DEFAULT_LEVEL, description="Player level")
    exp: int = Field(ge=0, default=DEFAULT_EXP, description="Experience towards the next level")

    @property
    def next_level_threshold(self) -> int:
        """Experience required to finish the current level."""
        return exp_to_next_level(self.level)

    def gain_experience(self, amount: int) -> int:
        """
        Add experience and roll it over into levels.

        Args:
            amount: Non-negative experience to add

        Returns:
            Number of levels gained
        """
        if amount < 0:
            raise InvalidArgumentError(f"Experience amount must be >= 0, got {amount}")

        levels_gained = 0
        self.exp += amount
        # Thresholds are positive and increasing, so this terminates
        while self.exp >= exp_to_next_level(self.level):
            self.exp -= exp_to_next_level(self.level)
            self.level += 1
            levels_gained += 1
        return levels_gained

    def increase_stat(self, name: Union[str, Attribute], amount: int) -> bool:
        """
        Add ``amount`` to the named attribute.

        Unknown names are ignored so that slightly off reward keys coming back
        from quest generation do not break quest completion.

        Returns:
            True if an attribute was changed
        """
        attribute = Attribute.parse(name)
        if attribute is None:
            return False
        setattr(self, attribute.value, getattr(self, attribute.value) + amount)
        return True

    def get_stat(self, name: Union[str, Attribute]) -> Optional[int]:
        """Get an attribute value by name, or None if unknown."""
        attribute = Attribute.parse(name)
        if attribute is None:
            return None
        return getattr(self, attribute.value)

    def to_map(self) -> dict[str, int]:
        """Attribute name -> value, in declaration order."""
        return {attribute.value: getattr(self, attribute.value) for attribute in Attribute}
