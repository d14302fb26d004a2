"""Character class selection."""

from enum import Enum
from typing import Union

from sololife.errors import InvalidArgumentError


class PlayerClass(str, Enum):
    """Character classes the player can pick. Quests are flavored by class."""

    WARRIOR = "Warrior"
    MAGE = "Mage"
    ROGUE = "Rogue"
    ARCHER = "Archer"
    HEALER = "Healer"

    @classmethod
    def default(cls) -> "PlayerClass":
        """Class preselected when nothing has been saved yet."""
        return cls.WARRIOR

    @classmethod
    def parse(cls, name: Union[str, "PlayerClass"]) -> "PlayerClass":
        """Case-insensitive lookup by class name."""
        if isinstance(name, cls):
            return name
        for player_class in cls:
            if player_class.value.lower() == str(name).strip().lower():
                return player_class
        raise InvalidArgumentError(
            f"Unknown player class: {name!r}. Expected one of {[c.value for c in cls]}"
        )
