"""Domain errors raised by SoloLife."""


class SoloLifeError(Exception):
    """Base class for SoloLife errors."""


class InvalidArgumentError(SoloLifeError, ValueError):
    """Raised when an argument violates an operation's contract (e.g. negative experience)."""


class OutOfRangeError(SoloLifeError, IndexError):
    """Raised when a quest index does not refer to a pending quest."""


class QuestGenerationError(SoloLifeError):
    """Raised when quests could not be generated (network, service or parse failure)."""
