"""Error types raised by the fitness program core."""


class FitnessError(Exception):
    """Base class for all fitness program errors."""


class StorageNotFoundError(FitnessError):
    """A profile or workout slot does not exist."""


class StorageIOError(FitnessError):
    """Reading or writing a slot failed for a reason other than absence."""


class MalformedDataError(FitnessError):
    """Stored content does not match the expected layout."""


class ParseError(FitnessError, ValueError):
    """A numeric field could not be parsed."""


class InvalidArgumentError(FitnessError, ValueError):
    """An argument is outside its allowed range."""
