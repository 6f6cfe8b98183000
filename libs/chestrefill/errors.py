"""Exception hierarchy for the chest refill library."""


class ChestRefillError(Exception):
    """Base class for all chest refill errors."""


class MalformedRecordError(ChestRefillError):
    """A persisted record or loot table identifier could not be parsed."""


class ConfigError(ChestRefillError):
    """The refill configuration file is unreadable or invalid."""
