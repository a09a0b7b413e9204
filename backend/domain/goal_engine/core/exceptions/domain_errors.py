"""Domain exceptions for the goal engine."""


class GoalEngineError(Exception):
    """Base exception for goal engine errors."""

    pass


class SettingsStoreError(GoalEngineError):
    """Raised by store adapters when a read or write cannot complete."""

    def __init__(self, message: str, keys: tuple[str, ...] = ()):
        super().__init__(message)
        self.keys = keys


class InvalidConfigurationError(GoalEngineError):
    """Raised when environment configuration cannot be interpreted."""

    pass
