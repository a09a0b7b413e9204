"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from domain.goal_engine.core.exceptions.domain_errors import (
    InvalidConfigurationError,
)

DEFAULT_DEBOUNCE_MS = 600
DEFAULT_STORE_PATH = "goal_settings.json"


def load_environment(env_file: Optional[Path] = None) -> None:
    """Load a .env file without overriding variables already set.

    Args:
        env_file: Explicit path; defaults to ``.env`` next to the backend
    """
    path = env_file or Path(__file__).parent.parent / ".env"
    if path.exists():
        load_dotenv(path)


@dataclass(frozen=True)
class GoalEngineSettings:
    """Runtime settings read from the environment.

    Environment Variables:
        LOG_LEVEL: Logging level name (default INFO)
        GOAL_STORE_BACKEND: 'inmemory' (default) or 'json'
        GOAL_STORE_PATH: JSON file used by the 'json' backend
        GOAL_RECOMPUTE_DEBOUNCE_MS: Quiet period before a recompute
    """

    log_level: str = "INFO"
    store_backend: str = "inmemory"
    store_path: Path = Path(DEFAULT_STORE_PATH)
    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @classmethod
    def from_env(cls) -> "GoalEngineSettings":
        """Build settings from environment variables.

        Raises:
            InvalidConfigurationError: If the debounce value is not a
                non-negative integer
        """
        raw_debounce = os.getenv("GOAL_RECOMPUTE_DEBOUNCE_MS", str(DEFAULT_DEBOUNCE_MS))
        try:
            debounce_ms = int(raw_debounce)
        except ValueError as e:
            raise InvalidConfigurationError(
                f"GOAL_RECOMPUTE_DEBOUNCE_MS must be an integer, got {raw_debounce!r}"
            ) from e
        if debounce_ms < 0:
            raise InvalidConfigurationError(
                f"GOAL_RECOMPUTE_DEBOUNCE_MS must be >= 0, got {debounce_ms}"
            )

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            store_backend=os.getenv("GOAL_STORE_BACKEND", "inmemory").lower(),
            store_path=Path(os.getenv("GOAL_STORE_PATH", DEFAULT_STORE_PATH)),
            debounce_ms=debounce_ms,
        )
