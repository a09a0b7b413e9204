"""JSON-file implementation of ISettingsStore."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping

import structlog

from domain.goal_engine.core.exceptions.domain_errors import SettingsStoreError
from domain.goal_engine.core.ports.settings_store import ISettingsStore

logger = structlog.get_logger(__name__)


class JsonFileSettingsStore(ISettingsStore):
    """
    Settings persisted as a single JSON object on disk.

    Every batch is written to a temporary file in the same directory and
    moved over the old file with ``os.replace``, so readers see either
    the previous or the new contents, never a partial write. The
    in-memory copy is only updated after the file has been replaced.
    """

    def __init__(self, path: Path) -> None:
        """Load existing values from ``path`` (missing file means empty).

        Raises:
            SettingsStoreError: If the file exists but is not a JSON object
        """
        self._path = Path(path)
        self._values: dict[str, Any] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            logger.debug("Settings file missing, starting empty", path=str(self._path))
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsStoreError(f"Cannot read settings file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsStoreError(
                f"Settings file {self._path} must contain a JSON object, "
                f"got {type(data).__name__}"
            )
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_many(self, values: Mapping[str, Any]) -> None:
        merged = {**self._values, **values}
        directory = self._path.parent if str(self._path.parent) else Path(".")
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                json.dump(merged, fh, indent=2, sort_keys=True)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SettingsStoreError(
                f"Cannot write settings file {self._path}: {e}",
                keys=tuple(values),
            ) from e

        self._values = merged
        logger.debug("Settings written", path=str(self._path), keys=sorted(values))
