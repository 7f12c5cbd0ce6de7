"""JSON-file-backed implementation of KeyValueStore.

One ``<key>.json`` file per key inside a data directory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from qpos.domain.exceptions import InvalidInput, TransientIO
from qpos.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise TransientIO(f"Cannot read '{key}' from {path}: {exc}") from exc

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(value, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise TransientIO(f"Cannot write '{key}' to {path}: {exc}") from exc
        logger.debug("Stored %s", key)

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise TransientIO(f"Cannot remove '{key}': {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise InvalidInput(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"
