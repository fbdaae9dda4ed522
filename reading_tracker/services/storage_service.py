"""Key/value JSON storage backed by a local directory."""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class LocalStorage:
    """Persist named slices of state as individual JSON files.

    Each key maps to ``<data_dir>/<key>.json`` and is read and written
    independently, the way a browser's local storage holds one serialized
    value per key.
    """

    def __init__(self, data_dir: Path):
        """Initialize the storage.

        Args:
            data_dir: Directory holding one JSON file per key
        """
        self.data_dir = data_dir

    def path_for(self, key: str) -> Path:
        """Get the file path backing a key."""
        return self.data_dir / f"{key}.json"

    def has(self, key: str) -> bool:
        """Check whether a value is stored under a key."""
        return self.path_for(key).exists()

    def read(self, key: str) -> Any | None:
        """Read the value stored under a key.

        Args:
            key: Slice name

        Returns:
            The decoded JSON value, or None if the key is absent or its
            file cannot be decoded (the file is then moved aside)
        """
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable {key} data in {path}: {e}")
            self.quarantine(key)
            return None

    def write(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under a key.

        The file is replaced atomically so a crash mid-write never leaves a
        truncated slice behind.

        Raises:
            OSError: If the directory or file cannot be written
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, path)
        logger.debug(f"Saved {key} to {path}")

    def remove(self, key: str) -> bool:
        """Delete the value stored under a key.

        Returns:
            True if a value was removed, False if none was stored
        """
        path = self.path_for(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def quarantine(self, key: str) -> Path | None:
        """Move a key's file aside so it is kept but no longer read.

        Returns:
            The path the file was moved to, or None if nothing was stored
        """
        path = self.path_for(key)
        if not path.exists():
            return None
        backup = path.with_suffix(".json.bak")
        os.replace(path, backup)
        logger.warning(f"Moved unreadable {key} data to {backup}")
        return backup
