"""File-backed cache for movie-database API responses.

Each entry is a JSON document `{"stored_at": <unix seconds>, "ttl": <seconds>, "value": ...}`
stored under `<directory>/<sha1(key)>.json`. Writes go to a temporary file in the same directory
and are moved into place with an atomic replace, so concurrent readers never observe a partially
written entry.

The cache is best-effort: any I/O or decoding failure is logged and treated as a miss.

It is wired into `App` for the upcoming movie-database lookups, which wrap their HTTP calls in
`remember` with the TTLs from settings.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class FileCache:
    """A tiny file-based cache with per-entry TTL."""

    def __init__(self, directory: str | Path, *, clock: Callable[[], float] = time.time) -> None:
        if not str(directory).strip():
            raise ValueError("cache directory must be a non-empty path")
        self.directory = Path(directory)
        self._clock = clock

    def remember(self, key: str, ttl: int, compute: Callable[[], Any]) -> Any:
        """Return the cached value if fresh; otherwise compute, store (best effort), and return it.

        Exceptions raised by `compute` propagate; persistence failures never do.
        """

        cached = self.get(key)
        if cached is not None:
            return cached

        value = compute()

        try:
            self.put(key, value, ttl)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("cache store failed key=%s error=%s", key, exc)

        return value

    def put(self, key: str, value: Any, ttl: int) -> None:
        """Store a JSON-serializable value under `key` for `ttl` seconds."""

        payload = json.dumps(
            {"stored_at": int(self._clock()), "ttl": int(ttl), "value": value},
            ensure_ascii=False,
        )

        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        fd, temp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            Path(temp_path).replace(path)
        except OSError:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Any:
        """Return the cached value, or `None` if missing, unreadable, malformed, or expired."""

        path = self.path_for(key)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("cache read failed key=%s error=%s", key, exc)
            return None

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.debug("cache entry corrupted key=%s", key)
            return None

        if not isinstance(data, dict) or "stored_at" not in data or "ttl" not in data:
            return None

        try:
            expires_at = int(data["stored_at"]) + int(data["ttl"])
        except (TypeError, ValueError):
            return None

        if self._clock() >= expires_at:
            self._unlink_quietly(path)
            return None

        return data.get("value")

    def forget(self, key: str) -> None:
        """Remove a cached entry if present."""

        self._unlink_quietly(self.path_for(key))

    def path_for(self, key: str) -> Path:
        """Build a filesystem-safe path for a cache key."""

        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()  # noqa: S324 (naming, not security)
        return self.directory / f"{digest}.json"

    @staticmethod
    def _unlink_quietly(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.debug("cache cleanup failed path=%s error=%s", path, exc)
