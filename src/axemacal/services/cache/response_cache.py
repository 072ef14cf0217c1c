"""Response caching implementation."""

import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from axemacal.exceptions import CacheError
from axemacal.utils.logging_utils import LoggerMixin


@dataclass(frozen=True)
class CacheEntry:
    """Stored response metadata."""
    key: str
    size: int
    modified: datetime

class ResponseCache(LoggerMixin):
    """Write-once file cache for raw service responses.

    One file per key, contents are the response bytes unchanged. Entries never
    expire; deleting the file is the only way to refresh one. Not safe for
    concurrent writers.
    """

    def __init__(self, cache_dir: str | Path):
        """Initialize cache.

        Args:
            cache_dir: Directory holding the cached responses
        """
        super().__init__()
        self.cache_dir = Path(cache_dir)

    def _path_for(self, key: str) -> Path:
        if not key or key.startswith('.') or '/' in key or os.sep in key:
            raise ValueError(f"Invalid cache key: {key!r}")
        return self.cache_dir / key

    def get(self, key: str) -> bytes | None:
        """Get cached payload.

        Args:
            key: Cache key

        Returns:
            Stored bytes, or None on a miss
        """
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheError(f"Failed to read cache entry {path}: {e!s}", str(path))

    def put(self, key: str, payload: bytes) -> None:
        """Store payload durably under key."""
        path = self._path_for(key)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, prefix=f".{key}.")
            try:
                with os.fdopen(fd, 'wb') as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CacheError(f"Failed to write cache entry {path}: {e!s}", str(path))

    def fetch_cached(self, key: str, producer: Callable[[], bytes]) -> bytes:
        """Return the payload stored under key, fetching it on a miss.

        The producer is only called on a miss. Its errors propagate and
        nothing is stored, so the next call fetches again.

        Args:
            key: Cache key, a plain file name
            producer: Callable fetching the payload

        Returns:
            Cached or freshly fetched bytes
        """
        cached = self.get(key)
        if cached is not None:
            self.debug("Cache hit", key=key)
            return cached

        self.logger.info(f"caching {self._path_for(key)}")
        payload = producer()
        self.put(key, payload)
        return payload

    def entries(self) -> list[CacheEntry]:
        """List stored entries sorted by key."""
        if not self.cache_dir.is_dir():
            return []
        result = []
        for path in sorted(self.cache_dir.iterdir()):
            if path.is_file() and not path.name.startswith('.'):
                stat = path.stat()
                result.append(CacheEntry(
                    key=path.name,
                    size=stat.st_size,
                    modified=datetime.fromtimestamp(stat.st_mtime)
                ))
        return result

    def clear(self) -> int:
        """Remove all entries and any temp files left by interrupted writes.

        Returns:
            Number of removed entries
        """
        removed = 0
        for entry in self.entries():
            (self.cache_dir / entry.key).unlink(missing_ok=True)
            removed += 1

        stale = 0
        if self.cache_dir.is_dir():
            # Keys never start with a dot, so these can only be temp files
            for path in self.cache_dir.glob('.*'):
                if path.is_file():
                    path.unlink(missing_ok=True)
                    stale += 1

        self.info(f"Cleared {removed} cache entries", cache_dir=str(self.cache_dir), stale_temp_files=stale)
        return removed
