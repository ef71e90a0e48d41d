"""Deduplication ledger — remembers which table sources were already merged."""

import os
import threading


def normalize_source_path(path: str | os.PathLike) -> str:
    """Return the absolute form of *path*, or the raw string if the OS rejects it."""
    raw = os.fspath(path)
    try:
        return os.path.abspath(raw)
    except (TypeError, ValueError):
        return str(raw)


class MergeLedger:
    """Case-insensitive set of claimed source paths.

    Entries live for the lifetime of the ledger; there is no eviction and
    nothing is persisted.
    """

    def __init__(self):
        self._claimed: set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, path: str) -> bool:
        """Atomically claim *path*. Returns False if it was claimed before."""
        folded = path.casefold()
        with self._lock:
            if folded in self._claimed:
                return False
            self._claimed.add(folded)
            return True

    def is_claimed(self, path: str) -> bool:
        with self._lock:
            return path.casefold() in self._claimed

    def clear(self) -> None:
        with self._lock:
            self._claimed.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._claimed)
