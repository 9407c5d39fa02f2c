"""Process-wide memoisation for structures derived from the alias table."""

from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

__all__ = ["IndexCache"]

_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")


class IndexCache(Generic[_K, _V]):
    """Unbounded get-or-build cache guarded by a lock.

    Entries are never evicted: keys are locale filter descriptors, of which a
    process only ever builds a handful, and the alias table they derive from
    is immutable.
    """

    __slots__ = ("name", "_data", "_lock")

    def __init__(self, name: str) -> None:
        self.name = name
        self._data: Dict[_K, _V] = {}
        self._lock = threading.Lock()

    def get(self, key: _K) -> Optional[_V]:
        return self._data.get(key)

    def get_or_build(self, key: _K, builder: Callable[[], _V]) -> _V:
        """Return the cached value for ``key``, building it on first use.

        Concurrent first calls for the same key build exactly once; later
        calls return the identical instance.
        """

        value = self._data.get(key)
        if value is not None:
            return value
        with self._lock:
            value = self._data.get(key)
            if value is None:
                value = builder()
                self._data[key] = value
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"IndexCache(name={self.name!r}, size={len(self._data)})"
