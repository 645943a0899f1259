"""Fixed-capacity least-recently-used map."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterator

DEFAULT_CAPACITY = 100


class LRUCache[K, V]:
    """Recency-ordered map that evicts the oldest entry when full.

    Both ``get`` hits and ``put`` calls mark an entry as most recently used.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            msg = f"LRUCache capacity must be at least 1, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._data: OrderedDict[K, V] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> V | None:
        """Return the cached value for *key*, or None on a miss."""
        try:
            self._data.move_to_end(key)
        except KeyError:
            return None
        return self._data[key]

    def put(self, key: K, value: V) -> None:
        """Insert or refresh *key*, evicting the least recently used entry."""
        self._data[key] = value
        self._data.move_to_end(key)
        if len(self._data) > self._capacity:
            self._data.popitem(last=False)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)
