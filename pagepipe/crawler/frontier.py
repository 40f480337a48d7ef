# pagepipe/crawler/frontier.py
"""
Breadth-first work queue with URL deduplication.
"""
from __future__ import annotations

from typing import List, Set


class Frontier:
    """FIFO queue of canonical URLs plus the set of every URL ever enqueued.

    A URL is appended at most once over the lifetime of an instance, and the read
    cursor only moves forward, so :meth:`all` is the discovery order. Callers pass
    already-normalized URLs.

    Not safe for concurrent ``add`` calls; each discovery run owns its own
    instance.
    """

    def __init__(self) -> None:
        self._items: List[str] = []
        self._visited: Set[str] = set()
        self._cursor = 0

    def add(self, url: str) -> bool:
        """Enqueue *url* unless already seen. Returns True if it was added."""
        if url in self._visited:
            return False
        self._visited.add(url)
        self._items.append(url)
        return True

    def has_next(self) -> bool:
        return self._cursor < len(self._items)

    def next(self) -> str:
        """Return the URL at the cursor and advance. Guard with :meth:`has_next`."""
        if not self.has_next():
            raise IndexError("frontier exhausted")
        url = self._items[self._cursor]
        self._cursor += 1
        return url

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    @property
    def processed_count(self) -> int:
        return self._cursor

    def all(self) -> List[str]:
        """Every URL enqueued so far, in FIFO order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, url: object) -> bool:
        return url in self._visited
