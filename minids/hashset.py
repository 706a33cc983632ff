"""
Separate-chaining hash set that doubles its bucket count under load.

The table starts with a single bucket. Whenever the ratio of items to buckets
reaches LOAD_FACTOR, the bucket count doubles and every item is placed again,
which also resets the collision and longest-chain counters for the new table.
"""

import logging
import sys
from typing import Any, Callable, Iterable, List, Optional, TextIO

from minids.base import SetADT

logger = logging.getLogger(__name__)


class HashSet(SetADT):
    LOAD_FACTOR = 4

    def __init__(self, hash_function: Callable[[Any], int] = hash):
        self._hash = hash_function
        self._table: List[Optional[List[Any]]] = [None]
        self._size = 0
        self._reallocations = 0
        self._collisions = 0
        self._maximal = 0

    # ------------------ Accessors ------------------
    def size(self) -> int:
        return self._size

    def buckets(self) -> int:
        """Return the number of buckets in the table."""
        return len(self._table)

    def reallocations(self) -> int:
        """Return the number of times the table has resized itself."""
        return self._reallocations

    def collisions(self) -> int:
        """Return how many inserts into the current table found a non-empty bucket."""
        return self._collisions

    def maximal(self) -> int:
        """Return the longest chain seen so far in the current table."""
        return self._maximal

    def load_factor(self) -> float:
        return self._size / len(self._table)

    def __iter__(self) -> Iterable[Any]:
        for chain in self._table:
            if chain is not None:
                yield from chain

    # ------------------ Core operations ------------------
    def _bucket_of(self, item: Any) -> int:
        return self._hash(item) % len(self._table)

    def insert(self, item: Any) -> None:
        """
        Add item to the table.

        The caller must ensure item is not already present; duplicates are
        not detected. Use add() for a checked insertion.
        """
        self._place(item)
        if self._overloaded():
            self._resize()

    def _place(self, item: Any) -> None:
        bucket = self._bucket_of(item)
        chain = self._table[bucket]
        if chain is None:
            chain = self._table[bucket] = []
        else:
            self._collisions += 1

        chain.append(item)
        self._size += 1
        if len(chain) > self._maximal:
            self._maximal = len(chain)

    def _overloaded(self) -> bool:
        return self._size / len(self._table) >= self.LOAD_FACTOR

    def _resize(self) -> None:
        old_table = self._table
        self._table = [None] * (2 * len(old_table))
        self._size = 0
        self._collisions = 0
        self._maximal = 0

        for chain in old_table:
            if chain is not None:
                for item in chain:
                    self._place(item)

        self._reallocations += 1
        logger.debug("resized to %d buckets (%d items)", len(self._table), self._size)

    def exists(self, item: Any) -> bool:
        chain = self._table[self._bucket_of(item)]
        if chain is None:
            return False
        for candidate in chain:
            if candidate == item:
                return True
        return False

    # ------------------ Diagnostics ------------------
    def show_statistics(self, out: Optional[TextIO] = None) -> None:
        """Write a one-line summary of the table's shape."""
        if out is None:
            out = sys.stdout
        out.write(
            f"{self._reallocations} expansions, load factor {self.load_factor():.2f}, "
            f"{self._collisions} collisions, longest run {self._maximal}\n"
        )

    def __repr__(self) -> str:
        return f"HashSet(size={self._size}, buckets={len(self._table)})"
