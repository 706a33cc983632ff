"""
Randomized binary search tree set.

Each insertion lands at the root of the subtree it enters with probability
1/(n+1), where n is that subtree's size. Over any insertion order this gives
an expected tree height of O(log n) without storing priorities or balance
factors in the nodes.
"""

import io
import logging
import random
import sys
from typing import Any, Iterable, Optional, TextIO

from minids.base import SetADT

logger = logging.getLogger(__name__)


class RandomizedSet(SetADT):
    """Ordered set backed by a randomized binary search tree."""

    class _Node:
        """Tree node storing one element and the size of its subtree."""
        __slots__ = '_element', '_left', '_right', '_size'

        def __init__(self, e, left=None, right=None, size=1):
            self._element = e
            self._left = left
            self._right = right
            self._size = size

    def __init__(self, seed: Optional[int] = None, rng: Any = None):
        """
        Create an empty set.

        rng is any object providing randrange(stop). When omitted, a private
        random.Random is created from seed (OS entropy when seed is None).
        """
        self._root: Optional[RandomizedSet._Node] = None
        self._rng = rng if rng is not None else random.Random(seed)

    # ------------------ Node lifecycle ------------------
    def _make_node(self, e, left=None, right=None, size=1):
        """Factory function to create a new node storing element e."""
        return self._Node(e, left, right, size)

    def _release_node(self, node) -> None:
        """Detach a node that is being torn down."""
        node._left = None
        node._right = None
        node._element = None
        node._size = 0

    # ------------------ Accessors ------------------
    @staticmethod
    def _size_of(here) -> int:
        if here is None:
            return 0
        return here._size

    def size(self) -> int:
        """Return the number of elements in the set."""
        return self._size_of(self._root)

    def height(self) -> int:
        """Return the height of the tree, or -1 if it is empty."""
        return self._height_of(self._root)

    def _height_of(self, here) -> int:
        if here is None:
            return -1
        return 1 + max(self._height_of(here._left), self._height_of(here._right))

    def exists(self, value: Any) -> bool:
        """Return True if value is in the set."""
        return self._node_exists(self._root, value)

    def _node_exists(self, here, value) -> bool:
        if here is None:
            return False
        if value < here._element:
            return self._node_exists(here._left, value)
        if here._element < value:
            return self._node_exists(here._right, value)
        return True

    def __iter__(self) -> Iterable[Any]:
        """Generate an iteration of the set's elements in increasing order."""
        yield from self._subtree_inorder(self._root)

    def _subtree_inorder(self, here) -> Iterable[Any]:
        if here is None:
            return
        yield from self._subtree_inorder(here._left)
        yield here._element
        yield from self._subtree_inorder(here._right)

    # ------------------ Insertion ------------------
    def insert(self, value: Any) -> None:
        """
        Add value to the set.

        The caller must ensure value is not already present; duplicates are
        not detected. Use add() for a checked insertion.
        """
        self._root = self._insert_node(self._root, value)

    def _insert_node(self, here, value):
        """Insert value into the subtree at here and return the new subtree root."""
        if self._rng.randrange(self._size_of(here) + 1) == 0:
            return self._insert_at_root(here, value)

        here._size += 1
        if here._element < value:
            here._right = self._insert_node(here._right, value)
        else:
            here._left = self._insert_node(here._left, value)
        return here

    def _insert_at_root(self, here, value):
        """Insert value so that it becomes the root of the subtree at here."""
        if here is None:
            return self._make_node(value)

        here._size += 1
        if value < here._element:
            here._left = self._insert_at_root(here._left, value)
            return self._right_rotate(here)
        here._right = self._insert_at_root(here._right, value)
        return self._left_rotate(here)

    # ------------------ Rotations ------------------
    def _right_rotate(self, here):
        """Rotate here's subtree to the right and return its new root."""
        pivot = here._left
        old_size = here._size
        # sizes first; relinking below loses the old linkage
        here._size = self._size_of(here._right) + self._size_of(pivot._right) + 1
        pivot._size = old_size

        here._left = pivot._right
        pivot._right = here
        return pivot

    def _left_rotate(self, here):
        """Rotate here's subtree to the left and return its new root."""
        pivot = here._right
        old_size = here._size
        here._size = self._size_of(here._left) + self._size_of(pivot._left) + 1
        pivot._size = old_size

        here._right = pivot._left
        pivot._left = here
        return pivot

    # ------------------ Diagnostics ------------------
    def print(self, out: Optional[TextIO] = None) -> TextIO:
        """Write the tree as a parenthesized in-order expression to out."""
        if out is None:
            out = sys.stdout
        self._node_print(out, self._root)
        return out

    def _node_print(self, out: TextIO, here) -> None:
        if here is None:
            out.write("-")
            return
        out.write("(")
        self._node_print(out, here._left)
        out.write(f", {here._element}, ")
        self._node_print(out, here._right)
        out.write(")")

    def show_statistics(self, out: Optional[TextIO] = None) -> None:
        """Write the height and size of the tree on one line."""
        if out is None:
            out = sys.stdout
        out.write(f"height {self.height()}, size {self.size()}\n")

    def __str__(self) -> str:
        return self.print(io.StringIO()).getvalue()

    def __repr__(self) -> str:
        return f"RandomizedSet(size={self.size()}, height={self.height()})"

    # ------------------ Teardown ------------------
    def clear(self) -> int:
        """Release every node, children before parents. Returns the count released."""
        released = self._delete_subtree(self._root)
        self._root = None
        logger.debug("released %d nodes", released)
        return released

    def _delete_subtree(self, here) -> int:
        if here is None:
            return 0
        released = self._delete_subtree(here._left)
        released += self._delete_subtree(here._right)
        self._release_node(here)
        return released + 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clear()
        return False

    def __copy__(self):
        raise TypeError("RandomizedSet cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("RandomizedSet cannot be copied")
