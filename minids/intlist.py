from typing import Iterable, Optional

from minids.base import Collection, Position


class IntList(Collection):
    """A singly linked list of ints with constant-time access to both ends."""

    class _Element(Position):
        """Nested Element class that acts as a Position."""
        __slots__ = '_value', '_next', '_container'

        def __init__(self, value, next_element=None, container=None):
            self._value = value
            self._next = next_element
            self._container = container

        def get_element(self):
            if self._container is None:
                raise ValueError("Position no longer valid")
            return self._value

        def __eq__(self, other):
            return other is self

        def __hash__(self):
            return id(self)

    def __init__(self, values: Iterable[int] = ()):
        self._front: Optional[IntList._Element] = None
        self._back: Optional[IntList._Element] = None
        self._size = 0
        for v in values:
            self.push_back(v)

    def _validate(self, p):
        """Validates the position and returns it as an element."""
        if not isinstance(p, self._Element):
            raise TypeError("Not valid position type")
        if p._container is not self:
            raise ValueError("p does not belong to this list")
        return p

    def _make_element(self, value, next_element=None):
        return self._Element(value, next_element, self)

    # ------------------ Accessors ------------------
    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def first(self) -> Optional[Position]:
        """Return the Position of the first element (or None if empty)."""
        return self._front

    def after(self, p: Position) -> Optional[Position]:
        """Return the Position following p (or None if p is last)."""
        return self._validate(p)._next

    def positions(self) -> Iterable[Position]:
        """Generate an iteration of the list's positions, front to back."""
        walk = self._front
        while walk is not None:
            yield walk
            walk = walk._next

    def __iter__(self) -> Iterable[int]:
        for p in self.positions():
            yield p._value

    def __eq__(self, other):
        if not isinstance(other, IntList):
            return NotImplemented
        if self._size != other._size:
            return False
        for a, b in zip(self, other):
            if a != b:
                return False
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return f"IntList({list(self)})"

    # ------------------ Mutations ------------------
    def push_front(self, value: int) -> None:
        """Push value onto the head of the list."""
        self._front = self._make_element(value, self._front)
        self._size += 1
        if self._size == 1:
            self._back = self._front

    def push_back(self, value: int) -> None:
        """Push value onto the tail of the list."""
        last = self._make_element(value)
        if self.empty():
            self._front = last
        else:
            self._back._next = last
        self._back = last
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the head element."""
        if self.empty():
            raise IndexError("pop from empty IntList")
        first = self._front
        self._front = first._next
        if self._front is None:
            self._back = None
        self._size -= 1

        value = first._value
        first._next = None
        first._container = None  # convention for defunct element
        return value

    def insert_after(self, p: Position, value: int) -> Position:
        """Insert value directly after Position p and return the new Position."""
        where = self._validate(p)
        inserted = self._make_element(value, where._next)
        where._next = inserted
        if where is self._back:
            self._back = inserted
        self._size += 1
        return inserted

    def swap(self, other: "IntList") -> None:
        """Exchange contents with another IntList."""
        self._front, other._front = other._front, self._front
        self._back, other._back = other._back, self._back
        self._size, other._size = other._size, self._size
        for p in self.positions():
            p._container = self
        for p in other.positions():
            p._container = other

    def copy(self) -> "IntList":
        return IntList(self)

    __copy__ = copy

    def clear(self) -> None:
        while not self.empty():
            self.pop_front()
