from abc import ABC, abstractmethod
from typing import Iterable, Any


class Position(ABC):
    @abstractmethod
    def get_element(self):
        """Return the element stored at this position."""
        pass

    @abstractmethod
    def __eq__(self, other):
        """Return True if other is a Position representing the same location."""
        pass

    def __ne__(self, other):
        """Return True if other does not represent the same location."""
        return not (self == other)


class Collection(ABC):
    """Abstract base class for a sized, iterable container."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements in the container."""
        pass

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        """Return True if the container is empty."""
        return self.size() == 0

    @abstractmethod
    def __iter__(self) -> Iterable[Any]:
        """Generate an iteration of the container's elements."""
        pass


class SetADT(Collection):
    """Abstract base class for a set supporting insertion and membership."""

    @abstractmethod
    def insert(self, value: Any) -> None:
        """Add value. Behavior is undefined if value is already present."""
        pass

    @abstractmethod
    def exists(self, value: Any) -> bool:
        """Return True if value is present in the set."""
        pass

    def __contains__(self, value: Any) -> bool:
        return self.exists(value)

    def add(self, value: Any) -> bool:
        """Insert value only if it is absent. Return True if it was inserted."""
        if self.exists(value):
            return False
        self.insert(value)
        return True
