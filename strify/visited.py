"""
Strify Cycle Tracker
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------

class VisitedSet:
    """
    Identity-keyed registry of objects already rendered within one top-level call.

    Equality is never consulted: two distinct instances that compare equal are tracked
    separately. A reference to every visited object is held so that ids stay unique
    while the call runs.

    Each public strify entry point builds its own VisitedSet and passes it down by reference
    to every nested call, so concurrent top-level calls never share state.

    Examples:
        >>> visited = VisitedSet()
        >>> a, b = [], []
        >>> visited.mark_visited(a)
        >>> visited.has_visited(a), visited.has_visited(b)
        (True, False)
    """

    def __init__(self) -> None:
        self._objects: dict[int, Any] = {}

    def __contains__(self, obj: Any) -> bool:
        return self.has_visited(obj)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"VisitedSet(len={len(self._objects)})"

    def has_visited(self, obj: Any) -> bool:
        return id(obj) in self._objects

    def mark_visited(self, obj: Any) -> None:
        self._objects[id(obj)] = obj

    def reset(self) -> None:
        """Forget every visited object."""
        self._objects.clear()
