"""
Member markers and hierarchy depth constants.

Markers are singleton objects attached to member annotations with ``typing.Annotated``.
They are read by the member selector, never interpreted by the annotated class itself.
All markers use identity checks (using 'is') rather than equality checks.

Markers:
    EXCLUDE: The member is never rendered
    DONT_RESOLVE: The member's nested value is always summarized, never expanded.
                  Legal only on sequence, mapping, set or array typed members.

Depth limits:
    LEVEL_ONLY: Only the members declared by the most-derived type
    LEVEL_DEEP: Members declared by the entire ancestor chain

Example:
    >>> from typing import Annotated
    >>> class Person:
    ...     name: str
    ...     age: Annotated[int, EXCLUDE]
    ...     addresses: Annotated[list[Address], DONT_RESOLVE]
"""

from typing import Any, Final, Iterable

__all__ = [
    'EXCLUDE',
    'DONT_RESOLVE',
    'LEVEL_ONLY',
    'LEVEL_DEEP',
    'ExcludeType',
    'DontResolveType',
    'markers_of',
]


# Base Marker ----------------------------------------------------------------------------------------------------------

class _MarkerBase:
    """
    Base class for all member markers.

    Markers are singleton objects optimized for identity checks.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        """Ensures identity-based comparison."""
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())

    @property
    def name(self) -> str:
        return self._name


# Marker Types ---------------------------------------------------------------------------------------------------------

class ExcludeType(_MarkerBase):
    """
    Marker type for EXCLUDE.

    The annotated member is skipped by every formatter call.
    """
    _instance: 'ExcludeType | None' = None

    def __new__(cls) -> 'ExcludeType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("EXCLUDE")


class DontResolveType(_MarkerBase):
    """
    Marker type for DONT_RESOLVE.

    The annotated collection member renders as its element count even when the
    surrounding call expands nested values. Incompatible with EXCLUDE.
    """
    _instance: 'DontResolveType | None' = None

    def __new__(cls) -> 'DontResolveType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("DONT_RESOLVE")


# Marker Objects -------------------------------------------------------------------------------------------------------

EXCLUDE: Final[ExcludeType] = ExcludeType()
"""
Marker excluding a member from the rendered text.

Use as annotation metadata: `age: Annotated[int, EXCLUDE]`
"""

DONT_RESOLVE: Final[DontResolveType] = DontResolveType()
"""
Marker forcing a collection member to be summarized by its element count.

Use as annotation metadata: `history: Annotated[list[Event], DONT_RESOLVE]`
"""

# Depth Limits ---------------------------------------------------------------------------------------------------------

LEVEL_ONLY: Final[int] = 0
"""Walk only the most-derived type of the object."""

LEVEL_DEEP: Final[int] = -1
"""Walk the entire ancestor chain of the object."""


# Helper Functions -----------------------------------------------------------------------------------------------------

def markers_of(metadata: Iterable[Any]) -> frozenset[_MarkerBase]:
    """
    Pick marker objects out of Annotated metadata, ignoring foreign entries.

    Marker classes are accepted as well as their instances, so both
    `Annotated[int, EXCLUDE]` and `Annotated[int, ExcludeType]` work.
    """
    found = set()
    for item in metadata:
        if isinstance(item, _MarkerBase):
            found.add(item)
        elif isinstance(item, type) and issubclass(item, _MarkerBase) and item is not _MarkerBase:
            found.add(item())
    return frozenset(found)
