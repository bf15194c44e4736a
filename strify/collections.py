"""
Strify Collection Formatter
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections.abc as abc
import types
import typing
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .request import FormatRequest
from .utils import indentation
from .visited import VisitedSet

COLLECTION_TYPES = (
    abc.Mapping,
    abc.Sequence,
    abc.Set,
    abc.MappingView,
    array.array,
)

# Sequences of characters or bytes render as scalars, never as collections
TEXT_TYPES = (str, bytes, bytearray)


# Methods --------------------------------------------------------------------------------------------------------------

def is_collection(obj: Any) -> bool:
    """
    Check whether obj is rendered by the collection formatter.

    Mappings, sequences, sets, mapping views and arrays qualify; text-like
    sequences (str, bytes, bytearray) do not.

    Examples:
        >>> is_collection([1, 2]), is_collection({"a": 1}), is_collection("ab")
        (True, True, False)
    """
    if isinstance(obj, TEXT_TYPES):
        return False
    return isinstance(obj, COLLECTION_TYPES)


def is_collection_type(tp: Any) -> bool:
    """
    Check whether a declared type describes a collection.

    Accepts plain classes and parametrized generics (`list[int]`, `typing.Dict[str, int]`).
    Unions qualify when all of their non-None arms do, so `list[int] | None` is a collection type.

    Examples:
        >>> is_collection_type(list[int]), is_collection_type(int | None), is_collection_type(str)
        (True, False, False)
    """
    if tp is Any:
        return False

    origin = typing.get_origin(tp)

    if origin in (typing.Union, types.UnionType):
        arms = [arm for arm in typing.get_args(tp) if arm is not type(None)]
        return bool(arms) and all(is_collection_type(arm) for arm in arms)

    cls = origin or tp
    if not isinstance(cls, type):
        return False
    if issubclass(cls, TEXT_TYPES):
        return False
    return issubclass(cls, COLLECTION_TYPES)


def collection_items(obj: Any) -> abc.Iterable[Any]:
    """Return the renderable elements of a collection: values for mappings, elements otherwise."""
    if isinstance(obj, abc.Mapping):
        return obj.values()
    if isinstance(obj, abc.ItemsView):
        return (value for _, value in obj)
    return obj


def fmt_collection(request: FormatRequest,
                   visited: VisitedSet,
                   fn_render: Callable[[FormatRequest, VisitedSet], str]) -> str:
    """
    Render the contents of a collection, without the surrounding type name and brackets.

    Summary mode (resolve=False) and empty collections render as the element count.
    Resolve mode renders one block per element, in iteration order, each preceded by
    the delimiter and the indentation of the current nesting, whatever the delimiter.
    Elements are rendered by fn_render with nesting + 1 and resolve=True. Mapping keys
    are not rendered.

    Args:
        request: Request describing the collection and the formatting parameters.
        visited: Visited set of the running top-level call.
        fn_render: The orchestrator, called back for every element.

    Returns:
        The rendered collection body.

    Examples:
        >>> fmt_collection(FormatRequest([1, 2, 3]), VisitedSet(), fn_render)
        '3'
    """
    obj = request.obj
    size = len(obj)

    if size == 0 or not request.resolve:
        return str(size)

    visited.mark_visited(obj)

    parts = []
    for item in collection_items(obj):
        parts.append(request.delimiter)
        parts.append(indentation(request.nesting))
        parts.append(fn_render(request.nested(item, resolve=True), visited))

    parts.append(request.delimiter)
    parts.append(indentation(request.nesting - 1))

    return "".join(parts)
