"""
Strify Value Formatter

Classifies values into a closed set of kinds and renders the scalar kinds.
Composite kinds (collections and plain objects) are handed back to the orchestrator.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import datetime
import logging
import numbers
import time
from enum import Enum, unique
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import is_collection
from .members import Member, StrifyConfigError
from .request import EQUALS, EXPR_NULL, FormatRequest, QUOTE
from .utils import class_name
from .visited import VisitedSet

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ValueKind(str, Enum):
    """
    Closed set of value shapes, listed in dispatch priority order.

    Members are str subclasses, so they read well in logs and test ids.
    """
    NULL = "null"
    ENUM = "enum"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    TIMESTAMP = "timestamp"
    PRIMITIVE = "primitive"
    TEXT = "text"
    COLLECTION = "collection"
    OBJECT = "object"

    @property
    def is_scalar(self) -> bool:
        """Scalar kinds render in place, without recursion."""
        return self not in (ValueKind.COLLECTION, ValueKind.OBJECT)


# Methods --------------------------------------------------------------------------------------------------------------

def value_kind(value: Any) -> ValueKind:
    """
    Classify a value, first match wins.

    Order matters: bool and IntEnum are numbers, datetime is a date,
    and str is a sequence; the earlier rule decides in each case.

    Examples:
        >>> value_kind(None), value_kind(3), value_kind("a"), value_kind([1])
        (<ValueKind.NULL: 'null'>, <ValueKind.PRIMITIVE: 'primitive'>, <ValueKind.TEXT: 'text'>, <ValueKind.COLLECTION: 'collection'>)
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Enum):
        return ValueKind.ENUM
    if isinstance(value, datetime.datetime):
        return ValueKind.DATETIME
    if isinstance(value, datetime.date):
        return ValueKind.DATE
    if isinstance(value, datetime.time):
        return ValueKind.TIME
    if isinstance(value, time.struct_time):
        return ValueKind.TIMESTAMP
    if isinstance(value, (numbers.Number, bytes, bytearray)):
        return ValueKind.PRIMITIVE
    if isinstance(value, str):
        return ValueKind.TEXT
    if is_collection(value):
        return ValueKind.COLLECTION
    return ValueKind.OBJECT


def fmt_scalar(value: Any, kind: ValueKind | None = None) -> str:
    """
    Render a scalar value.

    Args:
        value: Value to render.
        kind: Precomputed kind of value, classified on the fly if None.

    Returns:
        NULL for None, the member name for enums, ISO 8601 for dates and times,
        `yyyy-MM-dd'T'HH:mm:ss.SSSZ` for struct_time timestamps, plain str() for
        primitives, and double-quoted, unescaped text for str.

    Raises:
        TypeError: If value is a collection or a plain object.

    Examples:
        >>> fmt_scalar(datetime.date(2024, 1, 31))
        '2024-01-31'
        >>> fmt_scalar('say "hi"')
        '"say "hi""'
    """
    kind = value_kind(value) if kind is None else kind

    match kind:
        case ValueKind.NULL:
            return EXPR_NULL
        case ValueKind.ENUM:
            return value.name if value.name is not None else str(value)
        case ValueKind.DATE | ValueKind.DATETIME | ValueKind.TIME:
            return value.isoformat()
        case ValueKind.TIMESTAMP:
            return _fmt_timestamp(value)
        case ValueKind.PRIMITIVE:
            return str(value)
        case ValueKind.TEXT:
            return f"{QUOTE}{value}{QUOTE}"
        case _:
            raise TypeError(f"scalar value expected, but got {class_name(value)} of kind '{kind.value}'")


def fmt_member_value(owner: Any,
                     member: Member,
                     request: FormatRequest,
                     visited: VisitedSet,
                     fn_render: Callable[[FormatRequest, VisitedSet], str]) -> str:
    """
    Render `name=value` for one member of owner.

    The owner is marked visited before its value is rendered, so a back-reference
    met while rendering the value short-circuits. Collections and plain objects recurse
    through fn_render one nesting level deeper; a DONT_RESOLVE member recurses with
    resolve=False regardless of the request.

    A failing attribute read does not abort the call: the value renders as
    `<ExcType: message>` and a debug record is logged.

    Args:
        owner: Object the member belongs to.
        member: Member descriptor to render.
        request: Request that is rendering owner.
        visited: Visited set of the running top-level call.
        fn_render: The orchestrator, called back for composite values.

    Returns:
        The `name=value` text.
    """
    # Owner is marked before its value renders; a back-reference to it renders PARENT
    visited.mark_visited(owner)
    resolve = False if member.dont_resolve else request.resolve

    try:
        value = getattr(owner, member.name)
    except (StrifyConfigError, RecursionError):
        raise
    except Exception as exc:
        logger.debug("reading %s.%s failed", class_name(owner), member.name, exc_info=True)
        return f"{member.name}{EQUALS}{_fmt_exception(exc)}"

    kind = value_kind(value)
    if kind.is_scalar:
        rendered = fmt_scalar(value, kind)
    else:
        rendered = fn_render(request.nested(value, resolve=resolve), visited)

    return f"{member.name}{EQUALS}{rendered}"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_exception(exc: BaseException) -> str:
    """Visible placeholder for a value that could not be read, like <AttributeError: no 'x'>."""
    message = str(exc)
    name = type(exc).__name__
    return f"<{name}: {message}>" if message else f"<{name}>"


def _fmt_timestamp(value: time.struct_time) -> str:
    """Render struct_time as yyyy-MM-dd'T'HH:mm:ss.SSSZ, milliseconds are always 000."""
    offset = getattr(value, "tm_gmtoff", None) or 0
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset) // 60, 60)
    return time.strftime("%Y-%m-%dT%H:%M:%S", value) + f".000{sign}{hours:02d}{minutes:02d}"
