"""
Strify public formatters.

Human-readable text renderings of arbitrary objects for debugging and logging,
driven by introspection of the objects' declared members. No formatting code
is needed in the rendered classes.

Entry points:
    format_summary: single line, nested objects summarized
    format_dump: multi-line, nested objects expanded
    format_custom: every parameter explicit
    strify: rendering with StrifyOptions or the module-level defaults from configure()
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from dataclasses import dataclass, replace
from typing import Any, Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .core import core_strify
from .markers import LEVEL_DEEP
from .members import StrifyConfigError
from .request import DELIMITER_ML, DELIMITER_SL, FormatRequest
from .utils import class_name
from .visited import VisitedSet

__all__ = [
    "StrifyConfigError",
    "StrifyOptions",
    "Strify",
    "StrifyMixin",
    "configure",
    "format_custom",
    "format_dump",
    "format_summary",
    "get_options",
    "strify",
]

logger = logging.getLogger(__name__)

Preset = Literal["summary", "dump"]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class StrifyOptions:
    """
    Formatting options for strify().

    Attributes:
        delimiter: One character placed between members and elements.
                   DELIMITER_ML ("\\n") also turns indentation on.
        level: Hierarchy depth limit, LEVEL_ONLY (0), N ancestor levels, or LEVEL_DEEP (-1).
        resolve: Expand nested objects and collections in place.
        fully_qualified: Render `module.Class` type names for user classes.

    Examples:
        >>> StrifyOptions.dump().merge(level=0)
        StrifyOptions(delimiter='\\n', level=0, resolve=True, fully_qualified=False)
    """
    delimiter: str = DELIMITER_SL
    level: int = LEVEL_DEEP
    resolve: bool = False
    fully_qualified: bool = False

    def __post_init__(self) -> None:
        _validate_params(self.delimiter, 0, self.level, self.resolve)
        if not isinstance(self.fully_qualified, bool):
            raise TypeError(f"fully_qualified must be a bool, but got {class_name(self.fully_qualified)}")

    @classmethod
    def summary(cls) -> Self:
        """Single-line, whole hierarchy, nested values summarized."""
        return cls(delimiter=DELIMITER_SL, level=LEVEL_DEEP, resolve=False)

    @classmethod
    def dump(cls) -> Self:
        """Multi-line, whole hierarchy, nested values expanded."""
        return cls(delimiter=DELIMITER_ML, level=LEVEL_DEEP, resolve=True)

    def merge(self, **kwargs) -> Self:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **kwargs)


class Strify:
    """
    Lazy text rendering of an object.

    Nothing is rendered until str() is called, which keeps disabled log records cheap:

        >>> logger.debug("state: %s", Strify(engine, StrifyOptions.dump()))
    """
    __slots__ = ("obj", "options")

    def __init__(self, obj: Any, options: StrifyOptions | None = None) -> None:
        self.obj = obj
        self.options = options

    def __str__(self) -> str:
        return strify(self.obj, options=self.options)

    def __repr__(self) -> str:
        return f"Strify({class_name(self.obj)})"


class StrifyMixin:
    """
    Mixin giving a class a strify-based __str__ and a dump() method.

    Examples:
        >>> class Point(StrifyMixin):
        ...     def __init__(self, x, y):
        ...         self.x, self.y = x, y
        >>> str(Point(1, 2))
        'Point[x=1,y=2]'
    """

    def __str__(self) -> str:
        return format_summary(self)

    def dump(self) -> str:
        """Multi-line rendering with nested values expanded."""
        return format_dump(self)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_params(delimiter: Any, nesting: Any, level: Any, resolve: Any) -> None:
    if not isinstance(delimiter, str):
        raise TypeError(f"delimiter must be a str, but got {class_name(delimiter)}")
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, but got {delimiter!r}")

    if isinstance(nesting, bool) or not isinstance(nesting, int):
        raise TypeError(f"nesting must be an int, but got {class_name(nesting)}")
    if nesting < 0:
        raise ValueError(f"nesting must be >= 0, but got {nesting}")

    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"level must be an int, but got {class_name(level)}")
    if level < LEVEL_DEEP:
        raise ValueError(f"level must be >= {LEVEL_DEEP}, but got {level}")

    if not isinstance(resolve, bool):
        raise TypeError(f"resolve must be a bool, but got {class_name(resolve)}")


_options: StrifyOptions = StrifyOptions.summary()


# Methods --------------------------------------------------------------------------------------------------------------

def configure(preset: Preset | None = None, **kwargs) -> StrifyOptions:
    """
    Update the module-level defaults used by strify() when no options are passed.

    Args:
        preset: "summary" or "dump" to start from a preset, None to start from the current defaults.
        **kwargs: StrifyOptions fields to override.

    Returns:
        The new module-level options.

    Raises:
        ValueError: If preset is unknown.
        TypeError: If kwargs name an unknown field or carry a value of the wrong type.

    Examples:
        >>> configure(preset="dump", level=1)
        StrifyOptions(delimiter='\\n', level=1, resolve=True, fully_qualified=False)
    """
    global _options

    if preset is None:
        base = _options
    elif preset == "summary":
        base = StrifyOptions.summary()
    elif preset == "dump":
        base = StrifyOptions.dump()
    else:
        raise ValueError(f"unknown preset {preset!r}, expected 'summary' or 'dump'")

    _options = base.merge(**kwargs)
    logger.debug("strify defaults configured: %r", _options)
    return _options


def get_options() -> StrifyOptions:
    """Current module-level defaults."""
    return _options


def format_summary(obj: Any) -> str:
    """
    Single-line rendering; nested objects render empty and collections as their size.

    Examples:
        >>> format_summary([1, 2, 3])
        'list[3]'
    """
    return format_custom(obj, DELIMITER_SL, 0, LEVEL_DEEP, False)


def format_dump(obj: Any) -> str:
    """
    Multi-line rendering with the whole object graph expanded and tab-indented.

    Back-references to objects already rendered in the same call show as PARENT.
    """
    return format_custom(obj, DELIMITER_ML, 0, LEVEL_DEEP, True)


def format_custom(obj: Any,
                  delimiter: str,
                  nesting: int,
                  level: int,
                  resolve: bool,
                  *,
                  fully_qualified: bool = False) -> str:
    """
    Render obj with every formatting parameter explicit.

    Every call is a top-level call with its own visited set, whatever the nesting.

    Args:
        obj: Object to render.
        delimiter: One character between members and elements; "\\n" also indents.
        nesting: Starting nesting depth, drives indentation and the nested-object
                 member skipping of summary mode.
        level: Hierarchy depth limit, LEVEL_ONLY (0), N ancestor levels, or LEVEL_DEEP (-1).
        resolve: Expand nested objects and collections in place.
        fully_qualified: Render `module.Class` type names for user classes.

    Returns:
        Rendered text.

    Raises:
        StrifyConfigError: If a member of the graph carries an invalid marker combination.
        TypeError: If a parameter has the wrong type.
        ValueError: If a parameter is out of range.

    Examples:
        >>> format_custom(person, ",", 0, LEVEL_DEEP, False)
        'Person[name="John Doe",address=Address[],addresses_old=list[1]]'
    """
    _validate_params(delimiter, nesting, level, resolve)

    request = FormatRequest(obj,
                            delimiter=delimiter,
                            nesting=nesting,
                            level=level,
                            resolve=resolve,
                            fully_qualified=bool(fully_qualified))

    logger.debug("strify %s: delimiter=%r nesting=%d level=%d resolve=%s",
                 class_name(obj), delimiter, nesting, level, resolve)

    return core_strify(request, VisitedSet())


def strify(obj: Any, options: StrifyOptions | None = None) -> str:
    """
    Render obj with the given options, or with the module-level defaults set by configure().

    Raises:
        TypeError: If options is not a StrifyOptions instance or None.
        StrifyConfigError: If a member of the graph carries an invalid marker combination.
    """
    if not isinstance(options, (StrifyOptions, type(None))):
        raise TypeError(f"options must be a StrifyOptions instance, but got {class_name(options)}")

    opt = options or _options
    return format_custom(obj, opt.delimiter, 0, opt.level, opt.resolve,
                         fully_qualified=opt.fully_qualified)
