"""
Strify utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .request import INDENT


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the fully qualified name for user objects or classes.
                                Builtins are never qualified.

    Returns:
        str: The class name.

    Examples:
        >>> class_name([1, 2])
        'list'

        >>> class C: ...
        >>> class_name(C())
        'C'
        >>> class_name(C, fully_qualified=True)
        'strify.utils.C'
    """
    cls = obj if isinstance(obj, type) else type(obj)

    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__name__


def indentation(level: int, indent: str = INDENT) -> str:
    """
    Return the indentation prefix for the given nesting level.

    Level n is n+1 repetitions of the indent token, so level -1 (the closing
    line of a top-level block) is empty.
    """
    return indent * (level + 1)
