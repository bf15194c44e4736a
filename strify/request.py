"""
Strify format request and rendering tokens.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from typing import Any, Final

# Local ----------------------------------------------------------------------------------------------------------------
from .markers import LEVEL_DEEP

# Constants ------------------------------------------------------------------------------------------------------------

BRACKET_OPEN: Final[str] = "["
BRACKET_CLOSE: Final[str] = "]"
QUOTE: Final[str] = '"'
EQUALS: Final[str] = "="
INDENT: Final[str] = "\t"

DELIMITER_SL: Final[str] = ","
"""Delimiter separating members of a single-line rendering."""

DELIMITER_ML: Final[str] = "\n"
"""Delimiter separating members of a multi-line rendering, also switches indentation on."""

EXPR_NULL: Final[str] = "NULL"
"""Rendering of an absent value."""

EXPR_CIRC_REF: Final[str] = "PARENT"
"""Rendering of an object already visited in the running call."""


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatRequest:
    """
    Immutable parameter set of one, possibly nested, formatting call.

    Attributes:
        obj: The object to render.
        delimiter: Character placed between rendered members and elements.
                   DELIMITER_ML additionally emits indentation.
        nesting: Current recursion depth, 0 for a top-level call.
        level: Hierarchy depth limit: LEVEL_ONLY (0) for the most-derived type only,
               LEVEL_DEEP (-1) for the whole ancestor chain, N for N ancestor levels.
        resolve: Expand nested non-primitive values (True) or only summarize them (False).
        fully_qualified: Render type names as `module.Class`.
    """
    obj: Any
    delimiter: str = DELIMITER_SL
    nesting: int = 0
    level: int = LEVEL_DEEP
    resolve: bool = False
    fully_qualified: bool = False

    @property
    def multiline(self) -> bool:
        return self.delimiter == DELIMITER_ML

    @property
    def is_top_level(self) -> bool:
        return self.nesting == 0

    def nested(self, obj: Any, resolve: bool) -> "FormatRequest":
        """Request for a child value rendered one nesting level deeper."""
        return replace(self, obj=obj, nesting=self.nesting + 1, resolve=resolve)
