"""
Strify Traversal Orchestrator
"""

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import fmt_collection
from .members import declared_members, is_member_included, validate_member
from .request import BRACKET_CLOSE, BRACKET_OPEN, EXPR_CIRC_REF, FormatRequest
from .utils import class_name, indentation
from .values import ValueKind, fmt_member_value, fmt_scalar, value_kind
from .visited import VisitedSet


# Methods --------------------------------------------------------------------------------------------------------------

def core_strify(request: FormatRequest, visited: VisitedSet | None = None) -> str:
    """
    Recursive object-to-text engine powering every strify entry point.

    Renders `TypeName[...]` for request.obj and recurses into nested values. The body
    between the brackets depends on the object's shape:

    Processing Pipeline:
        1. Cycle check: an object already in `visited` renders as PARENT
        2. Collections (sequences, sets, mappings, arrays) → element count in summary mode,
           one block per element in resolve mode (mapping values only)
        3. Scalars (None, enums, dates, numbers, text) → the scalar text
        4. Plain objects → `name=value` pairs of the selected members, separated by the
           delimiter; multi-line output puts every member on its own indented line

    Member rules for plain objects:
        - Every member is validated first; a marker misconfiguration aborts the call
        - Nested objects (nesting > 0) rendered with resolve=False show no members at all
        - ClassVar, Final and EXCLUDE members are skipped
        - DONT_RESOLVE members render their collection with resolve=False

    Args:
        request: Object and formatting parameters of this call.
        visited: Visited set shared with the enclosing calls. A fresh set is
                 created when None, which makes the call a top-level one.

    Returns:
        Rendered text.

    Raises:
        StrifyConfigError: If any member carries an invalid marker combination.
        RecursionError: If an acyclic object graph is deeper than the interpreter stack.

    Examples:
        >>> core_strify(FormatRequest([1, 2, 3]))
        'list[3]'
        >>> core_strify(FormatRequest(42))
        'int[42]'
    """
    visited = VisitedSet() if visited is None else visited
    obj = request.obj

    parts = [class_name(type(obj), fully_qualified=request.fully_qualified), BRACKET_OPEN]

    if visited.has_visited(obj):
        parts.append(EXPR_CIRC_REF)
    else:
        kind = value_kind(obj)
        if kind is ValueKind.COLLECTION:
            parts.append(fmt_collection(request, visited, fn_render=core_strify))
        elif kind.is_scalar:
            parts.append(fmt_scalar(obj, kind))
        else:
            parts.append(_fmt_members(request, visited))

    parts.append(BRACKET_CLOSE)
    return "".join(parts)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_members(request: FormatRequest, visited: VisitedSet) -> str:
    """Render the member list of a plain object, without the surrounding brackets."""
    obj = request.obj
    multiline = request.multiline
    skip_all = not request.is_top_level and not request.resolve

    parts = []
    if multiline:
        parts.append(request.delimiter)

    first = True
    for member in declared_members(obj, request.level):
        validate_member(member)

        if skip_all:
            continue
        if not is_member_included(member):
            continue

        if not first:
            parts.append(request.delimiter)
        if multiline:
            parts.append(indentation(request.nesting))

        parts.append(fmt_member_value(obj, member, request, visited, fn_render=core_strify))
        first = False

    if multiline:
        parts.append(request.delimiter)
        parts.append(indentation(request.nesting - 1))

    return "".join(parts)
