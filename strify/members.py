"""
Member selection for strify: which declared members of an object get rendered.

A member is declared by a class annotation or a `__slots__` entry. Markers ride on the
annotation through `typing.Annotated`, while `ClassVar` and `Final` wrappers flag members
whose storage is shared across instances or whose value cannot vary per instance.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import inspect
import logging
import re
import sys
import typing
from dataclasses import dataclass, field
from typing import Annotated, Any, ClassVar, Final

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import is_collection_type
from .markers import DONT_RESOLVE, EXCLUDE, LEVEL_DEEP, markers_of
from .utils import class_name

logger = logging.getLogger(__name__)

_MARKER_NAMES = re.compile(r"\b(EXCLUDE|DONT_RESOLVE|ExcludeType|DontResolveType)\b")


# Classes --------------------------------------------------------------------------------------------------------------

class StrifyConfigError(ValueError):
    """Member markers are configured inconsistently; aborts the whole format call."""


@dataclass(frozen=True)
class Member:
    """
    Metadata about one declared member of a type.

    Attributes:
        name: Attribute name used to read the value from an instance.
        owner: Declaring class, None for instance attributes no class declares.
        declared_type: Declared type with Annotated/ClassVar/Final wrappers stripped.
        markers: Marker objects attached through Annotated metadata.
        shared: Storage shared by all instances (ClassVar).
        invariant: Value cannot vary per instance (Final).
    """
    name: str
    owner: type | None = None
    declared_type: Any = Any
    markers: frozenset = field(default_factory=frozenset)
    shared: bool = False
    invariant: bool = False

    @classmethod
    def from_annotation(cls, name: str, annotation: Any, owner: type | None = None) -> "Member":
        """
        Build a Member from a class annotation.

        Annotated, ClassVar and Final wrappers are unwrapped in any nesting order.
        Unevaluated string annotations are inspected by prefix only.
        """
        markers = set()
        shared = invariant = False
        tp = annotation

        while True:
            origin = typing.get_origin(tp)
            if origin is Annotated:
                markers |= markers_of(tp.__metadata__)
                tp = typing.get_args(tp)[0]
            elif tp is ClassVar or origin is ClassVar:
                shared = True
                tp = _first_arg(tp)
            elif tp is Final or origin is Final:
                invariant = True
                tp = _first_arg(tp)
            else:
                break

        if isinstance(tp, str):
            shared = shared or tp.startswith(("ClassVar", "typing.ClassVar"))
            invariant = invariant or tp.startswith(("Final", "typing.Final"))

        return cls(name=name,
                   owner=owner,
                   declared_type=tp,
                   markers=frozenset(markers),
                   shared=shared,
                   invariant=invariant)

    @property
    def excluded(self) -> bool:
        return EXCLUDE in self.markers

    @property
    def dont_resolve(self) -> bool:
        return DONT_RESOLVE in self.markers


# Methods --------------------------------------------------------------------------------------------------------------

def declared_members(obj: Any, level: int = LEVEL_DEEP) -> list[Member]:
    """
    Enumerate the declared members of obj, most-derived type first.

    Walks type(obj).__mro__ from the most-derived class towards its ancestors. Each class
    contributes its own annotations in declaration order, then its own unannotated
    `__slots__`. Builtin classes (object included) contribute nothing. Instance attributes
    that no class in the full MRO declares follow the members of the most-derived class.

    A name declared on several levels is listed once, at its most-derived declaration.

    Args:
        obj: Object to inspect.
        level: Hierarchy depth limit - LEVEL_ONLY (0) walks the most-derived type only,
               N walks N ancestor levels above it, LEVEL_DEEP (-1) walks the whole chain.

    Returns:
        Ordered list of Member descriptors, including the ones the inclusion filter
        drops later (ClassVar, Final, EXCLUDE).

    Raises:
        TypeError: If level is not an int.
        ValueError: If level is below LEVEL_DEEP.

    Examples:
        >>> class Base:
        ...     id: int
        >>> class Item(Base):
        ...     name: str
        >>> [m.name for m in declared_members(Item())]
        ['name', 'id']
        >>> [m.name for m in declared_members(Item(), level=0)]
        ['name']
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"level must be an int, but got {class_name(level)}")
    if level < LEVEL_DEEP:
        raise ValueError(f"level must be >= {LEVEL_DEEP}, but got {level}")

    mro = type(obj).__mro__
    hierarchy = mro if level == LEVEL_DEEP else mro[:level + 1]

    members: list[Member] = []
    seen: set[str] = set()

    for depth, cls in enumerate(hierarchy):
        candidates = _class_members(cls)
        if depth == 0:
            candidates = candidates + _undeclared_members(obj, mro)
        for member in candidates:
            if member.name in seen:
                continue
            seen.add(member.name)
            members.append(member)

    return members


def is_member_included(member: Member) -> bool:
    """A member renders only if it is per-instance, variable, and not excluded."""
    if member.shared:
        return False
    if member.invariant:
        return False
    return not member.excluded


def validate_member(member: Member) -> None:
    """
    Detect incompatible marker configurations.

    Raises:
        StrifyConfigError: If DONT_RESOLVE is combined with EXCLUDE, or if DONT_RESOLVE
                           sits on a member whose declared type is not a collection.
    """
    if not member.dont_resolve:
        return

    owner = class_name(member.owner) if member.owner is not None else "<instance>"

    if member.excluded:
        raise StrifyConfigError(f"markers {EXCLUDE!r} and {DONT_RESOLVE!r} are not compatible, "
                                f"found both on member {owner}.{member.name}")

    if not is_collection_type(member.declared_type):
        raise StrifyConfigError(f"marker {DONT_RESOLVE!r} is not supported for member {owner}.{member.name} "
                                f"of type {_type_name(member.declared_type)}, "
                                f"a sequence, mapping, set or array type expected")


# Private Methods ------------------------------------------------------------------------------------------------------

def _annotations(cls: type) -> dict[str, Any]:
    """
    Own annotations of cls, each evaluated on its own like inspect.get_annotations(eval_str=True).

    An annotation that cannot be evaluated stays a raw string, which hides its Annotated
    metadata. Raw strings naming a marker are therefore rejected.

    Raises:
        StrifyConfigError: If an unevaluable annotation carries a marker.
    """
    module = sys.modules.get(cls.__module__)
    globalns = getattr(module, "__dict__", {})
    localns = dict(vars(cls))

    annotations = {}
    for name, annotation in inspect.get_annotations(cls).items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, localns)
            except (NameError, AttributeError, SyntaxError, TypeError) as exc:
                if _MARKER_NAMES.search(annotation):
                    raise StrifyConfigError(f"annotation of member {class_name(cls)}.{name} carries a marker "
                                            f"but cannot be evaluated: {annotation!r} ({exc})") from exc
                logger.debug("unresolved annotation %s.%s, reading it raw: %s", class_name(cls), name, exc)
        annotations[name] = annotation
    return annotations


def _class_members(cls: type) -> list[Member]:
    """Members declared by cls itself, ancestors ignored."""
    if cls.__module__ == "builtins":
        return []

    members = []
    for name, annotation in _annotations(cls).items():
        if _is_dunder(name) or _is_init_var(annotation):
            continue
        members.append(Member.from_annotation(name, annotation, owner=cls))

    annotated = {m.name for m in members}
    for name in _slot_names(cls):
        if name not in annotated:
            members.append(Member(name=name, owner=cls))

    return members


def _declared_names(mro: tuple[type, ...]) -> set[str]:
    names = set()
    for cls in mro:
        names.update(m.name for m in _class_members(cls))
    return names


def _first_arg(tp: Any) -> Any:
    args = typing.get_args(tp)
    return args[0] if args else Any


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_init_var(annotation: Any) -> bool:
    return annotation is dataclasses.InitVar or isinstance(annotation, dataclasses.InitVar)


def _slot_names(cls: type) -> list[str]:
    """Unannotated __slots__ entries of cls, private names mangled like the interpreter does."""
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)

    names = []
    for name in slots:
        if _is_dunder(name):
            continue
        if name.startswith("__"):
            name = f"_{cls.__name__.lstrip('_')}{name}"
        names.append(name)
    return names


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__name__
    return str(tp)


def _undeclared_members(obj: Any, mro: tuple[type, ...]) -> list[Member]:
    """Plain instance attributes that no class of the MRO declares."""
    instance_dict = getattr(obj, "__dict__", None)
    if not isinstance(instance_dict, dict):
        return []

    declared = _declared_names(mro)
    return [Member(name=name)
            for name in instance_dict
            if isinstance(name, str) and not _is_dunder(name) and name not in declared]
