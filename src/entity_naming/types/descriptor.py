"""Type Descriptors for Runtime Types and Typing Constructs.

A :class:`TypeDescriptor` is the uniform view the normalizer works on: a
declared name (empty when anonymous), the declaring module, a container
:class:`Kind`, and element/key sub-descriptors for containers. :func:`describe`
derives one from any class, ``NewType``, type alias, or ``typing`` construct.

Kind mapping:
    - ``Optional[X]`` / ``X | None`` and ``type[X]`` -> ``POINTER``
    - ``list``, ``set``, ``frozenset``, ``deque``, ``Sequence``, ``Set``,
      ``Collection``, ``Iterable`` -> ``SLICE``
    - ``tuple[X, ...]`` -> ``ARRAY`` (fixed-shape tuples are anonymous)
    - ``dict``, ``defaultdict``, ``OrderedDict``, ``Mapping`` -> ``MAP``
    - ``Iterator``, ``Generator``, async iterators, ``queue.Queue`` family and
      ``asyncio.Queue`` -> ``CHANNEL``
    - everything else -> ``OTHER``, named when it is a class, ``NewType``,
      type alias, or instantiated user generic

``Annotated``, ``ClassVar`` and ``Final`` wrappers are transparent.

Hand-built descriptors are accepted anywhere a type is, which lets types that
are not real Python classes opt into naming explicitly.

Examples:
    >>> describe(list[int]).kind
    <Kind.SLICE: 'slice'>
    >>> describe(int).name, describe(int).package
    ('int', '')
"""

import asyncio
import collections
import collections.abc as cabc
import functools
import queue
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any

from entity_naming.base.errors import NilTypeError


class Kind(Enum):
    """Container shape of a described type."""

    POINTER = "pointer"
    SLICE = "slice"
    ARRAY = "array"
    MAP = "map"
    CHANNEL = "channel"
    OTHER = "other"


@dataclass(frozen=True)
class TypeDescriptor:
    """Introspection view of a single type.

    :param name: Declared name, empty for anonymous types and containers
    :type name: str
    :param package: Declaring module path, empty for builtins
    :type package: str
    :param kind: Container shape
    :type kind: Kind
    :param elem: Element descriptor for containers (value side for maps)
    :type elem: TypeDescriptor | None
    :param key: Key descriptor for maps
    :type key: TypeDescriptor | None
    :param type: The Python object this descriptor was derived from, if any
    :type type: Any
    """

    name: str
    package: str = ""
    kind: Kind = Kind.OTHER
    elem: "TypeDescriptor | None" = None
    key: "TypeDescriptor | None" = None
    type: Any = None

    @property
    def is_named(self) -> bool:
        return bool(self.name)

    @property
    def identity(self) -> Any:
        """The object callers know this type by: the Python type, or the descriptor itself."""
        return self.type if self.type is not None else self

    def __repr__(self) -> str:
        if self.name:
            return f"TypeDescriptor({self.qualified_name!r})"
        return f"TypeDescriptor(<{self.kind.value}> {self.type!r})"

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name


_POINTER_ORIGINS = frozenset({type})
_SLICE_ORIGINS = frozenset(
    {
        list,
        set,
        frozenset,
        collections.deque,
        cabc.Sequence,
        cabc.MutableSequence,
        cabc.Set,
        cabc.MutableSet,
        cabc.Collection,
        cabc.Iterable,
    }
)
_MAP_ORIGINS = frozenset(
    {
        dict,
        collections.defaultdict,
        collections.OrderedDict,
        cabc.Mapping,
        cabc.MutableMapping,
    }
)
_CHANNEL_ORIGINS = frozenset(
    {
        cabc.Iterator,
        cabc.Generator,
        cabc.AsyncIterator,
        cabc.AsyncIterable,
        cabc.AsyncGenerator,
        queue.Queue,
        queue.SimpleQueue,
        queue.LifoQueue,
        queue.PriorityQueue,
        asyncio.Queue,
    }
)
_TRANSPARENT_ORIGINS = frozenset({typing.Annotated, typing.ClassVar, typing.Final})
_UNION_ORIGINS = frozenset({typing.Union, types.UnionType})
_ANONYMOUS_ORIGINS = frozenset({cabc.Callable})

# typing.TypeAliasType only exists on 3.12+
_TYPE_ALIAS_TYPE = getattr(typing, "TypeAliasType", None)


def describe(hint: Any) -> TypeDescriptor:
    """Return the :class:`TypeDescriptor` for ``hint``.

    Existing descriptors are returned unchanged. Results for hashable hints are
    memoized.

    :param hint: A class, typing construct, or descriptor
    :raises NilTypeError: If ``hint`` is ``None``
    """
    if hint is None:
        raise NilTypeError()
    if isinstance(hint, TypeDescriptor):
        return hint
    try:
        hash(hint)
    except TypeError:
        return _describe(hint)
    return _describe_cached(hint)


@functools.lru_cache(maxsize=4096)
def _describe_cached(hint: Any) -> TypeDescriptor:
    return _describe(hint)


def _describe(hint: Any) -> TypeDescriptor:
    origin = typing.get_origin(hint)
    if origin is not None:
        return _describe_parameterized(hint, origin, typing.get_args(hint))

    if hint is typing.Any:
        return TypeDescriptor(name="", type=hint)
    if isinstance(hint, type) and hint not in _ANONYMOUS_ORIGINS:
        return TypeDescriptor(
            name=_class_name(hint), package=_package_of(hint.__module__), type=hint
        )
    if isinstance(hint, typing.NewType) or (
        _TYPE_ALIAS_TYPE is not None and isinstance(hint, _TYPE_ALIAS_TYPE)
    ):
        return TypeDescriptor(
            name=hint.__name__, package=_package_of(hint.__module__), type=hint
        )

    # TypeVar, ForwardRef, string annotations, bare special forms
    return TypeDescriptor(name="", type=hint)


def _describe_parameterized(hint: Any, origin: Any, args: tuple) -> TypeDescriptor:
    if origin in _TRANSPARENT_ORIGINS:
        return describe(args[0]) if args else TypeDescriptor(name="", type=hint)

    if origin in _UNION_ORIGINS:
        members = [a for a in args if a is not type(None)]
        if len(members) == 1 and len(members) < len(args):
            return TypeDescriptor(name="", kind=Kind.POINTER, elem=describe(members[0]), type=hint)
        return TypeDescriptor(name="", type=hint)

    if origin in _ANONYMOUS_ORIGINS:
        return TypeDescriptor(name="", type=hint)

    if not args:
        return describe(origin) if isinstance(origin, type) else TypeDescriptor(name="", type=hint)

    if origin in _POINTER_ORIGINS:
        return _container(hint, Kind.POINTER, args[0])
    if origin in _SLICE_ORIGINS:
        return _container(hint, Kind.SLICE, args[0])
    if origin in _CHANNEL_ORIGINS:
        return _container(hint, Kind.CHANNEL, args[0])
    if origin in _MAP_ORIGINS:
        if len(args) != 2:
            return TypeDescriptor(name="", type=hint)
        return TypeDescriptor(
            name="", kind=Kind.MAP, key=describe(args[0]), elem=describe(args[1]), type=hint
        )
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return _container(hint, Kind.ARRAY, args[0])
        return TypeDescriptor(name="", type=hint)

    if isinstance(origin, type):
        suffix = ", ".join(_format_arg(a) for a in args)
        return TypeDescriptor(
            name=f"{_class_name(origin)}[{suffix}]",
            package=_package_of(origin.__module__),
            type=hint,
        )

    # Literal, Callable, Concatenate and friends
    return TypeDescriptor(name="", type=hint)


def _container(hint: Any, kind: Kind, elem: Any) -> TypeDescriptor:
    return TypeDescriptor(name="", kind=kind, elem=describe(elem), type=hint)


def _class_name(cls: type) -> str:
    # Classes defined inside functions keep only the part after "<locals>."
    return cls.__qualname__.rsplit("<locals>.", 1)[-1]


def _package_of(module: str | None) -> str:
    if not module or module == "builtins":
        return ""
    return module


def _format_arg(arg: Any) -> str:
    if arg is Ellipsis:
        return "..."
    if isinstance(arg, type):
        return _class_name(arg)
    return repr(arg).replace("typing.", "")
