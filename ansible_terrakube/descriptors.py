"""
Structural type descriptors for dynamic output values.

A descriptor describes the shape of a decoded JSON value: a scalar kind, a
homogeneous list, a positional tuple, a keyed object, a keyed map, or the
dynamic wildcard. Descriptors are immutable and compare structurally, so two
independently built descriptors for the same shape are equal.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


class TypeDescriptor:
    """Base class of all type descriptors."""

    kind: str = ""

    def __str__(self) -> str:
        return self.kind


@dataclass(frozen=True)
class NullType(TypeDescriptor):
    kind = "null"


@dataclass(frozen=True)
class BoolType(TypeDescriptor):
    kind = "bool"


@dataclass(frozen=True)
class NumberType(TypeDescriptor):
    kind = "number"


@dataclass(frozen=True)
class StringType(TypeDescriptor):
    kind = "string"


@dataclass(frozen=True)
class DynamicType(TypeDescriptor):
    """Wildcard element type of a list whose elements are unknown."""

    kind = "dynamic"


@dataclass(frozen=True)
class ListType(TypeDescriptor):
    elem: TypeDescriptor

    kind = "list"

    def __str__(self) -> str:
        return f"list({self.elem})"


@dataclass(frozen=True)
class TupleType(TypeDescriptor):
    elems: Tuple[TypeDescriptor, ...]

    kind = "tuple"

    def __post_init__(self):
        # Callers may hand in a list; the arity must not change afterwards.
        object.__setattr__(self, "elems", tuple(self.elems))

    @property
    def arity(self) -> int:
        return len(self.elems)

    def __str__(self) -> str:
        return "tuple([" + ", ".join(str(e) for e in self.elems) + "])"


@dataclass(frozen=True)
class ObjectType(TypeDescriptor):
    fields: Dict[str, TypeDescriptor]

    kind = "object"

    def __post_init__(self):
        object.__setattr__(self, "fields", dict(self.fields))

    def __hash__(self):
        return hash((ObjectType, frozenset(self.fields.items())))

    def __str__(self) -> str:
        body = ", ".join(f"{key}: {self.fields[key]}" for key in sorted(self.fields))
        return "object({" + body + "})"


@dataclass(frozen=True)
class MapType(TypeDescriptor):
    """Homogeneous string-keyed map. Inference never produces it."""

    elem: TypeDescriptor

    kind = "map"

    def __str__(self) -> str:
        return f"map({self.elem})"


NULL = NullType()
BOOL = BoolType()
NUMBER = NumberType()
STRING = StringType()
DYNAMIC = DynamicType()
