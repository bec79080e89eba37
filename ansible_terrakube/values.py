"""
Typed value trees.

Every value is paired with the descriptor it conforms to. A value whose
payload is ``None`` is a typed null: it keeps its descriptor so that the
surrounding tree stays well-formed when a branch could not be converted.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from ansible_terrakube.descriptors import (
    BOOL,
    NULL,
    NUMBER,
    STRING,
    BoolType,
    ListType,
    MapType,
    NumberType,
    ObjectType,
    StringType,
    TupleType,
    TypeDescriptor,
)


class Value:
    """Base class of all typed values."""

    @property
    def type(self) -> TypeDescriptor:
        raise NotImplementedError

    @property
    def is_null(self) -> bool:
        raise NotImplementedError

    def to_native(self) -> Any:
        """Renders the value back into plain JSON-compatible Python data."""
        raise NotImplementedError


@dataclass(frozen=True)
class NullValue(Value):
    """
    A null. ``null_type`` records the descriptor the null stands in for when
    that descriptor has no value class of its own (null and dynamic).
    """

    null_type: TypeDescriptor = NULL

    @property
    def type(self) -> TypeDescriptor:
        return self.null_type

    @property
    def is_null(self) -> bool:
        return True

    def to_native(self) -> Any:
        return None


@dataclass(frozen=True)
class BoolValue(Value):
    value: Optional[bool] = None

    @property
    def type(self) -> TypeDescriptor:
        return BOOL

    @property
    def is_null(self) -> bool:
        return self.value is None

    def to_native(self) -> Any:
        return self.value


# Integral values with more digits than this are rendered as floats: larger
# ints cannot be serialized by json.dumps and are costly to build.
MAX_INT_DIGITS = 4000


@dataclass(frozen=True)
class NumberValue(Value):
    value: Optional[Decimal] = None

    @property
    def type(self) -> TypeDescriptor:
        return NUMBER

    @property
    def is_null(self) -> bool:
        return self.value is None

    def to_native(self) -> Any:
        if self.value is None:
            return None
        if (
            self.value.is_finite()
            and self.value.adjusted() < MAX_INT_DIGITS
            and self.value == self.value.to_integral_value()
        ):
            return int(self.value)
        return float(self.value)


@dataclass(frozen=True)
class StringValue(Value):
    value: Optional[str] = None

    @property
    def type(self) -> TypeDescriptor:
        return STRING

    @property
    def is_null(self) -> bool:
        return self.value is None

    def to_native(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ListValue(Value):
    elem_type: TypeDescriptor
    elements: Optional[Tuple[Value, ...]] = None

    def __post_init__(self):
        if self.elements is not None:
            object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def type(self) -> TypeDescriptor:
        return ListType(self.elem_type)

    @property
    def is_null(self) -> bool:
        return self.elements is None

    def to_native(self) -> Any:
        if self.elements is None:
            return None
        return [element.to_native() for element in self.elements]


@dataclass(frozen=True)
class TupleValue(Value):
    elem_types: Tuple[TypeDescriptor, ...]
    elements: Optional[Tuple[Value, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "elem_types", tuple(self.elem_types))
        if self.elements is not None:
            object.__setattr__(self, "elements", tuple(self.elements))
            if len(self.elements) != len(self.elem_types):
                raise ValueError(
                    f"Tuple of arity {len(self.elem_types)} cannot hold "
                    f"{len(self.elements)} elements."
                )

    @property
    def type(self) -> TypeDescriptor:
        return TupleType(self.elem_types)

    @property
    def is_null(self) -> bool:
        return self.elements is None

    def to_native(self) -> Any:
        if self.elements is None:
            return None
        return [element.to_native() for element in self.elements]


@dataclass(frozen=True)
class ObjectValue(Value):
    field_types: Dict[str, TypeDescriptor]
    fields: Optional[Dict[str, Value]] = None

    def __post_init__(self):
        object.__setattr__(self, "field_types", dict(self.field_types))
        if self.fields is not None:
            object.__setattr__(self, "fields", dict(self.fields))
            if set(self.fields) != set(self.field_types):
                raise ValueError(
                    "Object fields do not match the object type: "
                    f"expected {sorted(self.field_types)}, got {sorted(self.fields)}."
                )

    def __hash__(self):
        fields = None if self.fields is None else frozenset(self.fields.items())
        return hash((ObjectValue, frozenset(self.field_types.items()), fields))

    @property
    def type(self) -> TypeDescriptor:
        return ObjectType(self.field_types)

    @property
    def is_null(self) -> bool:
        return self.fields is None

    def to_native(self) -> Any:
        if self.fields is None:
            return None
        return {key: value.to_native() for key, value in self.fields.items()}


@dataclass(frozen=True)
class MapValue(Value):
    elem_type: TypeDescriptor
    elements: Optional[Dict[str, Value]] = None

    def __post_init__(self):
        if self.elements is not None:
            object.__setattr__(self, "elements", dict(self.elements))

    def __hash__(self):
        elements = None if self.elements is None else frozenset(self.elements.items())
        return hash((MapValue, self.elem_type, elements))

    @property
    def type(self) -> TypeDescriptor:
        return MapType(self.elem_type)

    @property
    def is_null(self) -> bool:
        return self.elements is None

    def to_native(self) -> Any:
        if self.elements is None:
            return None
        return {key: value.to_native() for key, value in self.elements.items()}


def null_value(descriptor: TypeDescriptor) -> Value:
    """Builds the typed null placeholder for ``descriptor``."""
    if isinstance(descriptor, BoolType):
        return BoolValue()
    if isinstance(descriptor, NumberType):
        return NumberValue()
    if isinstance(descriptor, StringType):
        return StringValue()
    if isinstance(descriptor, ListType):
        return ListValue(descriptor.elem)
    if isinstance(descriptor, TupleType):
        return TupleValue(descriptor.elems)
    if isinstance(descriptor, ObjectType):
        return ObjectValue(descriptor.fields)
    if isinstance(descriptor, MapType):
        return MapValue(descriptor.elem)
    return NullValue(descriptor)


def empty_value(descriptor: TypeDescriptor) -> Value:
    """Builds the empty placeholder used for lists and maps."""
    if isinstance(descriptor, ListType):
        return ListValue(descriptor.elem, ())
    if isinstance(descriptor, MapType):
        return MapValue(descriptor.elem, {})
    return null_value(descriptor)
