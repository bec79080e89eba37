"""
Type inference for decoded JSON values.

``infer`` walks a value depth-first and returns the descriptor of its shape.
Objects always infer as ``ObjectType``. Arrays infer as ``ListType`` when all
elements share one descriptor and degrade to a positional ``TupleType``
otherwise. An empty array has no observable element type, so it infers as a
list of ``DYNAMIC``.

There is no depth limit: very deeply nested input can exhaust the
interpreter's recursion limit.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from ansible_terrakube.descriptors import (
    BOOL,
    DYNAMIC,
    NULL,
    NUMBER,
    STRING,
    ListType,
    ObjectType,
    TupleType,
    TypeDescriptor,
)
from ansible_terrakube.errors import UnsupportedValue


def infer(raw: Any) -> TypeDescriptor:
    """
    Infers the structural type of ``raw``.

    Raises:
        UnsupportedValue: ``raw`` contains something that is not null, a
            bool, a number, a string, an array or a string-keyed object.
    """
    if raw is None:
        return NULL
    # bool must be checked first, it is a subclass of int.
    if isinstance(raw, bool):
        return BOOL
    if isinstance(raw, (int, float, Decimal)):
        return NUMBER
    if isinstance(raw, str):
        return STRING
    if isinstance(raw, (list, tuple)):
        return _infer_sequence(raw)
    if isinstance(raw, Mapping):
        return _infer_mapping(raw)
    raise UnsupportedValue(raw)


def _infer_sequence(raw) -> TypeDescriptor:
    if not raw:
        return ListType(DYNAMIC)

    elem_types = [infer(elem) for elem in raw]
    first = elem_types[0]
    if all(elem_type == first for elem_type in elem_types[1:]):
        return ListType(first)
    return TupleType(elem_types)


def _infer_mapping(raw: Mapping) -> TypeDescriptor:
    fields = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            raise UnsupportedValue(key)
        fields[key] = infer(value)
    return ObjectType(fields)
