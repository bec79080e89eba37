"""
Conversion of decoded JSON values into typed value trees.

``convert`` never raises for bad data. Each branch that cannot be converted
is replaced with a placeholder of the expected type and an error diagnostic
is recorded, so the returned tree is always structurally valid:

- a scalar, a list element or a tuple element degrades on its own;
- a tuple of the wrong length degrades to a null tuple;
- an object degrades to a null object as soon as one of its fields fails;
- a map degrades to an empty map as soon as one of its elements fails.

A ``None`` raw value converts to a typed null for any target, without
diagnostics.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Tuple

from ansible_terrakube.descriptors import (
    BoolType,
    ListType,
    MapType,
    NullType,
    NumberType,
    ObjectType,
    StringType,
    TupleType,
    TypeDescriptor,
)
from ansible_terrakube.diagnostics import (
    ARITY_MISMATCH,
    TYPE_MISMATCH,
    UNSUPPORTED_CONVERSION,
    Diagnostics,
)
from ansible_terrakube.values import (
    BoolValue,
    ListValue,
    MapValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    TupleValue,
    Value,
    empty_value,
    null_value,
)


def convert(raw: Any, target: TypeDescriptor, path: str = "") -> Tuple[Value, Diagnostics]:
    """
    Converts ``raw`` into a value conforming to ``target``.

    Args:
        raw: A decoded JSON value.
        target: The descriptor the result must conform to, normally the one
            returned by ``infer(raw)``.
        path: Attribute path of ``raw``, used as the root of diagnostic paths.

    Returns:
        The converted value and the diagnostics recorded along the way.
    """
    diagnostics = Diagnostics()
    value = _convert(raw, target, path, diagnostics)
    return value, diagnostics


def _convert(raw: Any, target: TypeDescriptor, path: str, diags: Diagnostics) -> Value:
    if raw is None:
        return null_value(target)

    if isinstance(target, NullType):
        _mismatch(diags, target, raw, path)
        return NullValue()
    if isinstance(target, BoolType):
        if not isinstance(raw, bool):
            _mismatch(diags, target, raw, path)
            return BoolValue()
        return BoolValue(raw)
    if isinstance(target, NumberType):
        number = _to_decimal(raw)
        if number is None:
            _mismatch(diags, target, raw, path)
            return NumberValue()
        return NumberValue(number)
    if isinstance(target, StringType):
        if not isinstance(raw, str):
            _mismatch(diags, target, raw, path)
            return StringValue()
        return StringValue(raw)
    if isinstance(target, ListType):
        return _convert_list(raw, target, path, diags)
    if isinstance(target, TupleType):
        return _convert_tuple(raw, target, path, diags)
    if isinstance(target, ObjectType):
        return _convert_object(raw, target, path, diags)
    if isinstance(target, MapType):
        return _convert_map(raw, target, path, diags)

    diags.add_error(
        UNSUPPORTED_CONVERSION,
        f"No conversion is defined for values of type {target}.",
        path,
    )
    return NullValue(target)


def _convert_list(raw, target: ListType, path: str, diags: Diagnostics) -> Value:
    if not _is_sequence(raw):
        _mismatch(diags, target, raw, path)
        return empty_value(target)

    elements = [
        _convert(elem, target.elem, _index_path(path, i), diags)
        for i, elem in enumerate(raw)
    ]
    return ListValue(target.elem, elements)


def _convert_tuple(raw, target: TupleType, path: str, diags: Diagnostics) -> Value:
    if not _is_sequence(raw):
        _mismatch(diags, target, raw, path)
        return null_value(target)
    if len(raw) != target.arity:
        diags.add_error(
            ARITY_MISMATCH,
            f"Expected a tuple of {target.arity} elements, got {len(raw)}.",
            path,
        )
        return null_value(target)

    elements = [
        _convert(elem, elem_type, _index_path(path, i), diags)
        for i, (elem, elem_type) in enumerate(zip(raw, target.elems))
    ]
    return TupleValue(target.elems, elements)


def _convert_object(raw, target: ObjectType, path: str, diags: Diagnostics) -> Value:
    if not isinstance(raw, Mapping):
        _mismatch(diags, target, raw, path)
        return null_value(target)

    fields = {}
    # Keys present only in raw are ignored; absent keys convert as null.
    for key in sorted(target.fields):
        field_diags = Diagnostics()
        fields[key] = _convert(
            raw.get(key), target.fields[key], _field_path(path, key), field_diags
        )
        diags.extend(field_diags)
        if field_diags.has_errors:
            return null_value(target)
    return ObjectValue(target.fields, fields)


def _convert_map(raw, target: MapType, path: str, diags: Diagnostics) -> Value:
    if not isinstance(raw, Mapping):
        _mismatch(diags, target, raw, path)
        return empty_value(target)

    elements = {}
    for key in sorted(raw, key=str):
        elem_diags = Diagnostics()
        elements[key] = _convert(raw[key], target.elem, _key_path(path, key), elem_diags)
        diags.extend(elem_diags)
        if elem_diags.has_errors:
            return empty_value(target)
    return MapValue(target.elem, elements)


def _to_decimal(raw: Any):
    if isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        # repr gives the shortest string that round-trips the float.
        return Decimal(repr(raw))
    return None


def _is_sequence(raw: Any) -> bool:
    return isinstance(raw, (list, tuple))


def _kind_of(raw: Any) -> str:
    if isinstance(raw, bool):
        return "bool"
    if isinstance(raw, (int, float, Decimal)):
        return "number"
    if isinstance(raw, str):
        return "string"
    if _is_sequence(raw):
        return "array"
    if isinstance(raw, Mapping):
        return "object"
    return type(raw).__name__


def _mismatch(diags: Diagnostics, expected: TypeDescriptor, raw: Any, path: str):
    diags.add_error(
        TYPE_MISMATCH,
        f"Expected a value of type {expected}, got {_kind_of(raw)}.",
        path,
    )


def _index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


def _field_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _key_path(path: str, key: str) -> str:
    return f'{path}["{key}"]'
