"""Decoding of JSON:API documents into entity records."""

import json
from decimal import Decimal
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ansible_terrakube.errors import PayloadDecodeError

RecordT = TypeVar("RecordT", bound=BaseModel)


def loads(body) -> Any:
    """
    Parses a JSON body. Numbers with a fraction or exponent are decoded as
    ``Decimal`` so that no precision is lost before conversion.
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return json.loads(body, parse_float=Decimal)


def flatten_resource(resource: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flattens a JSON:API resource object into a single dictionary: the
    resource ``id``, its attributes, and ``<name>_id`` for every to-one
    relationship that carries data.
    """
    if not isinstance(resource, dict) or "id" not in resource:
        raise PayloadDecodeError(f"Not a JSON:API resource object: {resource!r}")

    flat = dict(resource.get("attributes") or {})
    flat["id"] = str(resource["id"])
    for name, relationship in (resource.get("relationships") or {}).items():
        data = relationship.get("data") if isinstance(relationship, dict) else None
        if isinstance(data, dict) and "id" in data:
            flat[f"{name}_id"] = str(data["id"])
    return flat


def decode_jsonapi_many(payload, record_type: Type[RecordT]) -> List[RecordT]:
    """
    Decodes a JSON:API document into a list of ``record_type`` instances.

    Args:
        payload: The response body as bytes or str, or an already decoded dict.
        record_type: The pydantic model to validate every resource against.

    Raises:
        PayloadDecodeError: The payload is not valid JSON, has no ``data``
            member, or a resource does not match ``record_type``.
    """
    if isinstance(payload, (bytes, str)):
        try:
            payload = loads(payload)
        except (ValueError, UnicodeDecodeError) as e:
            raise PayloadDecodeError(f"Response body is not valid JSON: {e}") from e

    if not isinstance(payload, dict) or "data" not in payload:
        raise PayloadDecodeError("Response is not a JSON:API document: missing 'data'.")

    data = payload["data"]
    if data is None:
        return []
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise PayloadDecodeError(f"Unexpected JSON:API 'data' member: {data!r}")

    records = []
    for resource in data:
        try:
            records.append(record_type.model_validate(flatten_resource(resource)))
        except ValidationError as e:
            raise PayloadDecodeError(
                f"Resource does not match {record_type.__name__}: {e}"
            ) from e
    return records
