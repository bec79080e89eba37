"""
Projection of workspace outputs into typed values.

Every output is inferred and converted on its own. The results are collected
into two objects: one with every output, and one with only the outputs that
are explicitly marked as non-sensitive.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ansible_terrakube.converter import convert
from ansible_terrakube.descriptors import TypeDescriptor
from ansible_terrakube.diagnostics import (
    MISSING_SENSITIVITY,
    UNSUPPORTED_VALUE,
    Diagnostics,
)
from ansible_terrakube.errors import UnsupportedValue
from ansible_terrakube.inference import infer
from ansible_terrakube.models import OutputRecord
from ansible_terrakube.values import ObjectValue, Value

logger = logging.getLogger(__name__)


@dataclass
class OutputProjection:
    """
    Result of projecting a set of outputs. Both objects are always complete;
    when ``has_errors`` is true the read must still be treated as failed.
    """

    values: ObjectValue
    nonsensitive_values: ObjectValue
    diagnostics: Diagnostics

    @property
    def has_errors(self) -> bool:
        return self.diagnostics.has_errors

    @property
    def output_types(self) -> Dict[str, TypeDescriptor]:
        return dict(self.values.field_types)


def project_outputs(outputs: Mapping[str, Any]) -> OutputProjection:
    """
    Builds the full and the non-sensitive projections of ``outputs``.

    Args:
        outputs: Output name mapped to an ``OutputRecord`` or to a dict with
            ``value`` and ``sensitive`` keys.
    """
    diagnostics = Diagnostics()
    all_types: Dict[str, TypeDescriptor] = {}
    all_values: Dict[str, Value] = {}
    public_types: Dict[str, TypeDescriptor] = {}
    public_values: Dict[str, Value] = {}

    for name in sorted(outputs):
        record = outputs[name]
        if not isinstance(record, OutputRecord):
            record = OutputRecord.model_validate(record)
        if "sensitive" not in record.model_fields_set:
            diagnostics.add_warning(
                MISSING_SENSITIVITY,
                f"Output '{name}' has no 'sensitive' flag; it is treated as sensitive.",
                name,
            )

        try:
            descriptor = infer(record.value)
        except UnsupportedValue as e:
            logger.warning("Skipping output '%s': %s", name, e)
            diagnostics.add_error(UNSUPPORTED_VALUE, str(e), name)
            continue

        value, conversion_diagnostics = convert(record.value, descriptor, path=name)
        diagnostics.extend(conversion_diagnostics)
        logger.debug("Output '%s' has type %s", name, descriptor)

        all_types[name] = descriptor
        all_values[name] = value
        if not record.sensitive:
            public_types[name] = descriptor
            public_values[name] = value

    return OutputProjection(
        values=ObjectValue(all_types, all_values),
        nonsensitive_values=ObjectValue(public_types, public_values),
        diagnostics=diagnostics,
    )
