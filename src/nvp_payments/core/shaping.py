"""
Reshaping of flat NVP responses into nested records and back.

The NVP wire format is a flat ``key=value`` map. List members are encoded as
``L_<FIELD><INDEX>`` keys; the helpers in this module fold those keys into
lists of records (``ERRORS``, ``BALANCES``, ``TRANSACTIONS``) and expand them
again when a flat representation is needed.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, Dict, Mapping, Optional

from .fields import decode_list_field, encode_list_field
from .methods import (
    ERROR_FIELDS,
    ERRORS_ATTRIBUTE,
    METHOD_SPECS,
    MethodSpec,
    lookup_method,
)

__all__ = [
    "ResponseShaper",
    "ack_succeeded",
    "flatten_response",
    "group_list_fields",
    "shape_errors",
    "shape_method_list",
    "shape_response",
]

_SUCCESS_ACKS = frozenset({"Success", "SuccessWithWarning"})


def group_list_fields(
    flat: Mapping[str, Any],
    fields: AbstractSet[str],
    attribute: str,
) -> Dict[str, Any]:
    """
    Fold every ``L_<FIELD><N>`` key whose field is in ``fields`` into
    ``attribute``.

    Records are ordered by ascending index and only indices that occur in
    ``flat`` get a record. Keys outside ``fields`` are copied as they are.
    """
    result: Dict[str, Any] = {}
    records: Dict[int, Dict[str, Any]] = {}

    for key, value in flat.items():
        field_name, index = decode_list_field(key)
        if index >= 0 and field_name in fields:
            records.setdefault(index, {})[field_name] = value
        else:
            result[key] = value

    if records:
        if attribute in result:
            logging.warning(
                "Response field %s is replaced by the grouped %s list",
                attribute,
                attribute,
            )
        result[attribute] = [records[index] for index in sorted(records)]
    return result


def shape_errors(
    flat: Mapping[str, Any],
    error_fields: AbstractSet[str] = ERROR_FIELDS,
) -> Dict[str, Any]:
    return group_list_fields(flat, error_fields, ERRORS_ATTRIBUTE)


def shape_method_list(
    shaped: Mapping[str, Any],
    method: str,
    methods: Mapping[str, MethodSpec] = METHOD_SPECS,
) -> Dict[str, Any]:
    """
    Group the data list of ``method`` in an already errors-shaped response.

    Methods without a data list pass the response through as a copy.
    """
    spec = lookup_method(method, methods)
    if not spec.has_data_list:
        return dict(shaped)
    assert spec.list_attribute is not None
    return group_list_fields(shaped, spec.data_fields, spec.list_attribute)


def shape_response(
    flat: Mapping[str, Any],
    method: str,
    methods: Mapping[str, MethodSpec] = METHOD_SPECS,
) -> Dict[str, Any]:
    return shape_method_list(shape_errors(flat), method, methods)


def flatten_response(shaped: Mapping[str, Any]) -> Dict[str, str]:
    """
    Expand list attributes of ``shaped`` back into ``L_<FIELD><N>`` keys.

    Records are numbered by their position in the list, so a response whose
    indices had gaps flattens to contiguous indices.
    """
    flat: Dict[str, str] = {}
    for key, value in shaped.items():
        if isinstance(value, list):
            for position, record in enumerate(value):
                for field_name, field_value in record.items():
                    flat[encode_list_field(field_name, position)] = field_value
        else:
            flat[key] = value
    return flat


def ack_succeeded(shaped: Mapping[str, Any]) -> bool:
    return shaped.get("ACK") in _SUCCESS_ACKS


class ResponseShaper:
    """
    Applies the error and per-method list grouping to flat responses.

    The error field set and method table are fixed at construction; the
    shaper itself holds no other state and can be shared between callers.
    """

    def __init__(
        self,
        methods: Optional[Mapping[str, MethodSpec]] = None,
        *,
        error_fields: AbstractSet[str] = ERROR_FIELDS,
    ) -> None:
        self.methods = METHOD_SPECS if methods is None else methods
        self.error_fields = frozenset(error_fields)

    def method(self, name: str) -> MethodSpec:
        return lookup_method(name, self.methods)

    def shape_errors(self, flat: Mapping[str, Any]) -> Dict[str, Any]:
        return shape_errors(flat, self.error_fields)

    def shape_method_list(
        self,
        shaped: Mapping[str, Any],
        method: str,
    ) -> Dict[str, Any]:
        return shape_method_list(shaped, method, self.methods)

    def shape(self, flat: Mapping[str, Any], method: str) -> Dict[str, Any]:
        return self.shape_method_list(self.shape_errors(flat), method)
