"""
Helpers for the ``L_<NAME><INDEX>`` list field naming convention.

NVP responses have no nesting, so list members are spread over keys such as
``L_ERRORCODE0`` and ``L_SHORTMESSAGE0``. The helpers below split such a key
into its field name and index and build it back again.
"""

from __future__ import annotations

import re
from typing import Tuple

__all__ = [
    "NOT_A_LIST_FIELD",
    "decode_list_field",
    "encode_list_field",
    "is_list_field",
]

NOT_A_LIST_FIELD = -1

_LIST_FIELD_PATTERN = re.compile(r"L_([A-Z]+)([0-9]+)")
_FIELD_NAME_PATTERN = re.compile(r"[A-Z]+")


def decode_list_field(key: str) -> Tuple[str, int]:
    """
    Split ``key`` into ``(field_name, index)``.

    Keys that do not follow the list convention come back unchanged with
    :data:`NOT_A_LIST_FIELD` as the index.
    """
    match = _LIST_FIELD_PATTERN.fullmatch(key)
    if match is None:
        return key, NOT_A_LIST_FIELD

    field_name, digits = match.groups()
    index = int(digits, 10)
    assert index >= 0, f"list field {key!r} decoded to negative index"
    return field_name, index


def encode_list_field(field_name: str, index: int) -> str:
    if _FIELD_NAME_PATTERN.fullmatch(field_name) is None:
        raise ValueError(
            f"List field names must be uppercase ASCII letters, got {field_name!r}"
        )
    if index < 0:
        raise ValueError(f"List field index must not be negative, got {index}")
    return f"L_{field_name}{index}"


def is_list_field(key: str) -> bool:
    return decode_list_field(key)[1] != NOT_A_LIST_FIELD
