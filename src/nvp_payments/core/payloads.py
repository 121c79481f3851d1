"""
Helpers for constructing and decoding the form-encoded NVP payloads.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode

from .config import NvpConfig
from .errors import DecodingError
from .methods import METHOD_SPECS, MethodSpec, lookup_method

__all__ = [
    "FORM_CONTENT_TYPE",
    "build_request",
    "decode_form",
    "encode_form",
]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_form(fields: Mapping[str, Any]) -> str:
    return urlencode([(key, _stringify(value)) for key, value in fields.items()])


def decode_form(body: str) -> Dict[str, str]:
    """
    Decode a form-encoded response body into a flat mapping.

    A blank body decodes to an empty mapping. Malformed pairs and repeated
    keys raise :class:`DecodingError`.
    """
    text = body.strip()
    if not text:
        return {}

    try:
        pairs = parse_qsl(
            text,
            keep_blank_values=True,
            strict_parsing=True,
            encoding="utf-8",
            errors="strict",
        )
    except (ValueError, UnicodeDecodeError) as exc:
        raise DecodingError(f"Response body is not form-encoded: {body[:200]!r}") from exc

    fields: Dict[str, str] = {}
    for key, value in pairs:
        if key in fields:
            raise DecodingError(f"Response body repeats the key {key!r}")
        fields[key] = value
    return fields


def build_request(
    config: NvpConfig,
    method: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    methods: Mapping[str, MethodSpec] = METHOD_SPECS,
) -> Dict[str, str]:
    """
    Build the flat request fields for ``method``.

    Caller options come first; credentials, ``METHOD`` and ``VERSION`` are
    applied on top. Unknown methods raise
    :class:`~nvp_payments.core.errors.ConfigurationError`.
    """
    spec = lookup_method(method, methods)

    fields: Dict[str, str] = {}
    for key, value in (options or {}).items():
        if value is None:
            continue
        fields[key] = _stringify(value)

    fields.update(config.credential_fields())
    fields["METHOD"] = spec.name
    fields["VERSION"] = spec.version
    return fields
