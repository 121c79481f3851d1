"""
HTTP client helpers for the NVP endpoint.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .config import NvpConfig
from .errors import TransportError
from .methods import (
    COMMON_RESPONSE_FIELDS,
    GET_BALANCE,
    GET_TRANSACTION_DETAILS,
    TRANSACTION_SEARCH,
)
from .payloads import FORM_CONTENT_TYPE, build_request, decode_form, encode_form
from .shaping import ResponseShaper

__all__ = [
    "NvpClient",
    "call_method",
    "post_form",
]


def post_form(
    session: requests.Session,
    url: str,
    body: str,
    *,
    timeout: float,
) -> str:
    try:
        response = session.post(
            url,
            data=body,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}") from exc

    if response.status_code >= 400:
        raise TransportError(
            f"NVP endpoint responded with {response.status_code}: {response.text}"
        )
    return response.text


def _log_outcome(method: str, shaped: Mapping[str, Any]) -> None:
    summary = ", ".join(
        f"{name}={shaped[name]}" for name in COMMON_RESPONSE_FIELDS if name in shaped
    )
    logging.info("%s completed (%s)", method, summary or "no common fields")
    for error in shaped.get("ERRORS", ()):
        logging.warning(
            "%s returned error %s: %s",
            method,
            error.get("ERRORCODE"),
            error.get("LONGMESSAGE") or error.get("SHORTMESSAGE"),
        )


def call_method(
    session: requests.Session,
    config: NvpConfig,
    method: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    shaper: Optional[ResponseShaper] = None,
) -> Dict[str, Any]:
    """
    Send ``method`` and return the response with its ``ERRORS`` list grouped.

    Provider-side failures (``ACK=Failure``) are returned, not raised.
    """
    shaper = shaper or ResponseShaper()
    request_fields = build_request(config, method, options, methods=shaper.methods)

    logging.info("Calling NVP method %s at %s", method, config.api_url)
    body = post_form(
        session,
        config.api_url,
        encode_form(request_fields),
        timeout=config.timeout_seconds,
    )
    flat = decode_form(body)
    logging.debug("%s returned %d fields", method, len(flat))

    shaped = shaper.shape_errors(flat)
    _log_outcome(method, shaped)
    return shaped


class NvpClient:
    """
    Thin convenience wrapper around the NVP endpoint.
    """

    def __init__(
        self,
        config: NvpConfig,
        *,
        session: Optional[requests.Session] = None,
        shaper: Optional[ResponseShaper] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.shaper = shaper or ResponseShaper()

    def build_request(
        self,
        method: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, str]:
        return build_request(self.config, method, options, methods=self.shaper.methods)

    def call(
        self,
        method: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return call_method(
            self.session,
            self.config,
            method,
            options,
            shaper=self.shaper,
        )

    def call_shaped(
        self,
        method: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Call ``method`` and group both its errors and its data list.
        """
        spec = self.shaper.method(method)
        shaped = self.shaper.shape_method_list(self.call(method, options), method)
        if spec.list_attribute is not None:
            logging.debug(
                "%s returned %d %s records",
                method,
                len(shaped.get(spec.list_attribute, ())),
                spec.list_attribute,
            )
        return shaped

    def get_balance(self, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self.call_shaped(GET_BALANCE, options)

    def get_transaction_details(
        self,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return self.call_shaped(GET_TRANSACTION_DETAILS, options)

    def transaction_search(
        self,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return self.call_shaped(TRANSACTION_SEARCH, options)
