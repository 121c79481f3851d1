"""
Public, high-level helpers for talking to the NVP endpoint.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests

from .core.client import NvpClient
from .core.config import NvpConfig, NvpParameters, load_nvp_config
from .core.errors import ConfigurationError, DecodingError, NvpError, TransportError
from .core.shaping import ResponseShaper

__all__ = [
    "ConfigurationError",
    "DecodingError",
    "NvpClient",
    "NvpConfig",
    "NvpError",
    "NvpParameters",
    "TransportError",
    "call_method",
    "create_nvp_client",
    "load_nvp_config",
]


def _resolve_config(
    config: Optional[NvpConfig],
    *,
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    parameters: Optional[NvpParameters],
    user: Optional[str],
    password: Optional[str],
    signature: Optional[str],
    api_url: Optional[str],
    sandbox: Optional[bool | str],
    timeout_seconds: Optional[float | int | str],
) -> NvpConfig:
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            user,
            password,
            signature,
            api_url,
            sandbox,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built NvpConfig or individual parameters, not both."
            )
        return config

    return load_nvp_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        user=user,
        password=password,
        signature=signature,
        api_url=api_url,
        sandbox=sandbox,
        timeout_seconds=timeout_seconds,
    )


def create_nvp_client(
    *,
    config: Optional[NvpConfig] = None,
    session: Optional[requests.Session] = None,
    shaper: Optional[ResponseShaper] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[NvpParameters] = None,
    user: Optional[str] = None,
    password: Optional[str] = None,
    signature: Optional[str] = None,
    api_url: Optional[str] = None,
    sandbox: Optional[bool | str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> NvpClient:
    """
    Construct an :class:`NvpClient`.

    Callers can either supply a ready-made :class:`NvpConfig` or let the
    helper assemble one from environment data.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        user=user,
        password=password,
        signature=signature,
        api_url=api_url,
        sandbox=sandbox,
        timeout_seconds=timeout_seconds,
    )
    return NvpClient(cfg, session=session, shaper=shaper)


def call_method(
    method: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    shape_list: bool = True,
    config: Optional[NvpConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[NvpParameters] = None,
    user: Optional[str] = None,
    password: Optional[str] = None,
    signature: Optional[str] = None,
    api_url: Optional[str] = None,
    sandbox: Optional[bool | str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> Dict[str, Any]:
    """
    One-shot helper that performs a single NVP call.

    With ``shape_list`` the method's data list is grouped as well; otherwise
    only ``ERRORS`` is extracted.
    """
    client = create_nvp_client(
        config=config,
        session=session,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        user=user,
        password=password,
        signature=signature,
        api_url=api_url,
        sandbox=sandbox,
        timeout_seconds=timeout_seconds,
    )
    if shape_list:
        return client.call_shaped(method, options)
    return client.call(method, options)
