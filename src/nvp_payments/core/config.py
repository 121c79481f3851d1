"""
Configuration objects and helpers for the NVP client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment
from .errors import ConfigurationError

__all__ = [
    "LIVE_API_URL",
    "SANDBOX_API_URL",
    "NvpConfig",
    "NvpParameters",
    "load_nvp_config",
]

LIVE_API_URL = "https://api-3t.paypal.com/nvp"
SANDBOX_API_URL = "https://api-3t.sandbox.paypal.com/nvp"

DEFAULT_TIMEOUT_SECONDS = 30.0

_PARAMETER_TO_ENV_KEY = {
    "user": "NVP_USER",
    "password": "NVP_PASSWORD",
    "signature": "NVP_SIGNATURE",
    "api_url": "NVP_API_URL",
    "sandbox": "NVP_SANDBOX",
    "timeout_seconds": "NVP_TIMEOUT_SECONDS",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class NvpParameters:
    """
    Explicit parameter bundle for constructing :class:`NvpConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_nvp_config`.
    """

    user: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    signature: Optional[str] = field(default=None, repr=False)
    api_url: Optional[str] = None
    sandbox: Optional[bool | str] = None
    timeout_seconds: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[NvpParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = _stringify(value)
    return overrides


def _require_credential(values: Mapping[str, str], env_key: str) -> str:
    raw = values.get(env_key)
    if raw is None:
        raise ConfigurationError(f"{env_key} must be provided")
    value = raw.strip()
    if not value:
        raise ConfigurationError(f"{env_key} must not be empty")
    return value


def _parse_flag(raw: str, env_key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{env_key} must be a boolean flag, got '{raw}'")


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"NVP_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigurationError("NVP_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class NvpConfig:
    """
    Credentials and endpoint used for every NVP call.

    The password and signature are kept out of ``repr`` so the configuration
    can be logged safely.
    """

    user: str
    password: str = field(repr=False)
    signature: str = field(repr=False)
    api_url: str = LIVE_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def sandbox(self) -> bool:
        return self.api_url == SANDBOX_API_URL

    def credential_fields(self) -> Dict[str, str]:
        return {
            "USER": self.user,
            "PWD": self.password,
            "SIGNATURE": self.signature,
        }

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "NvpConfig":
        user = _require_credential(values, "NVP_USER")
        password = _require_credential(values, "NVP_PASSWORD")
        signature = _require_credential(values, "NVP_SIGNATURE")

        sandbox = _parse_flag(values.get("NVP_SANDBOX", "false"), "NVP_SANDBOX")
        default_url = SANDBOX_API_URL if sandbox else LIVE_API_URL
        api_url = values.get("NVP_API_URL") or default_url
        api_url = api_url.strip()
        if not api_url.startswith(("https://", "http://")):
            raise ConfigurationError(f"NVP_API_URL must be an http(s) URL, got '{api_url}'")

        timeout_seconds = _parse_timeout(
            values.get("NVP_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )

        return cls(
            user=user,
            password=password,
            signature=signature,
            api_url=api_url,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
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
    ) -> "NvpConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "user": user,
                "password": password,
                "signature": signature,
                "api_url": api_url,
                "sandbox": sandbox,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_nvp_config(
    *,
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
) -> NvpConfig:
    """
    Convenience wrapper that mirrors :meth:`NvpConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return NvpConfig.from_env(
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
