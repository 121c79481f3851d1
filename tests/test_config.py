"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from nvp_payments.core.config import (
    LIVE_API_URL,
    SANDBOX_API_URL,
    NvpConfig,
    NvpParameters,
    load_nvp_config,
)
from nvp_payments.core.environment import build_environment, load_env_file
from nvp_payments.core.errors import ConfigurationError

_BASE = {
    "NVP_USER": "merchant_api1.example.com",
    "NVP_PASSWORD": "S3CRET",
    "NVP_SIGNATURE": "sig-abc",
}


def test_from_mapping_uses_live_endpoint_by_default() -> None:
    config = NvpConfig.from_mapping(_BASE)

    assert config.user == "merchant_api1.example.com"
    assert config.api_url == LIVE_API_URL
    assert config.timeout_seconds == 30.0
    assert not config.sandbox


def test_sandbox_flag_selects_sandbox_endpoint() -> None:
    config = NvpConfig.from_mapping({**_BASE, "NVP_SANDBOX": "yes"})

    assert config.api_url == SANDBOX_API_URL
    assert config.sandbox


def test_explicit_api_url_wins_over_sandbox_flag() -> None:
    config = NvpConfig.from_mapping(
        {**_BASE, "NVP_SANDBOX": "true", "NVP_API_URL": "https://nvp.internal.test/nvp"}
    )

    assert config.api_url == "https://nvp.internal.test/nvp"


@pytest.mark.parametrize("missing", ["NVP_USER", "NVP_PASSWORD", "NVP_SIGNATURE"])
def test_missing_credentials_are_rejected(missing: str) -> None:
    values = {key: value for key, value in _BASE.items() if key != missing}

    with pytest.raises(ConfigurationError, match=missing):
        NvpConfig.from_mapping(values)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("NVP_USER", "   "),
        ("NVP_SANDBOX", "maybe"),
        ("NVP_TIMEOUT_SECONDS", "soon"),
        ("NVP_TIMEOUT_SECONDS", "0"),
        ("NVP_API_URL", "ftp://example.com/nvp"),
    ],
)
def test_invalid_values_are_rejected(key: str, value: str) -> None:
    with pytest.raises(ConfigurationError):
        NvpConfig.from_mapping({**_BASE, key: value})


def test_repr_hides_secrets() -> None:
    config = NvpConfig.from_mapping(_BASE)

    text = repr(config)
    assert "S3CRET" not in text
    assert "sig-abc" not in text
    assert "merchant_api1.example.com" in text


def test_credential_fields_are_copied_verbatim() -> None:
    config = NvpConfig.from_mapping(_BASE)

    assert config.credential_fields() == {
        "USER": "merchant_api1.example.com",
        "PWD": "S3CRET",
        "SIGNATURE": "sig-abc",
    }


def test_load_nvp_config_layers_env_file_base_and_keywords(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# credentials\n"
        "NVP_USER=file-user\n"
        "export NVP_PASSWORD='file-password'\n"
        "NVP_SIGNATURE=\"file-signature\"\n"
        "NVP_TIMEOUT_SECONDS=12\n",
        encoding="utf-8",
    )

    config = load_nvp_config(
        env_file=str(env_file),
        base={"NVP_USER": "base-user"},
        parameters=NvpParameters(timeout_seconds=7),
        signature="keyword-signature",
        sandbox=True,
    )

    assert config.user == "base-user"
    assert config.password == "file-password"
    assert config.signature == "keyword-signature"
    assert config.timeout_seconds == 7.0
    assert config.api_url == SANDBOX_API_URL


def test_overrides_win_over_base() -> None:
    config = load_nvp_config(
        env_file=None,
        base=_BASE,
        overrides={"NVP_USER": "override-user"},
    )

    assert config.user == "override-user"


def test_build_environment_without_file(tmp_path: Path) -> None:
    environment = build_environment(
        env_file=str(tmp_path / "missing.env"),
        base={"A": "1"},
        overrides={"B": "2"},
    )

    assert environment.variables == {"A": "1", "B": "2"}
    assert environment.get("C", "fallback") == "fallback"


def test_load_env_file_preserves_existing_keys(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("NVP_USER=file-user\nNVP_PASSWORD=file-password\n", encoding="utf-8")
    environ = {"NVP_USER": "existing"}

    merged = load_env_file(str(env_file), environ=environ)

    assert merged == {"NVP_USER": "existing", "NVP_PASSWORD": "file-password"}
    assert environ["NVP_PASSWORD"] == "file-password"
