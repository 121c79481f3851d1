"""
Public facade for the NVP payments client package.

The module re-exports the most useful pieces for integrators so they can
``from nvp_payments import ...`` without navigating the package.
"""

from .api import call_method, create_nvp_client
from .core import (
    COMMON_RESPONSE_FIELDS,
    ERROR_FIELDS,
    LIVE_API_URL,
    METHOD_SPECS,
    SANDBOX_API_URL,
    ConfigurationError,
    DecodingError,
    MethodSpec,
    NvpClient,
    NvpConfig,
    NvpEnvironment,
    NvpError,
    NvpParameters,
    ResponseShaper,
    TransportError,
    ack_succeeded,
    build_environment,
    build_request,
    decode_form,
    decode_list_field,
    encode_form,
    encode_list_field,
    flatten_response,
    load_env_file,
    load_nvp_config,
    shape_errors,
    shape_method_list,
    shape_response,
)

__all__ = (
    "COMMON_RESPONSE_FIELDS",
    "ConfigurationError",
    "DecodingError",
    "ERROR_FIELDS",
    "LIVE_API_URL",
    "METHOD_SPECS",
    "MethodSpec",
    "NvpClient",
    "NvpConfig",
    "NvpEnvironment",
    "NvpError",
    "NvpParameters",
    "ResponseShaper",
    "SANDBOX_API_URL",
    "TransportError",
    "ack_succeeded",
    "build_environment",
    "build_request",
    "call_method",
    "create_nvp_client",
    "decode_form",
    "decode_list_field",
    "encode_form",
    "encode_list_field",
    "flatten_response",
    "load_env_file",
    "load_nvp_config",
    "shape_errors",
    "shape_method_list",
    "shape_response",
)
