"""
Core primitives that implement NVP request building and response shaping.
"""

from .client import NvpClient, call_method, post_form
from .config import (
    LIVE_API_URL,
    SANDBOX_API_URL,
    NvpConfig,
    NvpParameters,
    load_nvp_config,
)
from .environment import NvpEnvironment, build_environment, load_env_file
from .errors import ConfigurationError, DecodingError, NvpError, TransportError
from .fields import decode_list_field, encode_list_field, is_list_field
from .methods import (
    COMMON_RESPONSE_FIELDS,
    ERROR_FIELDS,
    METHOD_SPECS,
    MethodSpec,
    build_method_table,
)
from .payloads import build_request, decode_form, encode_form
from .shaping import (
    ResponseShaper,
    ack_succeeded,
    flatten_response,
    shape_errors,
    shape_method_list,
    shape_response,
)

__all__ = [
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
    "build_method_table",
    "build_request",
    "call_method",
    "decode_form",
    "decode_list_field",
    "encode_form",
    "encode_list_field",
    "flatten_response",
    "is_list_field",
    "load_env_file",
    "load_nvp_config",
    "post_form",
    "shape_errors",
    "shape_method_list",
    "shape_response",
]
