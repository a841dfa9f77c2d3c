"""
Core primitives: configuration, transport, XML codec and the result pipeline.
"""

from .collection import ResourceCollection, extract_as_array, extract_children
from .config import (
    ConfigError,
    GatewayConfig,
    GatewayParameters,
    load_gateway_config,
)
from .environment import Environment, GatewayEnvironment, build_environment, load_env_file
from .error_codes import ErrorCodes
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    DownForMaintenanceError,
    GatewayConnectionError,
    GatewayError,
    InvalidParametersError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    TooManyRequestsError,
    UnexpectedError,
    UpgradeRequiredError,
)
from .http import Http
from .resource import AttributeGetter, Resource
from .results import (
    ErrorResult,
    Errors,
    SuccessfulResult,
    ValidationError,
    ValidationErrorCollection,
    expect_root,
    parse_result,
)
from .xml_util import dict_from_xml, xml_from_dict

__all__ = [
    "AttributeGetter",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigError",
    "DownForMaintenanceError",
    "Environment",
    "ErrorCodes",
    "ErrorResult",
    "Errors",
    "GatewayConfig",
    "GatewayConnectionError",
    "GatewayEnvironment",
    "GatewayError",
    "GatewayParameters",
    "Http",
    "InvalidParametersError",
    "NotFoundError",
    "RequestTimeoutError",
    "Resource",
    "ResourceCollection",
    "ServerError",
    "SuccessfulResult",
    "TooManyRequestsError",
    "UnexpectedError",
    "UpgradeRequiredError",
    "ValidationError",
    "ValidationErrorCollection",
    "build_environment",
    "dict_from_xml",
    "expect_root",
    "extract_as_array",
    "extract_children",
    "load_env_file",
    "load_gateway_config",
    "parse_result",
    "xml_from_dict",
]
