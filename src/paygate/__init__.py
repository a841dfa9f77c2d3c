"""
Public facade for the paygate client library.

The module intentionally re-exports the most useful pieces for integrators so
they can ``from paygate import ...`` without navigating the package.
"""

from .api import create_gateway
from .core import (
    AuthenticationError,
    AuthorizationError,
    ConfigError,
    DownForMaintenanceError,
    Environment,
    ErrorCodes,
    ErrorResult,
    GatewayConfig,
    GatewayConnectionError,
    GatewayError,
    GatewayParameters,
    InvalidParametersError,
    NotFoundError,
    RequestTimeoutError,
    ResourceCollection,
    ServerError,
    SuccessfulResult,
    TooManyRequestsError,
    UnexpectedError,
    UpgradeRequiredError,
    ValidationError,
    load_env_file,
    load_gateway_config,
)
from .gateway import PaymentGateway
from .resources import (
    Discount,
    PaymentMethodNonce,
    Transaction,
    TransactionSearch,
)
from .version import __version__

__all__ = (
    "AuthenticationError",
    "AuthorizationError",
    "ConfigError",
    "Discount",
    "DownForMaintenanceError",
    "Environment",
    "ErrorCodes",
    "ErrorResult",
    "GatewayConfig",
    "GatewayConnectionError",
    "GatewayError",
    "GatewayParameters",
    "InvalidParametersError",
    "NotFoundError",
    "PaymentGateway",
    "PaymentMethodNonce",
    "RequestTimeoutError",
    "ResourceCollection",
    "ServerError",
    "SuccessfulResult",
    "TooManyRequestsError",
    "Transaction",
    "TransactionSearch",
    "UnexpectedError",
    "UpgradeRequiredError",
    "ValidationError",
    "__version__",
    "create_gateway",
    "load_env_file",
    "load_gateway_config",
)
