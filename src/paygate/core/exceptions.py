"""
Exception hierarchy raised by the gateway client.

Transport-level faults (bad credentials, missing records, maintenance
windows, rate limiting) surface as exceptions. Validation failures reported
by the gateway are not exceptions; they come back as
:class:`paygate.core.results.ErrorResult`.
"""

from __future__ import annotations

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "DownForMaintenanceError",
    "GatewayConnectionError",
    "GatewayError",
    "InvalidParametersError",
    "NotFoundError",
    "RequestTimeoutError",
    "ServerError",
    "TooManyRequestsError",
    "UnexpectedError",
    "UpgradeRequiredError",
]


class GatewayError(Exception):
    """Base class for every error raised by the client."""


class AuthenticationError(GatewayError):
    """
    Raised when the gateway rejects the credentials, usually because the
    public/private key pair is wrong or the user is inactive.
    """


class AuthorizationError(GatewayError):
    """Raised when the credentials lack permission for the requested operation."""


class NotFoundError(GatewayError):
    """Raised when a record such as a transaction does not exist."""


class UpgradeRequiredError(GatewayError):
    """Raised when the gateway no longer supports this client version."""


class TooManyRequestsError(GatewayError):
    """Raised when the gateway rate limits the merchant."""


class ServerError(GatewayError):
    """Raised when the gateway fails with an internal error."""


class DownForMaintenanceError(GatewayError):
    """Raised when the gateway is down for maintenance or a search timed out."""


class UnexpectedError(GatewayError):
    """Raised for unknown statuses and responses the client cannot interpret."""


class GatewayConnectionError(GatewayError):
    """Raised when no HTTP response could be obtained from the gateway."""


class RequestTimeoutError(GatewayConnectionError):
    """Raised when the gateway did not answer within the configured timeout."""


class InvalidParametersError(GatewayError, KeyError):
    """Raised before any request is sent when parameters fall outside a signature."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return Exception.__str__(self)
