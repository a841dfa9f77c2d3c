"""
HTTP transport for the gateway's XML API.

One call, one response: nothing here retries. Error statuses are translated
into the exception hierarchy in :mod:`paygate.core.exceptions`; everything
else is returned as a response tree.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, NoReturn, Optional

import requests

from ..version import __version__
from .config import API_VERSION, GatewayConfig
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    DownForMaintenanceError,
    GatewayConnectionError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    TooManyRequestsError,
    UnexpectedError,
    UpgradeRequiredError,
)
from .xml_util import dict_from_xml, xml_from_dict

__all__ = ["Http"]

logger = logging.getLogger(__name__)

# 422 carries validation errors, which are results rather than exceptions.
_NON_ERROR_STATUSES = (200, 201, 422)


class Http:
    """
    Issues authenticated requests relative to the merchant's base URL.
    """

    @staticmethod
    def is_error_status(status: int) -> bool:
        return status not in _NON_ERROR_STATUSES

    @staticmethod
    def raise_exception_from_status(status: int, message: Optional[str] = None) -> NoReturn:
        if status == 401:
            raise AuthenticationError()
        if status == 403:
            raise AuthorizationError(message)
        if status == 404:
            raise NotFoundError()
        if status == 426:
            raise UpgradeRequiredError()
        if status == 429:
            raise TooManyRequestsError()
        if status == 500:
            raise ServerError()
        if status == 503:
            raise DownForMaintenanceError()
        raise UnexpectedError(f"Unexpected HTTP_RESPONSE {status}")

    def __init__(
        self,
        config: GatewayConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def get(self, path: str) -> Dict[str, Any]:
        return self._http_do("GET", path)

    def post(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self._http_do("POST", path, params)

    def put(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self._http_do("PUT", path, params)

    def delete(self, path: str) -> Dict[str, Any]:
        return self._http_do("DELETE", path)

    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/xml",
            "Authorization": self.config.authorization_header(),
            "Content-Type": "application/xml",
            "User-Agent": "Paygate Python " + __version__,
            "X-ApiVersion": API_VERSION,
        }

    def _http_do(
        self,
        http_verb: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        request_body = xml_from_dict(params) if params else ""
        url = self.config.base_merchant_url() + path

        logger.debug("Sending %s %s", http_verb, url)
        try:
            response = self.session.request(
                http_verb,
                url,
                headers=self.headers(),
                data=request_body.encode("utf-8"),
                timeout=self.config.timeout_seconds,
                verify=self.config.verify(),
            )
        except requests.exceptions.Timeout as exc:
            logger.warning("%s %s timed out", http_verb, url)
            raise RequestTimeoutError(
                f"{http_verb} {path} timed out after {self.config.timeout_seconds}s"
            ) from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("%s %s failed: %s", http_verb, url, exc)
            raise GatewayConnectionError(f"{http_verb} {path} failed: {exc}") from exc

        status = response.status_code
        logger.debug("%s %s responded with %s", http_verb, url, status)
        if Http.is_error_status(status):
            logger.warning("Gateway responded to %s %s with %s", http_verb, path, status)
            Http.raise_exception_from_status(status, response.text or None)

        if not response.text.strip():
            return {}
        return dict_from_xml(response.content)
