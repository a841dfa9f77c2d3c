"""
Payment-method nonces: one-time references to vaulted payment methods.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import NotFoundError
from ..core.resource import Resource
from ..core.results import ErrorResult, SuccessfulResult, expect_root, parse_result

__all__ = ["PaymentMethodNonce", "PaymentMethodNonceGateway"]


class PaymentMethodNonce(Resource):
    """
    A one-time reference to a vaulted payment method, safe to hand to a
    client application. ``nonce`` holds the value to pass back on a sale.
    """

    def __repr__(self) -> str:
        return super().__repr__(["nonce", "type", "is_locked", "consumed"])


class PaymentMethodNonceGateway:
    def __init__(self, gateway: Any) -> None:
        self.gateway = gateway
        self.config = gateway.config

    def create(self, payment_method_token: str) -> SuccessfulResult | ErrorResult:
        """
        Create a nonce for a vaulted payment method::

            result = gateway.payment_method_nonce.create("my_token")
            nonce = result.payment_method_nonce.nonce
        """
        response = self.gateway.http().post(
            "/payment_methods/" + payment_method_token + "/nonces"
        )
        return self.parse_response(response)

    def find(self, payment_method_nonce: str) -> PaymentMethodNonce:
        try:
            if payment_method_nonce is None or payment_method_nonce.strip() == "":
                raise NotFoundError()
            response = self.gateway.http().get("/payment_method_nonces/" + payment_method_nonce)
            return PaymentMethodNonce(self.gateway, expect_root(response, "payment_method_nonce"))
        except NotFoundError:
            raise NotFoundError(
                "payment method nonce with id %r not found" % payment_method_nonce
            ) from None

    def parse_response(self, response: Mapping[str, Any]) -> SuccessfulResult | ErrorResult:
        return parse_result(self.gateway, response, "payment_method_nonce", PaymentMethodNonce)
