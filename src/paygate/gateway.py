"""
The gateway aggregate that owns the configuration, the HTTP session and the
per-resource facades.
"""

from __future__ import annotations

from typing import Optional

import requests

from .core.config import GatewayConfig
from .core.http import Http
from .resources.discount import DiscountGateway
from .resources.payment_method_nonce import PaymentMethodNonceGateway
from .resources.transaction import TransactionGateway

__all__ = ["PaymentGateway"]


class PaymentGateway:
    """
    Entry point for every API call::

        gateway = PaymentGateway(load_gateway_config())
        result = gateway.transaction.sale({"amount": "10.00", "payment_method_nonce": nonce})
    """

    def __init__(
        self,
        config: GatewayConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.discount = DiscountGateway(self)
        self.payment_method_nonce = PaymentMethodNonceGateway(self)
        self.transaction = TransactionGateway(self)

    def http(self) -> Http:
        return Http(self.config, session=self.session)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PaymentGateway":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
