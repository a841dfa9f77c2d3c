"""
Discounts configured for the merchant.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List, Mapping

from ..core.collection import extract_children
from ..core.resource import Resource

__all__ = ["Discount", "DiscountGateway", "Modification"]

logger = logging.getLogger(__name__)


class Modification(Resource):
    """Common shape of discounts and add-ons."""

    def __init__(self, gateway: Any, attributes: Mapping[str, Any]) -> None:
        super().__init__(gateway, attributes)
        amount = getattr(self, "amount", None)
        self.amount = Decimal(amount) if amount not in (None, "") else None

    def __repr__(self) -> str:
        return super().__repr__(["id", "name", "amount", "kind"])


class Discount(Modification):
    pass


class DiscountGateway:
    def __init__(self, gateway: Any) -> None:
        self.gateway = gateway
        self.config = gateway.config

    def all(self) -> List[Discount]:
        """Every discount configured for the merchant."""
        response = self.gateway.http().get("/discounts/")
        items = extract_children(response.get("discounts"), "discount")
        logger.debug("Loaded %d discounts", len(items))
        return [Discount(self.gateway, item) for item in items]
