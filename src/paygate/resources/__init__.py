"""
Per-resource facades and the objects they return.
"""

from .discount import Discount, DiscountGateway, Modification
from .payment_method_nonce import PaymentMethodNonce, PaymentMethodNonceGateway
from .transaction import (
    DisbursementDetail,
    StatusEvent,
    Transaction,
    TransactionGateway,
)
from .transaction_search import TransactionSearch

__all__ = [
    "DisbursementDetail",
    "Discount",
    "DiscountGateway",
    "Modification",
    "PaymentMethodNonce",
    "PaymentMethodNonceGateway",
    "StatusEvent",
    "Transaction",
    "TransactionGateway",
    "TransactionSearch",
]
