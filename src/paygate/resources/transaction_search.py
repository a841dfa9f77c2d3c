"""
Search fields accepted by :meth:`TransactionGateway.search`::

    gateway.transaction.search(
        TransactionSearch.customer_id == "123",
        TransactionSearch.amount.between("10.00", "20.00"),
    )
"""

from ..core.search import (
    EqualityNodeBuilder,
    KeyValueNodeBuilder,
    MultipleValueNodeBuilder,
    PartialMatchNodeBuilder,
    RangeNodeBuilder,
    TextNodeBuilder,
    constant_values,
)
from .transaction import Transaction

__all__ = ["TransactionSearch"]


class TransactionSearch:
    billing_company = TextNodeBuilder("billing_company")
    billing_country_name = TextNodeBuilder("billing_country_name")
    billing_first_name = TextNodeBuilder("billing_first_name")
    billing_last_name = TextNodeBuilder("billing_last_name")
    billing_postal_code = TextNodeBuilder("billing_postal_code")
    credit_card_cardholder_name = TextNodeBuilder("credit_card_cardholder_name")
    currency = TextNodeBuilder("currency")
    customer_company = TextNodeBuilder("customer_company")
    customer_email = TextNodeBuilder("customer_email")
    customer_first_name = TextNodeBuilder("customer_first_name")
    customer_id = TextNodeBuilder("customer_id")
    customer_last_name = TextNodeBuilder("customer_last_name")
    id = TextNodeBuilder("id")
    order_id = TextNodeBuilder("order_id")
    payment_method_token = TextNodeBuilder("payment_method_token")
    processor_authorization_code = TextNodeBuilder("processor_authorization_code")
    settlement_batch_id = TextNodeBuilder("settlement_batch_id")

    credit_card_expiration_date = EqualityNodeBuilder("credit_card_expiration_date")
    credit_card_number = PartialMatchNodeBuilder("credit_card_number")

    ids = MultipleValueNodeBuilder("ids")
    merchant_account_id = MultipleValueNodeBuilder("merchant_account_id")
    source = MultipleValueNodeBuilder("source", constant_values(Transaction.Source))
    status = MultipleValueNodeBuilder("status", constant_values(Transaction.Status))
    type = MultipleValueNodeBuilder("type", constant_values(Transaction.Type))

    refund = KeyValueNodeBuilder("refund")

    amount = RangeNodeBuilder("amount")
    authorized_at = RangeNodeBuilder("authorized_at")
    created_at = RangeNodeBuilder("created_at")
    disbursement_date = RangeNodeBuilder("disbursement_date")
    failed_at = RangeNodeBuilder("failed_at")
    gateway_rejected_at = RangeNodeBuilder("gateway_rejected_at")
    processor_declined_at = RangeNodeBuilder("processor_declined_at")
    settled_at = RangeNodeBuilder("settled_at")
    submitted_for_settlement_at = RangeNodeBuilder("submitted_for_settlement_at")
    voided_at = RangeNodeBuilder("voided_at")
