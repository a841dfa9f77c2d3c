"""
Transactions: the objects returned by the gateway and the facade that
creates, settles, refunds and searches them.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core.collection import ResourceCollection, extract_as_array, extract_children
from ..core.exceptions import DownForMaintenanceError, NotFoundError
from ..core.resource import AttributeGetter, Resource
from ..core.results import ErrorResult, SuccessfulResult, expect_root, parse_result
from ..core.search import Node, criteria_from_nodes
from .discount import Discount

__all__ = [
    "DisbursementDetail",
    "StatusEvent",
    "Transaction",
    "TransactionGateway",
]

logger = logging.getLogger(__name__)


def _decimal_or_none(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return Decimal(value)


class StatusEvent(Resource):
    def __init__(self, gateway: Any, attributes: Mapping[str, Any]) -> None:
        super().__init__(gateway, attributes)
        self.amount = _decimal_or_none(getattr(self, "amount", None))


class DisbursementDetail(AttributeGetter):
    def __init__(self, attributes: Mapping[str, Any]) -> None:
        super().__init__(attributes)
        self.settlement_amount = _decimal_or_none(getattr(self, "settlement_amount", None))

    @property
    def is_valid(self) -> bool:
        return getattr(self, "disbursement_date", None) is not None


class Transaction(Resource):
    """
    A sale or credit processed by the gateway.

    An example sale::

        result = gateway.transaction.sale({
            "amount": "100.00",
            "order_id": "123",
            "credit_card": {
                "number": "5105105105105100",
                "expiration_date": "05/2030",
                "cvv": "123",
            },
            "options": {"submit_for_settlement": True},
        })

        print(result.transaction.amount)
    """

    class Type:
        Credit = "credit"
        Sale = "sale"

    class Status:
        AuthorizationExpired = "authorization_expired"
        Authorized = "authorized"
        Authorizing = "authorizing"
        Failed = "failed"
        GatewayRejected = "gateway_rejected"
        ProcessorDeclined = "processor_declined"
        Settled = "settled"
        SettlementDeclined = "settlement_declined"
        SettlementPending = "settlement_pending"
        Settling = "settling"
        SubmittedForSettlement = "submitted_for_settlement"
        Voided = "voided"

    class EscrowStatus:
        HoldPending = "hold_pending"
        Held = "held"
        ReleasePending = "release_pending"
        Released = "released"
        Refunded = "refunded"

    class Source:
        Api = "api"
        ControlPanel = "control_panel"
        Recurring = "recurring"
        Unrecognized = "unrecognized"

    @staticmethod
    def create_signature() -> List[Any]:
        return [
            "amount", "customer_id", "device_session_id", "merchant_account_id",
            "order_id", "channel", "payment_method_token", "payment_method_nonce",
            "purchase_order_number", "recurring", "shipping_address_id",
            "service_fee_amount", "tax_amount", "tax_exempt", "type",
            {
                "credit_card": [
                    "token", "cardholder_name", "cvv", "expiration_date",
                    "expiration_month", "expiration_year", "number",
                ]
            },
            {
                "customer": [
                    "id", "company", "email", "fax", "first_name", "last_name",
                    "phone", "website",
                ]
            },
            {
                "billing": [
                    "first_name", "last_name", "company", "country_code_alpha2",
                    "country_code_alpha3", "country_code_numeric", "country_name",
                    "extended_address", "locality", "postal_code", "region",
                    "street_address",
                ]
            },
            {
                "shipping": [
                    "first_name", "last_name", "company", "country_code_alpha2",
                    "country_code_alpha3", "country_code_numeric", "country_name",
                    "extended_address", "locality", "postal_code", "region",
                    "street_address",
                ]
            },
            {
                "options": [
                    "add_billing_address_to_payment_method",
                    "hold_in_escrow",
                    "store_in_vault",
                    "store_in_vault_on_success",
                    "store_shipping_address_in_vault",
                    "submit_for_settlement",
                ]
            },
            {"custom_fields": ["__any_key__"]},
            {"descriptor": ["name", "phone", "url"]},
        ]

    @staticmethod
    def clone_signature() -> List[Any]:
        return ["amount", "channel", {"options": ["submit_for_settlement"]}]

    def __init__(self, gateway: Any, attributes: Mapping[str, Any]) -> None:
        attributes = dict(attributes)
        super().__init__(gateway, attributes)

        self.amount = _decimal_or_none(getattr(self, "amount", None))
        self.tax_amount = _decimal_or_none(getattr(self, "tax_amount", None))
        if "discounts" in attributes:
            self.discounts = [
                Discount(gateway, discount)
                for discount in extract_children(attributes["discounts"], "discount")
            ]
        if "status_history" in attributes:
            self.status_history = [
                StatusEvent(gateway, event)
                for event in extract_children(attributes["status_history"], "status_event")
            ]
        if isinstance(attributes.get("disbursement_details"), Mapping):
            self.disbursement_details = DisbursementDetail(attributes["disbursement_details"])

    def __repr__(self) -> str:
        return super().__repr__(["id", "type", "status", "amount", "payment_method_token", "customer_id"])

    @property
    def is_disbursed(self) -> bool:
        details = getattr(self, "disbursement_details", None)
        return details is not None and details.is_valid


class TransactionGateway:
    def __init__(self, gateway: Any) -> None:
        self.gateway = gateway
        self.config = gateway.config

    def create(self, params: Mapping[str, Any]) -> SuccessfulResult | ErrorResult:
        """
        Create a transaction. ``params["type"]`` must be set; :meth:`sale` and
        :meth:`credit` set it for you.
        """
        Resource.verify_keys(params, Transaction.create_signature())
        return self._post("/transactions", {"transaction": params})

    def sale(self, params: Mapping[str, Any]) -> SuccessfulResult | ErrorResult:
        return self.create(dict(params, type=Transaction.Type.Sale))

    def credit(self, params: Mapping[str, Any]) -> SuccessfulResult | ErrorResult:
        return self.create(dict(params, type=Transaction.Type.Credit))

    def clone_transaction(
        self,
        transaction_id: str,
        params: Mapping[str, Any],
    ) -> SuccessfulResult | ErrorResult:
        Resource.verify_keys(params, Transaction.clone_signature())
        return self._post(
            "/transactions/" + transaction_id + "/clone",
            {"transaction_clone": params},
        )

    def find(self, transaction_id: str) -> Transaction:
        try:
            if transaction_id is None or transaction_id.strip() == "":
                raise NotFoundError()
            response = self.gateway.http().get("/transactions/" + transaction_id)
            return Transaction(self.gateway, expect_root(response, "transaction"))
        except NotFoundError:
            raise NotFoundError("transaction with id %r not found" % transaction_id) from None

    def refund(
        self,
        transaction_id: str,
        amount: Optional[Decimal | str] = None,
    ) -> SuccessfulResult | ErrorResult:
        """
        Refund all of a settled transaction, or part of it when ``amount`` is given::

            result = gateway.transaction.refund("my_transaction_id", Decimal("5.00"))
        """
        return self._post(
            "/transactions/" + transaction_id + "/refund",
            {"transaction": {"amount": amount}},
        )

    def submit_for_settlement(
        self,
        transaction_id: str,
        amount: Optional[Decimal | str] = None,
    ) -> SuccessfulResult | ErrorResult:
        """
        Submit an authorized transaction for settlement. ``amount`` may be lower
        than the authorized amount.
        """
        return self._put(
            "/transactions/" + transaction_id + "/submit_for_settlement",
            {"transaction": {"amount": amount}},
        )

    def void(self, transaction_id: str) -> SuccessfulResult | ErrorResult:
        return self._put("/transactions/" + transaction_id + "/void")

    def hold_in_escrow(self, transaction_id: str) -> SuccessfulResult | ErrorResult:
        """Hold a sub-merchant transaction in escrow."""
        return self._put("/transactions/" + transaction_id + "/hold_in_escrow", {})

    def release_from_escrow(self, transaction_id: str) -> SuccessfulResult | ErrorResult:
        return self._put("/transactions/" + transaction_id + "/release_from_escrow", {})

    def cancel_release(self, transaction_id: str) -> SuccessfulResult | ErrorResult:
        return self._put("/transactions/" + transaction_id + "/cancel_release", {})

    def search(self, *query: Node | Sequence[Node]) -> ResourceCollection[Transaction]:
        """
        Search transactions. Accepts nodes as positional arguments or a
        single list of nodes.
        """
        nodes = list(query[0]) if len(query) == 1 and isinstance(query[0], (list, tuple)) else list(query)

        response = self.gateway.http().post(
            "/transactions/advanced_search_ids",
            {"search": criteria_from_nodes(nodes)},
        )
        if "search_results" in response:
            return ResourceCollection(nodes, response, self._fetch)

        logger.warning("Transaction search did not return search results: %s", ", ".join(response))
        raise DownForMaintenanceError("search timeout")

    def _fetch(self, query: List[Node], ids: List[str]) -> List[Transaction]:
        criteria = criteria_from_nodes(query)
        criteria["ids"] = list(ids)
        response = self.gateway.http().post(
            "/transactions/advanced_search",
            {"search": criteria},
        )
        transactions = response.get("credit_card_transactions") or {}
        return [
            Transaction(self.gateway, item)
            for item in extract_as_array(transactions, "transaction")
        ]

    def _post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> SuccessfulResult | ErrorResult:
        response = self.gateway.http().post(path, params)
        return self._parse(response)

    def _put(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> SuccessfulResult | ErrorResult:
        response = self.gateway.http().put(path, params)
        return self._parse(response)

    def _parse(self, response: Mapping[str, Any]) -> SuccessfulResult | ErrorResult:
        return parse_result(
            self.gateway,
            response,
            "transaction",
            Transaction,
            resources={"transaction": Transaction},
        )
