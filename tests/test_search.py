from __future__ import annotations

import pytest

from paygate import Transaction, TransactionSearch
from paygate.core.search import (
    EqualityNodeBuilder,
    IsNodeBuilder,
    MultipleValueNodeBuilder,
    MultipleValueOrTextNodeBuilder,
    RangeNodeBuilder,
    TextNodeBuilder,
    criteria_from_nodes,
)


def test_text_node_operators():
    field = TextNodeBuilder("customer_email")

    assert (field == "a@b.com").to_param() == {"is": "a@b.com"}
    assert (field != "a@b.com").to_param() == {"is_not": "a@b.com"}
    assert field.starts_with("a").to_param() == {"starts_with": "a"}
    assert field.ends_with(".com").to_param() == {"ends_with": ".com"}
    assert field.contains("@").to_param() == {"contains": "@"}


def test_is_node_builder():
    node = IsNodeBuilder("payment_method_nonce") == "nonce"

    assert node.name == "payment_method_nonce"
    assert node.to_param() == {"is": "nonce"}


def test_equality_node_name():
    node = EqualityNodeBuilder("credit_card_expiration_date") == "05/2030"

    assert node.name == "credit_card_expiration_date"


def test_range_node_operators():
    field = RangeNodeBuilder("amount")

    assert (field >= "10.00").to_param() == {"min": "10.00"}
    assert (field <= "20.00").to_param() == {"max": "20.00"}
    assert field.between("10.00", "20.00").to_param() == {"min": "10.00", "max": "20.00"}
    assert (field == "15.00").to_param() == {"is": "15.00"}


def test_multiple_value_node_accepts_varargs_or_list():
    field = MultipleValueNodeBuilder("ids")

    assert field.in_list("a", "b").to_param() == ["a", "b"]
    assert field.in_list(["a", "b"]).to_param() == ["a", "b"]
    assert (field == "a").to_param() == ["a"]


def test_multiple_value_node_whitelist():
    node = TransactionSearch.status.in_list(Transaction.Status.Settled, Transaction.Status.Voided)

    assert node.to_param() == ["settled", "voided"]
    with pytest.raises(AttributeError, match="noodles"):
        TransactionSearch.status.in_list("noodles")


def test_key_value_node():
    assert (TransactionSearch.refund == True).to_param() is True  # noqa: E712
    assert (TransactionSearch.refund != True).to_param() is False  # noqa: E712


def test_criteria_merges_nodes_on_the_same_field():
    criteria = criteria_from_nodes(
        [
            TransactionSearch.amount >= "10.00",
            TransactionSearch.amount <= "20.00",
            TransactionSearch.customer_id == "cust",
            TransactionSearch.ids.in_list("a"),
        ]
    )

    assert criteria == {
        "amount": {"min": "10.00", "max": "20.00"},
        "customer_id": {"is": "cust"},
        "ids": ["a"],
    }


class TestMultipleValueOrTextNodeBuilder:
    field = MultipleValueOrTextNodeBuilder("payment_instrument_type", ["credit_card", "paypal_account"])

    def test_text_operators(self):
        assert (self.field == "credit_card").to_param() == {"is": "credit_card"}
        assert (self.field != "credit_card").to_param() == {"is_not": "credit_card"}
        assert self.field.contains("card").to_param() == {"contains": "card"}
        assert self.field.starts_with("pay").to_param() == {"starts_with": "pay"}

    def test_in_list(self):
        node = self.field.in_list("credit_card", "paypal_account")

        assert node.name == "payment_instrument_type"
        assert node.to_param() == ["credit_card", "paypal_account"]

    def test_in_list_applies_whitelist(self):
        with pytest.raises(AttributeError, match="apple_pay"):
            self.field.in_list(["credit_card", "apple_pay"])
