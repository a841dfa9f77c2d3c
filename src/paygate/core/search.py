"""
Builders for search criteria.

Search fields are declared as class attributes and combined with operators::

    gateway.transaction.search(
        TransactionSearch.amount.between("10.00", "20.00"),
        TransactionSearch.status.in_list(Transaction.Status.Settled),
        TransactionSearch.customer_email.ends_with("@example.com"),
    )
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

__all__ = [
    "EqualityNodeBuilder",
    "IsNodeBuilder",
    "KeyValueNodeBuilder",
    "MultipleValueNodeBuilder",
    "MultipleValueOrTextNodeBuilder",
    "Node",
    "PartialMatchNodeBuilder",
    "RangeNodeBuilder",
    "TextNodeBuilder",
    "constant_values",
    "criteria_from_nodes",
]


class Node:
    def __init__(self, name: str, param: Any) -> None:
        self.name = name
        self.param = param

    def to_param(self) -> Any:
        return self.param

    def __repr__(self) -> str:
        return "<Node %s=%r>" % (self.name, self.param)


class IsNodeBuilder:
    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, value: Any) -> Node:  # type: ignore[override]
        return self.is_equal(value)

    __hash__ = None  # type: ignore[assignment]

    def is_equal(self, value: Any) -> Node:
        return Node(self.name, {"is": value})


class EqualityNodeBuilder(IsNodeBuilder):
    def __ne__(self, value: Any) -> Node:  # type: ignore[override]
        return self.is_not_equal(value)

    def is_not_equal(self, value: Any) -> Node:
        return Node(self.name, {"is_not": value})


class PartialMatchNodeBuilder(EqualityNodeBuilder):
    def starts_with(self, value: str) -> Node:
        return Node(self.name, {"starts_with": value})

    def ends_with(self, value: str) -> Node:
        return Node(self.name, {"ends_with": value})


class TextNodeBuilder(PartialMatchNodeBuilder):
    def contains(self, value: str) -> Node:
        return Node(self.name, {"contains": value})


class KeyValueNodeBuilder:
    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, value: Any) -> Node:  # type: ignore[override]
        return self.is_equal(value)

    def __ne__(self, value: Any) -> Node:  # type: ignore[override]
        return self.is_not_equal(value)

    __hash__ = None  # type: ignore[assignment]

    def is_equal(self, value: Any) -> Node:
        return Node(self.name, value)

    def is_not_equal(self, value: Any) -> Node:
        return Node(self.name, not value)


class MultipleValueNodeBuilder:
    def __init__(self, name: str, whitelist: Sequence[str] = ()) -> None:
        self.name = name
        self.whitelist = list(whitelist)

    def in_list(self, *values: Any) -> Node:
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])

        invalid_args = [value for value in values if value not in self.whitelist]
        if self.whitelist and invalid_args:
            raise AttributeError(
                "Invalid argument(s) for %s: %s"
                % (self.name, ", ".join(str(arg) for arg in invalid_args))
            )
        return Node(self.name, list(values))

    def __eq__(self, value: Any) -> Node:  # type: ignore[override]
        return self.in_list([value])

    __hash__ = None  # type: ignore[assignment]


class MultipleValueOrTextNodeBuilder(TextNodeBuilder, MultipleValueNodeBuilder):
    def __init__(self, name: str, whitelist: Sequence[str] = ()) -> None:
        MultipleValueNodeBuilder.__init__(self, name, whitelist)


class RangeNodeBuilder:
    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, value: Any) -> Node:  # type: ignore[override]
        return self.is_equal(value)

    __hash__ = None  # type: ignore[assignment]

    def is_equal(self, value: Any) -> Node:
        return EqualityNodeBuilder(self.name).is_equal(value)

    def __ge__(self, minimum: Any) -> Node:
        return self.greater_than_or_equal_to(minimum)

    def greater_than_or_equal_to(self, minimum: Any) -> Node:
        return Node(self.name, {"min": minimum})

    def __le__(self, maximum: Any) -> Node:
        return self.less_than_or_equal_to(maximum)

    def less_than_or_equal_to(self, maximum: Any) -> Node:
        return Node(self.name, {"max": maximum})

    def between(self, minimum: Any, maximum: Any) -> Node:
        return Node(self.name, {"min": minimum, "max": maximum})


def constant_values(klass: type) -> List[Any]:
    """Public constant values declared on ``klass``, for whitelists."""
    return [value for key, value in vars(klass).items() if not key.startswith("_")]


def criteria_from_nodes(nodes: Iterable[Node]) -> Dict[str, Any]:
    """
    Merge search nodes into the criteria dict sent to the gateway. Range and
    text operators on the same field combine into one entry.
    """
    criteria: Dict[str, Any] = {}
    for node in nodes:
        param = node.to_param()
        existing = criteria.get(node.name)
        if isinstance(existing, dict) and isinstance(param, dict):
            criteria[node.name] = {**existing, **param}
        else:
            criteria[node.name] = param
    return criteria
