"""
Lazy iteration over search results.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List, Mapping, Optional, Sequence, TypeVar

from .exceptions import UnexpectedError

__all__ = ["ResourceCollection", "extract_as_array", "extract_children"]

T = TypeVar("T")

FetchFunction = Callable[[Any, List[str]], List[T]]


def extract_as_array(results: Mapping[str, Any], attribute: str) -> List[Any]:
    """
    Return ``results[attribute]`` as a list. Repeated XML children parse to a
    list, a single child to a dict, and a missing one to nothing.
    """
    if not results or attribute not in results:
        return []

    value = results[attribute]
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    return value


def extract_children(container: Any, child: str) -> List[Any]:
    """
    The elements inside a wrapper such as ``<discounts>``, which parses to a
    list when typed as an array and to ``{"discount": ...}`` otherwise.
    """
    if isinstance(container, list):
        return container
    if isinstance(container, Mapping):
        return extract_as_array(container, child)
    return []


class ResourceCollection(Generic[T]):
    """
    The results of a search. The gateway first returns only the matching ids;
    resources are fetched ``page_size`` ids at a time while iterating::

        results = gateway.transaction.search(TransactionSearch.customer_id == "123")
        for transaction in results.items:
            print(transaction.id)
    """

    def __init__(
        self,
        query: Any,
        results: Mapping[str, Any],
        fetch: FetchFunction,
    ) -> None:
        search_results = results["search_results"]
        try:
            self._page_size = int(search_results.get("page_size") or 0)
        except (TypeError, ValueError) as exc:
            raise UnexpectedError("search results declared an invalid page_size") from exc
        self._ids: List[str] = [str(item) for item in extract_as_array(search_results, "ids")]
        self._query = query
        self._fetch = fetch

        if self._ids and self._page_size <= 0:
            raise UnexpectedError("search results must declare a positive page_size")

    @property
    def ids(self) -> Sequence[str]:
        return tuple(self._ids)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def maximum_size(self) -> int:
        """
        The approximate size of the results. Records can change between the
        id search and the fetches, so iteration may yield fewer items.
        """
        return len(self._ids)

    @property
    def first(self) -> Optional[T]:
        """The first result, or ``None`` when nothing matched."""
        if not self._ids:
            return None
        batch = self._fetch(self._query, self._ids[0:1])
        return batch[0] if batch else None

    @property
    def items(self) -> Iterator[T]:
        """A generator over every result, fetched batch by batch."""
        for batch in self._batch_ids():
            for item in self._fetch(self._query, batch):
                yield item

    def __iter__(self) -> Iterator[T]:
        return self.items

    def _batch_ids(self) -> Iterator[List[str]]:
        for i in range(0, len(self._ids), self._page_size):
            yield self._ids[i:i + self._page_size]
