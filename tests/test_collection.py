from __future__ import annotations

import pytest

from paygate import UnexpectedError
from paygate.core.collection import ResourceCollection, extract_as_array


class RecordingFetch:
    def __init__(self):
        self.calls = []

    def __call__(self, query, ids):
        self.calls.append(list(ids))
        return ["item-" + item_id for item_id in ids]


def _results(ids, page_size=2):
    return {"search_results": {"page_size": page_size, "ids": ids}}


def test_items_are_fetched_in_page_sized_batches():
    fetch = RecordingFetch()
    collection = ResourceCollection("query", _results(["1", "2", "3", "4", "5"]), fetch)

    assert list(collection.items) == ["item-1", "item-2", "item-3", "item-4", "item-5"]
    assert fetch.calls == [["1", "2"], ["3", "4"], ["5"]]


def test_nothing_is_fetched_before_iteration():
    fetch = RecordingFetch()
    collection = ResourceCollection("query", _results(["1", "2", "3"]), fetch)

    iterator = iter(collection)
    assert fetch.calls == []

    assert next(iterator) == "item-1"
    assert fetch.calls == [["1", "2"]]


def test_query_is_passed_through():
    seen = []
    collection = ResourceCollection(
        {"q": 1},
        _results(["1"]),
        lambda query, ids: seen.append(query) or [],
    )

    list(collection)

    assert seen == [{"q": 1}]


def test_first_fetches_only_one_id():
    fetch = RecordingFetch()
    collection = ResourceCollection("query", _results(["1", "2", "3"]), fetch)

    assert collection.first == "item-1"
    assert fetch.calls == [["1"]]


def test_maximum_size():
    collection = ResourceCollection("query", _results(["1", "2", "3"]), RecordingFetch())

    assert collection.maximum_size == 3
    assert collection.ids == ("1", "2", "3")
    assert collection.page_size == 2


def test_empty_results():
    fetch = RecordingFetch()
    collection = ResourceCollection("query", _results([]), fetch)

    assert collection.first is None
    assert list(collection.items) == []
    assert collection.maximum_size == 0
    assert fetch.calls == []


def test_missing_ids_element_means_no_results():
    collection = ResourceCollection("query", {"search_results": {"page_size": 50}}, RecordingFetch())

    assert collection.maximum_size == 0


def test_records_that_disappeared_are_skipped():
    collection = ResourceCollection("query", _results(["1", "2"]), lambda query, ids: [])

    assert collection.first is None
    assert list(collection) == []


@pytest.mark.parametrize("page_size", [0, -1, "many"])
def test_positive_page_size_required(page_size):
    with pytest.raises(UnexpectedError, match="page_size"):
        ResourceCollection("query", _results(["1"], page_size=page_size), RecordingFetch())


@pytest.mark.parametrize(
    "tree, expected",
    [
        ({}, []),
        ({"transaction": None}, []),
        ({"transaction": {"id": "a"}}, [{"id": "a"}]),
        ({"transaction": [{"id": "a"}, {"id": "b"}]}, [{"id": "a"}, {"id": "b"}]),
    ],
)
def test_extract_as_array(tree, expected):
    assert extract_as_array(tree, "transaction") == expected
