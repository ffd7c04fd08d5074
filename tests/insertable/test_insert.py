"""Tests for the insert dispatch operation."""

from collections import OrderedDict, deque

import pytest

from insertable import InclusiveRange, InsertConfig, InsertError, InsertOk, insert


class TestInsert:
    """Scenarios for the polymorphic insert operation."""

    @pytest.mark.parametrize(
        "collection, item, expected",
        [
            ([], 1, [1]),
            ([1, 2, 3, 4], 5, [5, 1, 2, 3, 4]),
            ({"a": 10, "b": 20}, ("a", 30), {"a": 30, "b": 20}),
            ({1, 2, 3, 4}, 33, {1, 2, 3, 4, 33}),
            (
                InclusiveRange(first=5, last=10),
                4,
                InclusiveRange(first=4, last=10, step=1),
            ),
        ],
    )
    def test_insert_succeeds(self, collection, item, expected):
        """Tests the standard successful insertions for every variant."""
        assert insert(collection, item) == InsertOk(collection=expected)

    @pytest.mark.parametrize(
        "collection, item, reason",
        [
            ({"a": 1, "b": 2}, 42, "invalid_item_type"),
            (InclusiveRange(first=5, last=10), 3, "invalid_item_value"),
            (InclusiveRange(first=5, last=10), "oops", "invalid_item_type"),
            ("a string", "b", "unsupported_type"),
            (42, 1, "unsupported_type"),
            (None, 1, "unsupported_type"),
        ],
    )
    def test_insert_fails(self, collection, item, reason):
        """Tests that failures are returned, not raised."""
        assert insert(collection, item) == InsertError(reason=reason)

    @pytest.mark.parametrize(
        "collection, item",
        [
            ([1, 2, 3], 0),
            ((1, 2, 3), 0),
            ({"a": 1}, ("b", 2)),
            ({"a": 1}, ("a", 2)),
            ({1, 2}, 3),
            (deque([1, 2]), 0),
        ],
    )
    def test_insert_does_not_mutate(self, collection, item):
        """Tests that the original collection is left unchanged."""
        import copy

        saved = copy.deepcopy(collection)

        result = insert(collection, item)

        assert result.is_ok()
        assert collection == saved
        assert result.unwrap() is not collection

    def test_subclasses_dispatch_to_base_variant(self):
        """Tests that a dict subclass is handled by the mapping variant."""
        ordered = OrderedDict(a=1)

        result = insert(ordered, ("b", 2))

        assert isinstance(result.unwrap(), OrderedDict)
        assert list(result.unwrap().items()) == [("a", 1), ("b", 2)]

    def test_exact_dispatch_rejects_subclasses(self):
        """Tests that subclass resolution can be turned off."""
        config = InsertConfig(resolve_subclasses=False)

        assert insert(OrderedDict(a=1), ("b", 2), config) == InsertError(
            reason="unsupported_type"
        )
        assert insert({"a": 1}, ("b", 2), config).is_ok()
