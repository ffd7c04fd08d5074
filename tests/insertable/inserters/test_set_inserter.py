import pytest

from insertable import InsertError, insert


class TestSetInserter:
    """Tests for union-with-singleton insertion into sets."""

    @pytest.mark.parametrize("members", [set(), {1, 2, 3, 4}, {"a", (1, 2), None}])
    @pytest.mark.parametrize("item", [33, "a", None, (1, 2), frozenset({1})])
    def test_membership_is_union_with_item(self, members, item):
        result = insert(members, item).unwrap()

        assert result == members | {item}

    def test_insert_is_idempotent(self):
        """Tests that inserting an existing member keeps the membership."""
        once = insert({1, 2}, 3).unwrap()
        twice = insert(once, 3).unwrap()

        assert twice == once == {1, 2, 3}

    def test_frozenset_stays_frozen(self):
        result = insert(frozenset({1}), 2).unwrap()

        assert isinstance(result, frozenset)
        assert result == frozenset({1, 2})

    def test_original_set_is_not_mutated(self):
        members = {1, 2}

        insert(members, 3)

        assert members == {1, 2}

    def test_unhashable_item_is_rejected(self):
        assert insert({1}, [2, 3]) == InsertError(reason="invalid_item_type")
