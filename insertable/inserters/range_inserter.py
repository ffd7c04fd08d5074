from typing import Any, override

from insertable.inserter import Inserter
from insertable.inserts import inserts
from insertable.ranges.inclusive_range import InclusiveRange
from insertable.results.insert_error import InsertError
from insertable.results.insert_ok import InsertOk
from insertable.results.insert_result import InsertResult


@inserts(InclusiveRange, range)
class RangeInserter(Inserter):
    """
    Extends a range one step backwards.

    Insertion only succeeds when `item` is exactly one `step` before the
    first element, which becomes the new first element. `last` and `step`
    are unchanged. Other integers are `invalid_item_value`, non-integers
    are `invalid_item_type`.

    Examples:
        5..10 + 4  -> 4..10
        5..10 + 3  -> invalid_item_value
        10..5 + 11 -> 11..5
    """

    @override
    def insert(
        self, collection: InclusiveRange | range, item: Any
    ) -> InsertResult[InclusiveRange | range]:
        if not self._is_integer(item):
            return InsertError(reason="invalid_item_type")

        if isinstance(collection, range):
            return self._insert_native(collection, item)

        expected = collection.first - collection.step
        if item != expected:
            return InsertError(reason="invalid_item_value")

        return InsertOk(
            collection=InclusiveRange(
                first=expected, last=collection.last, step=collection.step
            )
        )

    def _insert_native(self, collection: range, item: int) -> InsertResult[range]:
        # an empty range has no first element to extend from
        if len(collection) == 0 or item != collection.start - collection.step:
            return InsertError(reason="invalid_item_value")

        return InsertOk(
            collection=range(
                collection.start - collection.step, collection.stop, collection.step
            ),
        )

    def _is_integer(self, item: Any) -> bool:
        if isinstance(item, bool):
            return self.config.allow_bool_items
        return isinstance(item, int)
