from collections.abc import Set
from typing import Any, override

from insertable.inserter import Inserter
from insertable.inserts import inserts
from insertable.results.insert_error import InsertError
from insertable.results.insert_ok import InsertOk
from insertable.results.insert_result import InsertResult


@inserts(set, frozenset)
class SetInserter(Inserter):
    @override
    def insert(self, collection: Set[Any], item: Any) -> InsertResult[Set[Any]]:
        try:
            singleton = frozenset((item,))
        except TypeError:
            # unhashable items can never be members
            return InsertError(reason="invalid_item_type")

        return InsertOk(collection=collection | singleton)
