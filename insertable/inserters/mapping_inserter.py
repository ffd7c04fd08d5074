import copy
from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Any, override

from insertable.inserter import Inserter
from insertable.inserts import inserts
from insertable.results.insert_error import InsertError
from insertable.results.insert_ok import InsertOk
from insertable.results.insert_result import InsertResult


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


@inserts(dict, MappingProxyType)
class MappingInserter(Inserter):
    """
    Binds a key to a value.

    Only `(key, value)` tuples can be inserted; anything else is
    `invalid_item_type`. An existing value for the key is overwritten.
    The concrete mapping type is kept, so an `OrderedDict` stays an
    `OrderedDict` and a `defaultdict` keeps its default factory.
    """

    @override
    def insert(
        self, collection: Mapping[Hashable, Any], item: Any
    ) -> InsertResult[Mapping[Hashable, Any]]:
        if not isinstance(item, tuple) or len(item) != 2:
            return InsertError(reason="invalid_item_type")

        key, value = item
        if not _is_hashable(key):
            return InsertError(reason="invalid_item_type")

        if isinstance(collection, MappingProxyType):
            return InsertOk(collection=MappingProxyType({**collection, key: value}))

        new_mapping = copy.copy(collection)
        new_mapping[key] = value
        return InsertOk(collection=new_mapping)
