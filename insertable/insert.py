import logging
from typing import Any

import insertable.inserters  # noqa: F401  (registers the built-in inserters)
from insertable.insert_config import InsertConfig
from insertable.inserts import resolve_inserter
from insertable.results.insert_error import InsertError
from insertable.results.insert_result import InsertResult

logger = logging.getLogger(__name__)


def insert(
    collection: Any, item: Any, config: InsertConfig | None = None
) -> InsertResult[Any]:
    """
    Insert a single item into a collection.

    Returns `InsertOk` with a new collection holding the item, or
    `InsertError` with one of the standard reasons:

    - `invalid_item_type`: the item cannot go into this kind of collection
      (e.g. anything but a `(key, value)` tuple into a dict).
    - `invalid_item_value`: the item has the right type but the wrong value
      (e.g. an integer that is not one step before a range's start).
    - `full`: the collection has a fixed capacity that is exhausted.
    - `unsupported_type`: no inserter is registered for the collection.

    The collection passed in is never modified.

    Example:
        ```python
        insert([], 1)  # InsertOk(collection=[1])
        insert([1, 2, 3, 4], 5)  # InsertOk(collection=[5, 1, 2, 3, 4])
        insert({"a": 10, "b": 20}, ("a", 30))  # InsertOk(collection={"a": 30, "b": 20})
        insert({"a": 1, "b": 2}, 42)  # InsertError(reason="invalid_item_type")
        insert({1, 2, 3, 4}, 33)  # InsertOk(collection={1, 2, 3, 4, 33})
        insert(InclusiveRange(first=5, last=10), 4)  # InsertOk(collection=4..10)
        insert(InclusiveRange(first=5, last=10), 3)  # InsertError(reason="invalid_item_value")
        insert(InclusiveRange(first=5, last=10), "oops")  # InsertError(reason="invalid_item_type")
        ```
    """
    config = config or InsertConfig()
    inserter_cls = resolve_inserter(type(collection), config)

    if inserter_cls is None:
        logger.debug(f"No inserter registered for {type(collection).__name__}.")
        return InsertError(reason="unsupported_type")

    return inserter_cls(config=config).insert(collection, item)
