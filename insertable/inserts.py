"""
Inserter Registry

This module maps collection types to the `Inserter` classes that know how to
insert a single item into them. It uses a decorator to register inserter
classes with the collection types they handle, the same way for the built-in
variants and for any variant a consumer adds.

The main components are:
1. `inserter_registry`: A dictionary mapping collection types to inserter classes
2. `inserts` decorator: Registers an inserter class for one or more collection types
3. `resolve_inserter`: Finds the inserter for a collection type, optionally along its MRO
"""

import logging
from collections.abc import Callable, MutableMapping

from insertable.insert_config import InsertConfig
from insertable.inserter import Inserter

logger = logging.getLogger(__name__)

inserter_registry: MutableMapping[type, type[Inserter]] = {}
"""
Global registry mapping collection types to their respective Inserter classes.

This dictionary is populated by the `@inserts` decorator.
"""


def inserts[InserterT: Inserter](
    *collection_types: type,
) -> Callable[[type[InserterT]], type[InserterT]]:
    """
    Decorator to register Inserter subclasses for specific collection types.

    Args:
        *collection_types (type): One or more collection types this inserter handles.

    Returns:
        Callable: A decorator function that registers the inserter class and returns it unmodified.

    Example:
        ```python
        from insertable.inserter import Inserter
        from insertable.inserts import inserts
        from insertable.results.insert_ok import InsertOk

        @inserts(MyStack)
        class MyStackInserter(Inserter):
            def insert(self, collection: MyStack, item: Any) -> InsertResult[MyStack]:
                return InsertOk(collection=collection.push(item))
        ```

    Note:
        When multiple inserters are registered for the same type, the last one
        registered will be used. This allows overriding the built-in inserters.
    """

    def decorator(
        inserter_cls: type[InserterT],
    ) -> type[InserterT]:
        for collection_type in collection_types:
            previous = inserter_registry.get(collection_type)
            if previous is not None and previous is not inserter_cls:
                logger.debug(
                    f"Replacing inserter {previous.__name__} for {collection_type.__name__} "
                    f"with {inserter_cls.__name__}"
                )
            inserter_registry[collection_type] = inserter_cls
        return inserter_cls

    return decorator


def resolve_inserter(
    collection_type: type, config: InsertConfig | None = None
) -> type[Inserter] | None:
    """Find the inserter registered for `collection_type`, or None."""
    config = config or InsertConfig()

    if not config.resolve_subclasses:
        return inserter_registry.get(collection_type)

    for base in collection_type.__mro__:
        inserter_cls = inserter_registry.get(base)
        if inserter_cls is not None:
            return inserter_cls

    return None
