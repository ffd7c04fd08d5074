import logging
from collections import deque
from typing import Any, override

from insertable.inserter import Inserter
from insertable.inserts import inserts
from insertable.results.insert_error import InsertError
from insertable.results.insert_ok import InsertOk
from insertable.results.insert_result import InsertResult

logger = logging.getLogger(__name__)


@inserts(list, tuple, deque)
class SequenceInserter(Inserter):
    """
    Inserts at the head of the sequence.

    The item becomes the new first element, followed by the original
    elements in order. A deque that already holds `maxlen` elements is
    full: prepending would push its last element out.
    """

    @override
    def insert(
        self, collection: list[Any] | tuple[Any, ...] | deque[Any], item: Any
    ) -> InsertResult[list[Any] | tuple[Any, ...] | deque[Any]]:
        if isinstance(collection, deque):
            if collection.maxlen is not None and len(collection) >= collection.maxlen:
                logger.debug(f"Deque is full at maxlen={collection.maxlen}.")
                return InsertError(reason="full")

            new_deque = deque(collection, maxlen=collection.maxlen)
            new_deque.appendleft(item)
            return InsertOk(collection=new_deque)

        if isinstance(collection, tuple):
            return InsertOk(collection=(item, *collection))

        return InsertOk(collection=[item, *collection])
