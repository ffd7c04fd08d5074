"""
Insertable: insert elements into a collection, one at a time.

Unlike bulk collecting (`list.extend`, `dict.update`, set unions of whole
iterables), inserting a single item never wraps it into an iterable first
and never needs a finishing pass over the result. Lists, for example,
naturally receive the new item at their head.

Every insertion returns a new collection inside an `InsertOk`, or an
`InsertError` with a reason code. The original collection is never mutated.

Example:
```python
from insertable import InsertError, InsertOk, insert

match insert({"a": 1}, ("b", 2)):
    case InsertOk(collection):
        print(collection)  # {'a': 1, 'b': 2}
    case InsertError(reason):
        print(f"could not insert: {reason}")
```
"""

from .errors.insertion_error import InsertionError
from .insert import insert
from .insert_config import InsertConfig
from .insert_error_reason import InsertErrorReason
from .inserter import Inserter
from .inserts import inserter_registry, inserts, resolve_inserter
from .ranges.inclusive_range import InclusiveRange
from .results.insert_error import InsertError
from .results.insert_ok import InsertOk
from .results.insert_result import InsertResult

__all__: list[str] = [
    "InclusiveRange",
    "InsertConfig",
    "InsertError",
    "InsertErrorReason",
    "InsertOk",
    "InsertResult",
    "Inserter",
    "InsertionError",
    "insert",
    "inserter_registry",
    "inserts",
    "resolve_inserter",
]
