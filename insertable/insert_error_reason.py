from typing import Literal, TypeAlias

InsertErrorReason: TypeAlias = Literal[
    "invalid_item_type",  # Item shape/type does not fit the collection ({k, v} for mappings, ints for ranges)
    "invalid_item_value",  # Type is fine, value is not (e.g. not adjacent to a range's start)
    "full",  # Collection has a fixed capacity that is exhausted
    "unsupported_type",  # No inserter registered for the collection's type
]
