"""
Built-in inserters.

Importing this package registers the inserters for the four built-in
collection variants: sequences, mappings, sets and integer ranges.
"""

from .mapping_inserter import MappingInserter
from .range_inserter import RangeInserter
from .sequence_inserter import SequenceInserter
from .set_inserter import SetInserter

__all__: list[str] = [
    "MappingInserter",
    "RangeInserter",
    "SequenceInserter",
    "SetInserter",
]
