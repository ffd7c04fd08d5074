"""
Tagged results of an insertion.

Insertion never raises for an item that cannot be inserted. Instead it
returns either an `InsertOk` carrying the new collection or an `InsertError`
carrying the reason, so callers branch on the result with plain control flow
(or structural pattern matching).
"""

from .insert_error import InsertError
from .insert_ok import InsertOk
from .insert_result import InsertResult

__all__: list[str] = ["InsertError", "InsertOk", "InsertResult"]
