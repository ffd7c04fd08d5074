from typing import Literal

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field


class InsertOk[T](BaseModel):
    """
    Successful insertion, carrying the new collection.

    The collection is stored as-is, without any validation or coercion,
    so `result.collection` is exactly the value the inserter built.

    Example:
        ```python
        match insert([1, 2], 0):
            case InsertOk(collection):
                print(collection)  # [0, 1, 2]
            case InsertError(reason):
                print(reason)
        ```
    """

    type: Literal["ok"] = Field(default="ok")

    collection: T
    """
    The new collection, with the item inserted.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    __match_args__ = ("collection",)

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.collection

    def unwrap_or(self, default: T) -> T:
        return self.collection

    def to_tuple(self) -> tuple[Literal["ok"], T]:
        return ("ok", self.collection)
