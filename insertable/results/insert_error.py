from __future__ import annotations

from typing import Any, Literal, NoReturn

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field

from insertable.errors.insertion_error import InsertionError
from insertable.insert_error_reason import InsertErrorReason


class InsertError(BaseModel):
    """
    Failed insertion, carrying the reason it failed.

    Built-in inserters only ever return one of the standard
    `InsertErrorReason` codes. Inserters registered by consumers may return
    any other reason, which is kept untouched.
    """

    type: Literal["error"] = Field(default="error")

    reason: InsertErrorReason | Any
    """
    Why the item could not be inserted.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    __match_args__ = ("reason",)

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise InsertionError(self.reason)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def to_tuple(self) -> tuple[Literal["error"], Any]:
        return ("error", self.reason)
