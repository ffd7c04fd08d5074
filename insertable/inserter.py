from typing import Any

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field

from insertable.insert_config import InsertConfig
from insertable.results.insert_result import InsertResult


class Inserter(BaseModel):
    config: InsertConfig = Field(default_factory=InsertConfig)
    """
    Configuration of the insertion this inserter is running for.
    """

    model_config = ConfigDict(frozen=True)

    def insert(self, collection: Any, item: Any) -> InsertResult[Any]:
        """
        Insert `item` into `collection`, returning the new collection.

        Implementations must never mutate `collection` and must report
        failures by returning an `InsertError` instead of raising.
        """
        raise NotImplementedError("Subclasses must implement this method.")
