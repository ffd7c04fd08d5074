from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field


class InsertConfig(BaseModel):
    resolve_subclasses: bool = Field(default=True)
    """
    Whether subclasses of a registered collection type dispatch to the
    inserter of their registered base class (e.g. `OrderedDict` -> `dict`).
    When False, only the exact type of the collection is looked up.
    """

    allow_bool_items: bool = Field(default=False)
    """
    Whether `True` / `False` count as integers when inserting into ranges.
    """

    model_config = ConfigDict(frozen=True)
