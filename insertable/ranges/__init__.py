from .inclusive_range import InclusiveRange

__all__: list[str] = ["InclusiveRange"]
