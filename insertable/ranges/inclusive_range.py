"""
Inclusive integer ranges.

Python's native `range` is half-open: `range(5, 10)` stops before 10.
`InclusiveRange` describes the progression by its first and last elements
instead, which is the shape the range inserter extends: inserting the
integer one step before `first` moves `first` backwards and keeps `last`.

Example:
```python
from insertable.ranges.inclusive_range import InclusiveRange

r = InclusiveRange(first=5, last=10)
str(r)  # "5..10"
r.step  # 1
list(r.to_range())  # [5, 6, 7, 8, 9, 10]

InclusiveRange(first=3, last=1).step  # -1
```
"""

from __future__ import annotations

from typing import Any

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field
from rsb.models.model_validator import model_validator


class InclusiveRange(BaseModel):
    first: int = Field(
        description="First element of the range.",
    )

    last: int = Field(
        description="Boundary the range progresses towards, inclusive.",
    )

    step: int = Field(
        description="Distance between consecutive elements. Derived from the direction when omitted.",
    )

    model_config = ConfigDict(frozen=True, strict=True)

    @model_validator(mode="before")
    @classmethod
    def derive_step(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("step") is None:
            first, last = data.get("first"), data.get("last")
            if isinstance(first, int) and isinstance(last, int):
                return {**data, "step": 1 if first <= last else -1}
        return data

    @model_validator(mode="after")
    def validate_step(self) -> InclusiveRange:
        if self.step == 0:
            raise ValueError("step must be a nonzero integer")

        if self.first != self.last and (self.step > 0) != (self.last > self.first):
            raise ValueError(
                f"step {self.step} does not progress from {self.first} towards {self.last}"
            )
        return self

    @classmethod
    def from_range(cls, native: range) -> InclusiveRange:
        if len(native) == 0:
            raise ValueError(f"cannot build an inclusive range from empty {native!r}")

        return cls(first=native[0], last=native[-1], step=native.step)

    def to_range(self) -> range:
        direction = 1 if self.step > 0 else -1
        return range(self.first, self.last + direction, self.step)

    def to_list(self) -> list[int]:
        return list(self.to_range())

    def __len__(self) -> int:
        return len(self.to_range())

    def __contains__(self, value: object) -> bool:
        return value in self.to_range()

    def __str__(self) -> str:
        if abs(self.step) == 1 and (self.step > 0) == (self.first <= self.last):
            return f"{self.first}..{self.last}"
        return f"{self.first}..{self.last}//{self.step}"
