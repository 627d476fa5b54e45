"""Selection range domain model.

SelectionRange is the inclusive [start_index, end_index] window a range
selector exposes over an ordered series.  Series-dependent invariants
(upper bound, minimum span) are enforced by RangeSelector, which knows N.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SelectionRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)

    @model_validator(mode="after")
    def _valid_order(self) -> SelectionRange:
        if self.start_index > self.end_index:
            raise ValueError(
                f"start_index ({self.start_index}) must not exceed end_index ({self.end_index})"
            )
        return self

    @property
    def span(self) -> int:
        return self.end_index - self.start_index

    def __len__(self) -> int:
        return self.span + 1
