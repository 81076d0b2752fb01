"""Size report model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SizeReport(BaseModel):
    """Breakdown of how a raw length maps onto packed cells.

    Attributes:
        raw_length: Number of raw bytes
        packed_length: Number of 7-bit cells (and encoded characters)
        full_groups: Complete groups of 7 raw bytes
        remainder: Raw bytes in the trailing partial group
        overhead: Extra cells compared to the raw length
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    raw_length: int = Field(ge=0)
    packed_length: int = Field(ge=0)
    full_groups: int = Field(ge=0)
    remainder: int = Field(ge=0, le=6)
    overhead: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_consistent(self) -> SizeReport:
        if self.full_groups * 7 + self.remainder != self.raw_length:
            raise ValueError("full_groups and remainder do not add up to raw_length")
        if self.packed_length - self.raw_length != self.overhead:
            raise ValueError("overhead must equal packed_length - raw_length")
        return self
