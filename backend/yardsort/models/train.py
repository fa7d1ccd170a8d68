# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Train Data Models
Pydantic models for an incoming car stream, the API request bodies
that carry it, and the result of one sequencing search.
"""

from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictInt,
    model_validator,
)

# A car is any finite number. Strict so "7" and True are rejected
# rather than coerced.
Car = Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]


class CarStream(BaseModel):
    """
    Validated, immutable input for one search.
    Cars are indexed 0..N-1 in arrival order.
    """
    model_config = ConfigDict(frozen=True)

    cars: tuple[Car, ...] = Field(..., min_length=1, description="Cars in arrival order")
    # Redundant count header from framed input; checked when present
    declared_count: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_declared_count(self) -> CarStream:
        if self.declared_count is not None and self.declared_count != len(self.cars):
            raise ValueError(
                f"declared car count {self.declared_count} does not match "
                f"the {len(self.cars)} cars supplied"
            )
        return self

    def __len__(self) -> int:
        return len(self.cars)


# ─── API Request/Response Schemas ────────────────────────────────────────────

class SortRequest(BaseModel):
    """Request body for POST /sort."""
    cars: list[Car] = Field(..., min_length=1, description="Cars in arrival order")
    declared_count: Optional[int] = Field(
        None, description="Optional count header; must equal len(cars) when given"
    )


class FramedSortRequest(BaseModel):
    """Request body for POST /sort/framed. raw[0] is the declared car count."""
    raw: list[Car] = Field(..., min_length=1)


class SortResult(BaseModel):
    """Outcome of one sequencing search."""
    car_count: int = Field(..., ge=1)
    longest_train: int = Field(..., ge=0)
    discarded: int = Field(..., ge=0)
    # One winning assembly, front to back
    assembly: list[Car] = Field(default_factory=list)
    # True when a zero-discard assembly ended the search early
    perfect: bool = False
    nodes_visited: int = 0
    elapsed_ms: float = 0.0
