"""
Domain models for ice popsicles.

Pydantic models for gage readings and the tables derived from them.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

import datetime as dt
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Gage readings
# =============================================================================


class Condition(StrEnum):
    """What a daily reading represents."""

    ICE = "ice"
    FLOW = "flow"


class Observation(BaseModel):
    """One daily-value reading from one gage, tagged with the state it was fetched for."""

    model_config = ConfigDict(frozen=True)

    site_id: str
    date: dt.date
    flow_value: float | None = None
    flow_qualifier_code: str = ""
    state_code: str = Field(..., min_length=2, max_length=2)


class ClassifiedObservation(Observation):
    """An observation labelled ice or flow.

    Only readings with a value, or readings flagged as ice, are ever classified.
    """

    is_ice: bool
    condition: Condition

    @model_validator(mode="after")
    def _has_value_or_ice(self) -> ClassifiedObservation:
        if self.flow_value is None and not self.is_ice:
            msg = f"{self.site_id} {self.date}: no flow value and not ice-affected"
            raise ValueError(msg)
        return self


class SiteInfo(BaseModel):
    """Display name and location of a gage."""

    model_config = ConfigDict(frozen=True)

    site_id: str
    display_name: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


# =============================================================================
# Aggregates
# =============================================================================


class DailyStateSummary(BaseModel):
    """Share of a state's gages reporting open-water flow on one day."""

    model_config = ConfigDict(frozen=True)

    state_code: str
    date: dt.date
    total_count: int = Field(..., ge=1)
    non_ice_count: int = Field(..., ge=0)
    percent_not_ice: float = Field(..., ge=0, le=100)

    @model_validator(mode="after")
    def _counts_consistent(self) -> DailyStateSummary:
        if self.non_ice_count > self.total_count:
            msg = (
                f"{self.state_code} {self.date}: non_ice_count {self.non_ice_count} "
                f"exceeds total_count {self.total_count}"
            )
            raise ValueError(msg)
        return self
