"""Label daily readings as ice-affected or open-water flow."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ice_popsicles.datasources.usgs.client import ICE_QUALIFIER
from ice_popsicles.schemas import ClassifiedObservation, Condition, Observation

if TYPE_CHECKING:
    from collections.abc import Iterable


def classify_observation(obs: Observation) -> ClassifiedObservation | None:
    """
    Classify one reading.

    A reading is ice when its qualifier code is exactly the ice sentinel,
    whatever its value.  Any other code counts as flow.  Readings with no
    value that are not ice are dropped (``None``).
    """
    is_ice = obs.flow_qualifier_code == ICE_QUALIFIER
    if obs.flow_value is None and not is_ice:
        return None
    return ClassifiedObservation(
        **obs.model_dump(),
        is_ice=is_ice,
        condition=Condition.ICE if is_ice else Condition.FLOW,
    )


def classify_observations(observations: Iterable[Observation]) -> list[ClassifiedObservation]:
    """Classify every reading, keeping input order and dropping unusable rows."""
    classified: list[ClassifiedObservation] = []
    for obs in observations:
        result = classify_observation(obs)
        if result is not None:
            classified.append(result)
    return classified


def distinct_site_ids(observations: Iterable[Observation]) -> list[str]:
    """Sorted unique site ids."""
    return sorted({obs.site_id for obs in observations})
