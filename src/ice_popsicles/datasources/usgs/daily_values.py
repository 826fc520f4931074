"""Statewide daily discharge values from the NWIS daily-values service."""

from __future__ import annotations

from datetime import date
from typing import Any

import requests

from ice_popsicles.datasources.usgs.client import (
    NO_DATA_VALUE,
    NWIS_DV_URL,
    SITE_TYPE,
    GageFetchError,
)
from ice_popsicles.reference.window import DAILY_MEAN_STAT_CD, DISCHARGE_PARAMETER_CD
from ice_popsicles.schemas import Observation
from ice_popsicles.services.http import session

# =============================================================================
# Parsing
# =============================================================================


def _parse_value(raw: Any) -> float | None:
    """Convert an NWIS value string to a float, or None for no-data."""
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if value == NO_DATA_VALUE:
        return None
    return value


def _qualifier_code(point: dict[str, Any]) -> str:
    qualifiers = point.get("qualifiers") or []
    return " ".join(str(q) for q in qualifiers)


def parse_daily_values(payload: dict[str, Any], state_code: str) -> list[Observation]:
    """
    Flatten a WaterML-JSON daily-values response into observations.

    Each point becomes one row tagged with ``state_code``.  A gage measured by
    several methods (e.g. left and right bank) has one ``values`` block per
    method; only the first reading for a site and date is kept.  No-data
    sentinels become ``None`` and the qualifier list is joined with spaces
    (``["P", "Ice"]`` -> ``"P Ice"``).
    """
    state = state_code.upper()
    rows: list[Observation] = []
    seen: set[tuple[str, date]] = set()
    for ts in payload.get("value", {}).get("timeSeries", []):
        site_codes = ts.get("sourceInfo", {}).get("siteCode") or [{}]
        site_id = site_codes[0].get("value")
        if not site_id:
            continue
        for block in ts.get("values", []):
            for point in block.get("value", []):
                stamp = point.get("dateTime", "")
                if not stamp:
                    continue
                day = date.fromisoformat(stamp[:10])
                if (site_id, day) in seen:
                    continue
                seen.add((site_id, day))
                rows.append(
                    Observation(
                        site_id=site_id,
                        date=day,
                        flow_value=_parse_value(point.get("value")),
                        flow_qualifier_code=_qualifier_code(point),
                        state_code=state,
                    )
                )
    return rows


# =============================================================================
# Fetching
# =============================================================================


def fetch_state_daily_values(state_code: str, start: date, end: date) -> list[Observation]:
    """
    Fetch daily mean discharge for every stream gage in a state.

    Args:
        state_code: Two-letter state code.
        start: First day of the window (inclusive).
        end: Last day of the window (inclusive).

    Returns:
        Observations tagged with ``state_code``.

    Raises:
        GageFetchError: On network/HTTP failure or when the state has no data.
    """
    state = state_code.upper()
    params: dict[str, str] = {
        "format": "json",
        "stateCd": state.lower(),
        "parameterCd": DISCHARGE_PARAMETER_CD,
        "statCd": DAILY_MEAN_STAT_CD,
        "siteType": SITE_TYPE,
        "startDT": start.isoformat(),
        "endDT": end.isoformat(),
    }

    try:
        resp = session.get(NWIS_DV_URL, params=params)
        resp.raise_for_status()
        payload: dict[str, Any] = resp.json()
    except requests.RequestException as exc:
        raise GageFetchError(state, str(exc)) from exc
    except ValueError as exc:
        raise GageFetchError(state, f"invalid JSON response: {exc}") from exc

    rows = parse_daily_values(payload, state)
    if not rows:
        raise GageFetchError(state, "empty result")
    return rows


def observations_to_records(observations: list[Observation]) -> list[dict[str, Any]]:
    """Serialize observations to JSON-compatible dicts for the store."""
    return [obs.model_dump(mode="json") for obs in observations]
