"""
Prefect flow for fetching gage data from the USGS water services.

One daily-values pull per state, cached per state and date window, then one
site-metadata pull for every gage seen.

Run locally:
    python -m ice_popsicles.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m ice_popsicles.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from ice_popsicles.analysis.classify import distinct_site_ids
from ice_popsicles.config import get_settings
from ice_popsicles.datasources import usgs
from ice_popsicles.schemas import Observation, SiteInfo
from ice_popsicles.store import DataStore

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

SITES_PATH = Path("reference/sites.json")
DV_TTL = timedelta(hours=24)
SITES_TTL = timedelta(days=30)


def daily_values_path(state_code: str, start: date, end: date) -> Path:
    """Store path for one state's pull over one window."""
    return Path(f"raw/dv/{state_code.upper()}_{start.isoformat()}_{end.isoformat()}.json")


@task(name="fetch-state-daily-values")
def fetch_state_daily_values(state_code: str, start: date, end: date) -> list[Observation]:
    """Fetch daily discharge for every stream gage in one state."""
    return usgs.fetch_state_daily_values(state_code, start, end)


@task(name="save-state-daily-values")
def save_state_daily_values(
    state_code: str, start: date, end: date, observations: list[Observation]
) -> Path:
    """Save one state's observations via store."""
    return store.write(
        daily_values_path(state_code, start, end),
        usgs.observations_to_records(observations),
        source="waterservices.usgs.gov (dv)",
        valid_until=datetime.now(UTC) + DV_TTL,
        state_code=state_code.upper(),
        start_date=start.isoformat(),
        end_date=end.isoformat(),
    )


@task(name="fetch-site-info")
def fetch_site_info(site_ids: list[str], batch_size: int = 100) -> list[SiteInfo]:
    """Fetch names and locations for the given gages."""
    return usgs.fetch_site_info(site_ids, batch_size=batch_size)


@task(name="save-site-info")
def save_site_info(sites: list[SiteInfo]) -> Path:
    """Save site metadata via store."""
    return store.write(
        SITES_PATH,
        usgs.site_info_to_records(sites),
        source="waterservices.usgs.gov (site)",
        valid_until=datetime.now(UTC) + SITES_TTL,
    )


def _cached_site_ids() -> set[str]:
    records = store.read(SITES_PATH) or []
    return {r["site_id"] for r in records}


@flow(name="fetch-data", log_prints=True)
def fetch_all(
    states: list[str] | None = None,
    start: date | None = None,
    end: date | None = None,
) -> dict[str, Any]:
    """
    Fetch daily values for every state, then site metadata.

    Checks freshness before fetching and skips states that are still valid.
    A failed state aborts the flow unless ``skip_failed_states`` is set.
    """
    settings = get_settings()
    states = [s.upper() for s in (states or settings.states)]
    start = start or settings.start_date
    end = end or settings.end_date

    results: dict[str, Any] = {"fetched": [], "skipped": [], "failed": []}
    all_obs: list[Observation] = []

    # --- Daily values, one pull per state ---
    for state in states:
        path = daily_values_path(state, start, end)
        if store.is_fresh(path):
            print(f"{state}: daily values are fresh, skipping fetch.")
            records = store.read(path) or []
            all_obs.extend(Observation.model_validate(r) for r in records)
            results["skipped"].append(state)
            continue

        print(f"{state}: fetching daily values {start} → {end}...")
        try:
            observations = fetch_state_daily_values(state, start, end)
        except usgs.GageFetchError as exc:
            if not settings.skip_failed_states:
                raise
            print(f"Warning: {exc}. Continuing without {state}.")
            results["failed"].append(state)
            continue

        output_path = save_state_daily_values(state, start, end, observations)
        print(f"{state}: saved {len(observations)} readings to {output_path}")
        all_obs.extend(observations)
        results["fetched"].append(state)

    results["observations"] = len(all_obs)

    # --- Site metadata for every gage seen ---
    site_ids = distinct_site_ids(all_obs)
    results["sites"] = len(site_ids)
    if not site_ids:
        print("No gages found, skipping site metadata.")
        results["missing_sites"] = 0
        return results

    if store.is_fresh(SITES_PATH) and set(site_ids) <= _cached_site_ids():
        print("Site metadata is fresh, skipping fetch.")
        results["missing_sites"] = 0
        return results

    print(f"Fetching site metadata for {len(site_ids)} gages...")
    sites = fetch_site_info(site_ids, batch_size=settings.site_batch_size)
    sites_path = save_site_info(sites)
    missing = usgs.missing_site_ids(site_ids, sites)
    if missing:
        print(f"Warning: no site metadata for {len(missing)} gages: {', '.join(missing[:10])}")
    print(f"Saved metadata for {len(sites)} gages to {sites_path}")
    results["missing_sites"] = len(missing)

    return results


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
