"""Gage names and locations from the NWIS site service (RDB format)."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

import pandas as pd
import requests

from ice_popsicles.datasources.usgs.client import NWIS_SITE_URL, SiteInfoError
from ice_popsicles.schemas import SiteInfo
from ice_popsicles.services.http import session

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def parse_site_rdb(text: str) -> list[SiteInfo]:
    """
    Parse an RDB site listing into ``SiteInfo`` rows.

    RDB is tab-separated with ``#`` comment lines and a column-format row
    (``5s``, ``15s``, ...) directly under the header, which is dropped.
    Rows without coordinates are skipped.
    """
    lines = [line for line in text.splitlines() if line and not line.startswith("#")]
    if len(lines) < 2:
        return []

    df = pd.read_csv(StringIO("\n".join(lines)), sep="\t", dtype=str)
    df = df[~df["agency_cd"].str.fullmatch(r"\d+s", na=False)]
    df = df.dropna(subset=["site_no", "dec_lat_va", "dec_long_va"]).copy()
    df["station_nm"] = df["station_nm"].fillna(df["site_no"]).str.strip()

    return [
        SiteInfo(
            site_id=row["site_no"],
            display_name=row["station_nm"],
            latitude=float(row["dec_lat_va"]),
            longitude=float(row["dec_long_va"]),
        )
        for row in df.to_dict(orient="records")
    ]


def _batches(items: Sequence[str], size: int) -> Iterable[Sequence[str]]:
    for i in range(0, len(items), size):
        yield items[i : i + size]


def fetch_site_info(site_ids: Iterable[str], batch_size: int = 100) -> list[SiteInfo]:
    """
    Fetch display name and lat/lon for each site id.

    Ids are queried ``batch_size`` at a time to keep URLs short.  A 404 means
    none of the ids in that batch are known and yields no rows.

    Returns:
        One ``SiteInfo`` per id found, in input order, without duplicates.

    Raises:
        SiteInfoError: On any other HTTP or network failure.
    """
    ids = list(dict.fromkeys(site_ids))
    found: dict[str, SiteInfo] = {}

    for batch in _batches(ids, batch_size):
        params: dict[str, Any] = {
            "format": "rdb",
            "sites": ",".join(batch),
            "siteStatus": "all",
        }
        try:
            resp = session.get(NWIS_SITE_URL, params=params)
            if resp.status_code == 404:
                continue
            resp.raise_for_status()
        except requests.RequestException as exc:
            msg = f"Site info fetch failed for {len(batch)} sites: {exc}"
            raise SiteInfoError(msg) from exc

        for info in parse_site_rdb(resp.text):
            found.setdefault(info.site_id, info)

    return [found[i] for i in ids if i in found]


def missing_site_ids(requested: Iterable[str], found: Iterable[SiteInfo]) -> list[str]:
    """Return requested ids with no metadata, sorted."""
    have = {info.site_id for info in found}
    return sorted(set(requested) - have)


def site_info_to_records(sites: list[SiteInfo]) -> list[dict[str, Any]]:
    """Serialize site metadata to JSON-compatible dicts for the store."""
    return [info.model_dump(mode="json") for info in sites]
