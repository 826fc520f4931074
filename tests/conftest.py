"""Shared fixtures: Prefect test harness and sample USGS payloads."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

import pytest
from prefect.testing.utilities import prefect_test_harness

from ice_popsicles.config import get_settings
from ice_popsicles.schemas import Observation


@pytest.fixture(autouse=True, scope="session")
def prefect_harness() -> Iterator[None]:
    """Run flows against a throwaway Prefect backend."""
    with prefect_test_harness():
        yield


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _make_obs(
    state: str = "WI",
    day: date = date(2020, 12, 1),
    value: float | None = 100.0,
    code: str = "P",
    site: str = "05340500",
) -> Observation:
    """Build an observation with sensible defaults."""
    return Observation(
        site_id=site,
        date=day,
        flow_value=value,
        flow_qualifier_code=code,
        state_code=state,
    )


@pytest.fixture
def make_obs() -> Callable[..., Observation]:
    """Factory for observations with sensible defaults."""
    return _make_obs


@pytest.fixture
def dv_payload() -> dict[str, Any]:
    """WaterML-JSON daily-values response with two gages."""
    return {
        "value": {
            "timeSeries": [
                {
                    "sourceInfo": {
                        "siteName": "ST. CROIX RIVER AT ST. CROIX FALLS, WI",
                        "siteCode": [
                            {"value": "05340500", "network": "NWIS", "agencyCode": "USGS"}
                        ],
                    },
                    "values": [
                        {
                            "value": [
                                {
                                    "value": "4210",
                                    "qualifiers": ["P"],
                                    "dateTime": "2020-12-01T00:00:00.000",
                                },
                                {
                                    "value": "-999999",
                                    "qualifiers": ["P", "Ice"],
                                    "dateTime": "2020-12-02T00:00:00.000",
                                },
                            ]
                        }
                    ],
                },
                {
                    "sourceInfo": {
                        "siteName": "WOLF RIVER AT NEW LONDON, WI",
                        "siteCode": [
                            {"value": "04079000", "network": "NWIS", "agencyCode": "USGS"}
                        ],
                    },
                    "values": [
                        {
                            "value": [
                                {
                                    "value": "-999999",
                                    "qualifiers": ["P", "Eqp"],
                                    "dateTime": "2020-12-01T00:00:00.000",
                                },
                                {
                                    "value": "1890.5",
                                    "qualifiers": ["A"],
                                    "dateTime": "2020-12-02T00:00:00.000",
                                },
                            ]
                        }
                    ],
                },
            ]
        }
    }


SITE_RDB = "\n".join(
    [
        "#",
        "# US Geological Survey",
        "# retrieved: 2021-04-02",
        "#",
        "agency_cd\tsite_no\tstation_nm\tsite_tp_cd\tdec_lat_va\tdec_long_va\tcoord_acy_cd",
        "5s\t15s\t50s\t7s\t16s\t16s\t1s",
        "USGS\t05340500\tST. CROIX RIVER AT ST. CROIX FALLS, WI\tST\t45.40718\t-92.64686\tS",
        "USGS\t04079000\tWOLF RIVER AT NEW LONDON, WI\tST\t44.39165\t-88.74038\tS",
        "",
    ]
)


@pytest.fixture
def site_rdb() -> str:
    return SITE_RDB
