"""USGS water services data source.

Fetches daily discharge values per state and gage metadata per site from
the NWIS web services (free, no API key).

Public API:
  - daily_values: fetch_state_daily_values, parse_daily_values, observations_to_records
  - sites: fetch_site_info, parse_site_rdb, missing_site_ids, site_info_to_records
  - client: API URLs, sentinels, GageFetchError, SiteInfoError
"""

from ice_popsicles.datasources.usgs.client import (
    ICE_QUALIFIER,
    NO_DATA_VALUE,
    NWIS_DV_URL,
    NWIS_SITE_URL,
    GageFetchError,
    SiteInfoError,
)
from ice_popsicles.datasources.usgs.daily_values import (
    fetch_state_daily_values,
    observations_to_records,
    parse_daily_values,
)
from ice_popsicles.datasources.usgs.sites import (
    fetch_site_info,
    missing_site_ids,
    parse_site_rdb,
    site_info_to_records,
)

__all__ = [
    "ICE_QUALIFIER",
    "NO_DATA_VALUE",
    "NWIS_DV_URL",
    "NWIS_SITE_URL",
    "GageFetchError",
    "SiteInfoError",
    "fetch_site_info",
    "fetch_state_daily_values",
    "missing_site_ids",
    "observations_to_records",
    "parse_daily_values",
    "parse_site_rdb",
    "site_info_to_records",
]
