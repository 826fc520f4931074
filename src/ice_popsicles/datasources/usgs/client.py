"""USGS water services constants and errors.

API docs:
  - Daily values: https://waterservices.usgs.gov/docs/dv-service/
  - Site service: https://waterservices.usgs.gov/docs/site-service/
"""

from __future__ import annotations

NWIS_DV_URL = "https://waterservices.usgs.gov/nwis/dv/"
NWIS_SITE_URL = "https://waterservices.usgs.gov/nwis/site/"

# Value NWIS reports when a day has no measurement (e.g. ice, equipment).
NO_DATA_VALUE = -999999.0

# Qualifier code, space-joined, for a provisional ice-affected reading.
ICE_QUALIFIER = "P Ice"

# Stream sites only.
SITE_TYPE = "ST"


class GageFetchError(RuntimeError):
    """Daily values for a state could not be fetched."""

    def __init__(self, state_code: str, reason: str) -> None:
        self.state_code = state_code
        self.reason = reason
        super().__init__(f"Daily values fetch failed for {state_code}: {reason}")


class SiteInfoError(RuntimeError):
    """The site service returned an error for a batch of site ids."""
