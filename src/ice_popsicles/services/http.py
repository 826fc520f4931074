"""
HTTP session used by the USGS water services fetchers.

The NWIS daily-values and site services are slow for statewide queries and
answer 503 when busy.  Every fetcher shares one session that retries those
responses with exponential backoff and applies a long default timeout.

    from ice_popsicles.services.http import session

    resp = session.get(NWIS_DV_URL, params={"stateCd": "wi", ...})
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ice_popsicles import __version__

USER_AGENT = f"ice-popsicles/{__version__}"

#: Statuses NWIS returns when throttling or overloaded.
NWIS_RETRY_STATUSES = (429, 502, 503, 504)

DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,
    status_forcelist=NWIS_RETRY_STATUSES,
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # callers check status themselves
)

#: Seconds; a full winter of statewide daily values can take over a minute.
DEFAULT_TIMEOUT = 120


def _apply_default_timeout(s: requests.Session, timeout: float) -> None:
    send = s.send

    def send_with_timeout(request: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(request, **kwargs)  # type: ignore[arg-type]

    s.send = send_with_timeout  # type: ignore[method-assign]


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a session for the water services.

    Args:
        retry: Retry policy for both schemes; ``DEFAULT_RETRY`` when omitted.
        timeout: Used for any request that does not pass its own ``timeout``.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers.update({"User-Agent": USER_AGENT, "Accept-Encoding": "gzip"})
    _apply_default_timeout(s, timeout)
    return s


session: requests.Session = create_session()
