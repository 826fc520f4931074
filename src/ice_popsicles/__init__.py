"""Ice Popsicles - how much of each state's river flow is ice-affected in winter.

Architecture::

    datasources/   USGS water services (daily values, site metadata)
    store.py       JSON cache with TTL (raw → reference → derived)
    analysis/      Classify ice/flow readings, aggregate per state/day, Hamilton DAG
    renderers/     Pure data → matplotlib figure (popsicle small multiples)
    reference/     Static tables: state grid layout, date window, plot constants
    flows/         Prefect orchestration (fetch checks freshness, build renders PNG)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → store (cache) → analysis → renderers → PNG
"""

__version__ = "0.1.0"

from ice_popsicles.config import Settings, get_settings  # noqa: E402

__all__ = ["Settings", "__version__", "get_settings"]
