"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, errors
    └── {feature}.py      # Fetch + parse functions (one per endpoint/concept)

Fetch functions use the shared session from ``services/http.py``, return
pydantic models from ``schemas.py`` and raise a datasource error on failure.
They are wired into the pipeline as ``@task``s in ``flows/fetch.py``, which
also picks the store path and TTL.
"""
