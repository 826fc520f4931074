"""
Prefect flows for the data pipeline.

Flows:
- fetch: Download daily values per state and site metadata from USGS
- build: Classify, aggregate and render the popsicle PNG

Usage (local):
    python -m ice_popsicles.flows.fetch
    python -m ice_popsicles.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'fetch-data/default'
"""
