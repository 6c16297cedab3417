"""
Prefect flows for the scan pipeline.

Flows:
- scan: Download gallery pages, extract observations, dedupe, sort, save

Usage (local):
    python -m butterfly_gallery.flows.scan

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'scan-gallery/default'
"""
