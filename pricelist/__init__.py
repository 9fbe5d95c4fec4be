"""Core (UI-agnostic) price list logic.

This package contains:
- sheet source configuration
- CSV fetch over HTTP (requests)
- row parsing and normalization into typed records
- filter, sort and summary helpers for the dashboard (pandas)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
