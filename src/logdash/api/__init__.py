"""API module for the dashboard host.

- Serves the dashboard page and runs one aggregation per page load
- Forbidden: metric derivation, payload shaping beyond the chart config
"""
