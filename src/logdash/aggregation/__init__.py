"""Aggregation of fetched statistics into dashboard output.

- Validates raw payloads against their expected shapes
- Joins per-day series and derives secondary metrics
- Forbidden: HTTP calls outside the aggregator's fetch step, rendering
"""
