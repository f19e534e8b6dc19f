"""Output sinks for the summary text and the chart."""
