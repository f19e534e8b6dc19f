"""Message log statistics dashboard."""
