"""User-facing entry points for spotimeta."""
