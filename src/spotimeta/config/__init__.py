"""Configuration loading and path discovery for spotimeta."""
