"""Platform adapters: logging and the Spotify Metadata web service."""
