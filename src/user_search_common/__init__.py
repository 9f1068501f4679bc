"""Framework-independent core of the user search service."""
