"""User search API service."""
