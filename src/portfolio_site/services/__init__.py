"""Content queries and demo services."""
