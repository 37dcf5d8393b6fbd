"""Repository helpers for database access."""
