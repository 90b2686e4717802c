"""Search endpoints."""
