"""Data models for requests, upstream payloads and responses."""
