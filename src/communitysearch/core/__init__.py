"""Core pipeline — query normalization, upstream search and result projection."""
