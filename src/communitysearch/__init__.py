"""Community Search Adapter — Knowledge-base search reshaped for community platforms."""

__version__ = "0.1.0"
