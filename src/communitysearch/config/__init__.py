"""Configuration layer."""

from communitysearch.config.settings import Settings

__all__ = ["Settings"]
