"""Configuration for the trend monitor."""

from trend_monitor.config.settings import Settings

__all__ = ["Settings"]
