"""Multi-source trend scoring engine."""

__version__ = "2.0.0"
