"""EcoLive environmental monitoring dashboard."""

__version__ = "0.1.0"
