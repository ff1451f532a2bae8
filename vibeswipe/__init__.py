"""VibeSwipe backend: scored venue and event feed."""

__version__ = "0.1.0"
