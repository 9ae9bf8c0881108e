"""Version information for mediafuse."""

__version__ = "0.1.0"
