"""Version information for podctl."""

__version__ = "0.1.0"
