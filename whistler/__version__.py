"""Version information for whistler."""

__version__ = "0.1.0"
