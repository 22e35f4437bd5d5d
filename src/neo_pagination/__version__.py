"""Version information for neo-pagination."""

__version__ = "1.0.0"
