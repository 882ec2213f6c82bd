"""Version information for neo-uploads."""

__version__ = "0.1.0"
