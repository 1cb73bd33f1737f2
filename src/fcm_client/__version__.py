"""Version information for fcm-client."""

__version__ = "0.3.0"
