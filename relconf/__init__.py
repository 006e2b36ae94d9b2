"""Release configuration loader for Android builds."""

__version__ = "0.1.0"
