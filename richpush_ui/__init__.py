"""UI automation suite for the Rich Push Sample application."""

__version__ = "1.0.0"
