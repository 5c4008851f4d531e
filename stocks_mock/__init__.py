"""Mock quotes API serving a static stock catalog."""

__version__ = "0.1.0"
