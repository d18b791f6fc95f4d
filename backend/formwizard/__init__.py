"""Multi-step form wizard with a mock persistence endpoint."""

__version__ = "0.1.0"
