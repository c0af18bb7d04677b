"""rosterctl — shared profile and friend roster state with a command interface."""

__version__ = "0.1.0"
