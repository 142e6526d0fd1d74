"""Cricket Battle League scoreboard API."""

__version__ = "0.1.0"
