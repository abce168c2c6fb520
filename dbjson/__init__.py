"""Manager for a JSON file of named database connection profiles."""

__version__ = "0.1.0"
