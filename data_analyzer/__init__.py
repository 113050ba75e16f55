"""In-memory tabular data analysis over validated CSV, JSON and XML records."""

__version__ = "0.1.0"
