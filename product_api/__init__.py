"""In-memory product catalog served over a small JSON HTTP API."""

__version__ = "0.1.0"
