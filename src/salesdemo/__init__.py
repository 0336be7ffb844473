"""In-memory sales CRUD service."""

__version__ = "0.1.0"
