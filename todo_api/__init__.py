"""Todo API: a small CRUD service over a single SQLite-backed resource."""

__version__ = "1.0.0"
