"""Flask application for hospital staff login and hospital-scoped patient search over SQLite."""

__version__ = "0.1.0"

__all__ = ["__version__"]