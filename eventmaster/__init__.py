"""Event management web service: a Flask JSON API over a MySQL events table."""

__version__ = "0.1.0"
__all__ = ["controller", "main", "model", "view"]