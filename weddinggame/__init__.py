"""Errors, CORS and error-response helpers, and upload validation for a wedding game API."""

__version__ = "0.1.0"
__all__ = ["config", "errors", "cors", "error_handler", "upload"]