"""Serve Swagger UI and OpenAPI specifications over WSGI, and fetch trimmed Swagger UI bundles."""

__version__ = "0.1.0"
__all__ = ["download", "handler", "templates"]