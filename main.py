"""Compatibility wrapper for the webapp FastAPI application.

This module re-exports the app and create_app from webapp.main to preserve
imports like `uvicorn main:app` and `from main import app` used by tests.
Running it directly starts the server with signal handling in place.
"""


from webapp.main import app, create_app  # noqa: F401

__all__ = ["app", "create_app"]


if __name__ == "__main__":
    from webapp.server import serve

    serve()
