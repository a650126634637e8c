"""
App assembly entry point.

Builds the FastAPI `app` from environment configuration, for use with an
ASGI server: ``uvicorn app:app``.
"""

from todos.api.main import create_app

app = create_app()
