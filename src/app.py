"""Printeez FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay ("production" → PostgreSQL).
from printeez.domain import printeez
from printeez.web import create_app

printeez.init()

app = create_app()
