"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from webscraper.api import app

    uvicorn webscraper.api:app
"""

from webscraper.api.app import app, create_app

__all__ = ["app", "create_app"]
