"""Marketplace FastAPI application.

Commands are processed synchronously within each HTTP request. PROTEAN_ENV
selects the config overlay from `marketplace/domain.toml`.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from marketplace.domain import marketplace
from marketplace.web import create_app

marketplace.init()

app = create_app()
