"""FastAPI application factory for the marketplace API."""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from marketplace.catalogue.api import category_router, product_router, user_category_router
from marketplace.domain import marketplace
from marketplace.identity.api import router as account_router
from marketplace.messaging.api import message_router
from marketplace.ordering.api import order_item_router, order_router
from marketplace.reviews.api import review_router
from marketplace.shared.errors import register_error_handlers
from marketplace.utils.logging import add_context, clear_context

_DOMAIN_PREFIXES = ("/api", "/health")


def create_app() -> FastAPI:
    """Build the API. The domain must already be initialized."""
    app = FastAPI(
        title="Marketplace API",
        description="Buyers, sellers, catalogue, carts, orders, reviews and messages",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the marketplace domain context and bind request-scoped log context."""
        clear_context()
        add_context(
            request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        try:
            if request.url.path.startswith(_DOMAIN_PREFIXES):
                with marketplace.domain_context():
                    return await call_next(request)
            # Docs and OpenAPI schema need no domain
            return await call_next(request)
        finally:
            clear_context()

    register_error_handlers(app)

    for router in (
        account_router,
        category_router,
        product_router,
        user_category_router,
        order_item_router,
        order_router,
        review_router,
        message_router,
    ):
        app.include_router(router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": marketplace.name})

    return app
