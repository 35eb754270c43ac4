"""Storefront FastAPI application.

Customer storefront and retailer dashboard served from one process. Commands
are processed synchronously per request inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import get_settings
from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context, get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
storefront.init()

logger = get_logger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the sample catalogue on startup when configured."""
    settings = get_settings()
    logger.info("storefront_starting", environment=settings.environment, seed_data=settings.seed_data)
    if settings.seed_data:
        from storefront.seed import load_sample_data

        with storefront.domain_context():
            load_sample_data()
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Local-commerce storefront: catalogue, price negotiation, cart and orders",
    lifespan=lifespan,
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
    """Push the storefront domain context and bind request details for logging."""
    clear_context()
    add_context(
        request_id=request.headers.get("x-request-id", uuid.uuid4().hex),
        method=request.method,
        path=request.url.path,
    )
    if not request.url.path.startswith(API_PREFIX):
        return await call_next(request)

    with storefront.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers and error handling
# ---------------------------------------------------------------------------
from storefront.api import routers  # noqa: E402
from storefront.api.errors import register_exception_handlers  # noqa: E402

for router in routers:
    app.include_router(router, prefix=API_PREFIX)

register_exception_handlers(app)

