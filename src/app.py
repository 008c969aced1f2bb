"""Shop FastAPI application.

Processes commands synchronously over HTTP. Every request runs inside the
shop domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shop.domain import shop
from shop.utils.logging import add_context, clear_context, get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset        -> in-memory store
#   - "sqlite"     -> SQLite file via SQLAlchemy
#   - "production" -> PostgreSQL at DATABASE_URL
shop.init()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Online Shop API",
    description="Customers, categorized shop items and orders",
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
    """Push the shop domain context and tag log lines with a request id."""
    add_context(request_id=request.headers.get("x-request-id", str(uuid.uuid4())))
    try:
        with shop.domain_context():
            response = await call_next(request)
        logger.info("Request handled", method=request.method, path=request.url.path, status=response.status_code)
        return response
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers and error handlers
# ---------------------------------------------------------------------------
from shop.api import routers  # noqa: E402
from shop.api.errors import register_error_handlers  # noqa: E402

for router in routers:
    app.include_router(router)

register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": shop.name})


@app.get("/")
async def index():
    return JSONResponse(
        content={
            "message": "Online Shop API",
            "endpoints": {
                "customers": "/api/customers",
                "categories": "/api/categories",
                "shopItems": "/api/shop-items",
                "orders": "/api/orders",
                "seed": "POST /api/seed",
                "health": "/health",
            },
        }
    )
