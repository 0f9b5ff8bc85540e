"""Checkout pricing API — FastAPI entry point.

Registers middleware, routers, and lifecycle hooks. Each store vertical
adds its own router under /api/{store}/.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricing.config import CheckoutConfig
from pricing.observability import get_logger, setup_logging, setup_otel

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

config = CheckoutConfig.from_env()
logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    setup_logging(config.log_level, config.log_file)
    setup_otel(config.service_name, config.otel_endpoint)

    logger.info("Checkout pricing API started")
    yield
    logger.info("Checkout pricing API shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Checkout Pricing",
    description="Prices shopping carts against bulk and batch promotional rules",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers — stores register here
# ---------------------------------------------------------------------------

from stores.electronics.router import router as electronics_router  # noqa: E402

app.include_router(electronics_router, prefix="/api/electronics", tags=["Electronics"])


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "0.1.0"}


@app.get("/")
async def root():
    return {
        "name": "Checkout Pricing",
        "version": "0.1.0",
        "docs": "/docs",
        "stores": ["electronics"],
    }
