import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app_shell.context import ServiceContext
from src.config.loader import load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    if getattr(app.state, "ctx", None) is None:
        # Load config and open storage on startup (fail-fast)
        try:
            config = load_config()
        except ValueError as e:
            logger.critical("Config load failed: %s", e)
            sys.exit(1)
        ctx = ServiceContext.create(config)
        result = ctx.bootstrap()
        if result.created and result.member is not None:
            logger.info("Bootstrap created admin %r", result.member.username)
        app.state.ctx = ctx

    yield

    app.state.ctx.insight_panel.close()


app = FastAPI(
    title="Restro POS API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import auth, branches, dashboard, orders, settings  # noqa: E402

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(branches.router, prefix="/api/branches", tags=["Branches"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(settings.router, prefix="/api/settings", tags=["Settings"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
