import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from feedback_ledger.api.deps import get_ledger, get_rules, get_settings
from feedback_ledger.app_shell.config import configure_logging, validate_ops_rules
from feedback_ledger.domain.errors import LedgerError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and build the ledger on startup (fail-fast)
    try:
        rules = get_rules()
        configure_logging(rules.ops.log_level)
        validate_ops_rules(rules)
        get_ledger()
        logger.info("Rules loaded from %s", settings.rules_path)
    except (OSError, ValueError, LedgerError) as e:
        logger.critical("Startup failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="Feedback Ledger API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from feedback_ledger.api.routes import admins, feedback, journal, links  # noqa: E402

app.include_router(admins.router, prefix="/api/admins", tags=["Admins"])
app.include_router(links.router, prefix="/api/links", tags=["Links"])
app.include_router(feedback.router, prefix="/api", tags=["Feedback"])
app.include_router(journal.router, prefix="/api/journal", tags=["Journal"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
