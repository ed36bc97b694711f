import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import analysis_error_handler, unhandled_error_handler
from api.router import router
from config import settings
from models.errors import AnalysisError
from services.rate_limiter import InMemoryQuotaStore, run_sweeper

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the expired-window sweep for as long as the app is up."""
    sweeper = asyncio.create_task(
        run_sweeper(app.state.quota_store, settings.rate_limit_sweep_interval_seconds)
    )
    logger.info(
        "Admission control: %d requests / %.0fs per client",
        settings.rate_limit_requests,
        settings.rate_limit_window_seconds,
    )
    try:
        yield
    finally:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper


app = FastAPI(
    title="Resume Match API",
    description="AI-powered resume to job description compatibility analysis",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.state.quota_store = InMemoryQuotaStore(
    limit=settings.rate_limit_requests,
    window_seconds=settings.rate_limit_window_seconds,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset", "Retry-After"],
)

app.add_exception_handler(AnalysisError, analysis_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(router)
