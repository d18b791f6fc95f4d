import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formwizard import __version__
from formwizard.config import Settings, settings as default_settings
from formwizard.middleware.exceptions import register_exception_handlers
from formwizard.routers import form_data, health
from formwizard.services.form_data import FormDataRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the mock endpoint configuration; drop the record on shutdown."""
    logger.info(
        "Form data endpoint ready (latency=%dms, merge=%s)",
        app.state.settings.api_latency_ms,
        app.state.form_data.merge_strategy,
    )
    try:
        yield
    finally:
        app.state.form_data.reset()
        logger.info("Form data endpoint stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="FormWizard",
        description="Multi-step form wizard with a mock persistence endpoint",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Application state ────────────────────────────────────
    app.state.settings = settings
    app.state.form_data = FormDataRepository(merge_strategy=settings.merge_strategy)

    # ── Exception Handlers ───────────────────────────────────
    register_exception_handlers(app)

    # ── Middleware ───────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ──────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(form_data.router, prefix="/api/form-data", tags=["form-data"])

    return app


app = create_app()
