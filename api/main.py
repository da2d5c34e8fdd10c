"""FastAPI application for the Golf Performance API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from analytics.narrative import RandomPhraseSelector
from api.config import Settings
from database.connection import db
from database.db_manager import DatabaseManager
from llm.client import LLMUnavailableError, create_client
from llm.persona_generator import GeminiPersonaClassifier

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_llm_client(settings: Settings):
    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY not set; AI features will use fallbacks")
        return None
    try:
        return create_client(settings.google_api_key, timeout_seconds=settings.llm_timeout_seconds)
    except LLMUnavailableError as e:
        logger.warning("Gemini client unavailable: %s", e)
        return None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool and LLM client on startup, close the pool on shutdown."""
    settings = app.state.settings
    await db.initialize(dsn=settings.database_url)
    app.state.db_manager = DatabaseManager(db.pool)
    if settings.init_schema:
        await app.state.db_manager.initialize_schema()
        logger.info("Database schema applied from %s", app.state.db_manager.schema_path)

    client = _build_llm_client(settings)
    app.state.llm_client = client
    app.state.persona_classifier = GeminiPersonaClassifier(
        client,
        model=settings.gemini_model,
        max_retries=settings.llm_max_retries,
    )
    app.state.phrase_selector = RandomPhraseSelector()
    logger.info("Golf Performance API started (model=%s)", settings.gemini_model)
    yield
    await db.close()


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or Settings.from_env()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title="Golf Performance API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    from api.routers import clubs, insights, personas, rounds, stats, trends
    app.include_router(trends.router, prefix="/api/trends", tags=["trends"])
    app.include_router(insights.router, prefix="/api", tags=["insights"])
    app.include_router(personas.router, prefix="/api/personas", tags=["personas"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])
    app.include_router(clubs.router, prefix="/api/clubs", tags=["clubs"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
