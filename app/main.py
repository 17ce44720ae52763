## Main application entry point
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.agents.llm.client import get_llm_client
from app.auth.identity import SupabaseIdentityClient
from app.db.session import create_db_engine, create_session_factory
from app.errors import InvalidRequest, RoadmapError
from app.logging_config import configure_logging
from app.responses import error_envelope
from app.roadmaps.routes import router as roadmaps_router
from app.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Configuration is read and validated here, once;
    a missing secret raises ConfigurationError before the app exists.

    Serve with: uvicorn app.main:create_app --factory
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Roadmap Generator")

    engine = create_db_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.identity_client = SupabaseIdentityClient(
        base_url=settings.supabase_url,
        api_key=settings.supabase_anon_key,
        timeout=settings.identity_timeout_seconds,
    )
    app.state.llm_client = get_llm_client(settings)

    @app.exception_handler(RoadmapError)
    async def roadmap_error_handler(request: Request, exc: RoadmapError):
        logger.error(
            "%s %s failed: %s: %s",
            request.method, request.url.path, type(exc).__name__, exc.message,
        )
        status_code = exc.status_code if settings.differentiate_error_status else 500
        return error_envelope(exc.message, status_code=status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request body: %s", exc.errors())
        return await roadmap_error_handler(request, InvalidRequest("Invalid request"))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_envelope(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error in %s %s", request.method, request.url.path)
        return error_envelope("Unknown error")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(roadmaps_router)
    return app
