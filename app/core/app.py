from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import get_translator_client
from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import get_settings
from app.schemas.health import EndpointDescriptor, ServiceIndex

logger = logging.getLogger(__name__)

ENDPOINTS: tuple[EndpointDescriptor, ...] = (
    EndpointDescriptor(method="GET", path="/api/health", description="Health check endpoint"),
    EndpointDescriptor(method="GET", path="/api/languages", description="Get all supported languages"),
    EndpointDescriptor(
        method="GET",
        path="/api/source-languages",
        description="Get source languages including auto-detect",
    ),
    EndpointDescriptor(method="GET", path="/api/target-languages", description="Get target languages"),
    EndpointDescriptor(
        method="POST",
        path="/api/translate",
        description="Translate text between languages",
    ),
)


def _configure_logging(level_name: str) -> None:
    """Ensure application logs propagate with the requested verbosity."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
    root_logger.setLevel(level)


def create_app() -> FastAPI:
    settings = get_settings()
    _configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Server running on port %s", settings.api_port)
        logger.info("Health check available at: http://localhost:%s/api/health", settings.api_port)
        translator = await get_translator_client()
        if not translator.is_configured:
            logger.warning(
                "AZURE_TRANSLATOR_KEY is not set; /api/translate will fail until it is configured"
            )
        yield

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_model=ServiceIndex, tags=["health"])
    async def root() -> ServiceIndex:
        return ServiceIndex(
            status="ok",
            message="Translation API is running",
            endpoints=list(ENDPOINTS),
        )

    return app
