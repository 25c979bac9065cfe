import logging
import structlog
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.v1 import api_router
from .config import get_settings
from .exceptions import ExtractionError, ValidationError


def apply_logging_preferences(settings):
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s"
)

apply_logging_preferences(settings)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    apply_logging_preferences(settings)
    logger.info(
        "Starting NewsFinder API",
        version=__version__,
        newsdata_key_loaded=settings.newsdata_enabled,
        feeds=len(settings.feed_urls),
    )

    yield

    logger.info("Shutting down NewsFinder API")


def create_application() -> FastAPI:
    app = FastAPI(
        title="NewsFinder",
        description="Topic news search across RSS feeds, NewsData.io and Google News, with readable article extraction",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        logger.info("Rejected request", path=request.url.path, reason=str(exc))
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ExtractionError)
    async def extraction_exception_handler(request: Request, exc: ExtractionError):
        logger.warning("Article extraction failed", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch or parse article content"}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        logger.error(
            "Unhandled exception occurred",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
            }
        )

    # The browser frontend calls /search and /fetch at the root
    app.include_router(api_router, include_in_schema=False)

    # Versioned mount of the same routes
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_application()


def run():
    import uvicorn

    uvicorn.run(
        "newsfinder.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info",
        access_log=False,
    )


if __name__ == "__main__":
    run()
