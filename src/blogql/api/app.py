"""
Main FastAPI application for BlogQL
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.loader import load_store
from ..store.memory import DataStore

logger = get_logger(__name__)


def create_app(
    store: DataStore | None = None,
    data_dir: str | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Pre-loaded store to serve. When omitted the store is loaded at
            startup from ``data_dir``, falling back to ``app_settings.data_dir``.
        data_dir: Directory holding the JSON data set
        app_settings: Settings to build from. Defaults to the module-level
            ``settings``.
    """
    config = app_settings if app_settings is not None else settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting BlogQL API...", environment=config.environment)
        if store is None:
            app.state.store = load_store(data_dir or config.data_dir)
        else:
            app.state.store = store
        logger.info(
            "Data store ready",
            posts=app.state.store.post_count(),
            users=app.state.store.user_count(),
        )

        yield

        logger.info("Shutting down BlogQL API...")

    app = FastAPI(
        title="BlogQL API",
        description="GraphQL API over an in-memory blog graph",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/", include_in_schema=False)
    async def index():  # pyright: ignore [reportUnusedFunction]
        """Send browsers to the GraphQL endpoint."""
        return RedirectResponse(url="/graphql")

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=config.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


def build_default_app() -> FastAPI:
    """Application factory used by uvicorn (``--factory``)."""
    # Re-read the environment: the CLI sets BLOGQL_* after this module is imported
    app_settings = Settings()
    configure_logging(debug=app_settings.debug, log_level=app_settings.log_level)
    return create_app(app_settings=app_settings)
