#main __init__.py
"""
modelgen - generate Sequelize, Mongoose and MySQL code from a model description.

The generators in ``modelgen.codegen`` are pure functions; this module wraps
them in a FastAPI application so a form in the browser can post a description
and display the generated code.
"""

__version__ = "0.1.0"

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI

from .api import router as api_router
from .codegen import generate_artifact, generate_artifacts
from .core.config import settings
from .schemas import ArtifactKind, FieldSpec, GeneratedArtifacts, ModelDescription, ModuleStyle

# Initialize module-level logger; logging configuration is handled in `create_app`
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application startup and shutdown."""
    logger.info(f"Starting up {app.title}...")
    yield
    logger.info(f"{app.title} shutdown complete")


class ModelgenAPI(FastAPI):
    """FastAPI application serving the code generators."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("lifespan", lifespan)
        super().__init__(*args, **kwargs)
        self._setup()

    def _setup(self):
        """Set up the application routes."""
        self.include_router(api_router)

        @self.get("/health", include_in_schema=True)
        async def health_check():
            """Health check endpoint."""
            return {"status": "ok", "version": self.version}


def create_app(
    title: Optional[str] = None,
    description: str = "Generate Sequelize, Mongoose and MySQL code from a model description",
    version: str = __version__,
    debug: Optional[bool] = None,
    **kwargs
) -> ModelgenAPI:
    """
    Create and configure the modelgen application.

    Args:
        title: The title of the API (defaults to ``settings.APP_NAME``).
        description: The description of the API.
        version: The version of the API.
        debug: Whether to run the application in debug mode (defaults to ``settings.DEBUG``).
        **kwargs: Additional keyword arguments to pass to the FastAPI constructor.

    Returns:
        ModelgenAPI: The configured application instance.
    """
    debug = settings.DEBUG if debug is None else debug

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if debug else settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not settings.DOCS_ENABLED:
        kwargs.setdefault("docs_url", None)
        kwargs.setdefault("redoc_url", None)

    title = title or settings.APP_NAME
    try:
        logger.info(f"Creating {title} application (version: {version})")
        app = ModelgenAPI(
            title=title,
            description=description,
            version=version,
            debug=debug,
            **kwargs
        )
        logger.info("Application initialization complete")
        return app
    except Exception as e:
        logger.critical(f"Failed to create application: {e}", exc_info=True)
        raise


__all__ = [
    'ModelgenAPI', 'create_app', 'settings', '__version__',
    'ModelDescription', 'FieldSpec', 'ModuleStyle', 'ArtifactKind', 'GeneratedArtifacts',
    'generate_artifact', 'generate_artifacts',
]
