"""Main FastAPI application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from . import __version__
from .config import get_settings
from .converters import CONVERTERS
from .logging_config import get_logger, setup_logging
from .routes.convert import router as convert_router

# Load settings and configure logging
settings = get_settings()
setup_logging(settings.logging)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Call get_settings() again so tests can reload the environment
    current_settings = get_settings()
    app.state.settings = current_settings

    logger.info(f"Starting {current_settings.app_name} v{current_settings.app_version}")
    logger.info(f"Environment: {current_settings.environment}")
    for message in current_settings.validate_settings():
        if "WARNING" in message:
            logger.warning(message.replace("WARNING: ", ""))
        elif "ERROR" in message:
            logger.error(message.replace("ERROR: ", ""))
        else:
            logger.info(message.replace("INFO: ", ""))

    yield

    logger.info("Shutting down")


app = FastAPI(
    title="Text Converter",
    description="Conversion between plain text, format=flowed text and HTML",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint reporting the supported conversions."""
    app_settings = request.app.state.settings

    return {
        "status": "healthy",
        "version": __version__,
        "environment": app_settings.environment,
        "configuration": {
            "max_content_size_mb": app_settings.content.max_content_size / 1024 / 1024,
            "max_line_length": app_settings.converter.max_line_length,
            "input_encoding": app_settings.converter.input_encoding,
            "output_encoding": app_settings.converter.output_encoding,
        },
        "conversions": sorted(
            f"{source.value}->{target.value}" for source, target in CONVERTERS
        ),
    }


app.include_router(convert_router, tags=["convert"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("textconverter.main:app", host="0.0.0.0", port=8000, reload=True)
