"""FastAPI application for the Solidity compile server."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import anyio
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .routes import compile_router, meta_router
from .services.compiler import CompilerService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s:     %(name)s - %(message)s"


def configure_logging() -> None:
    """Send INFO and above from the solc_server loggers to stderr.

    uvicorn only configures its own loggers, so the package logger needs a
    handler of its own whichever way the app is served.
    """
    package_logger = logging.getLogger("solc_server")
    package_logger.setLevel(logging.INFO)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    config: Settings = app.state.settings
    # Limiter is created inside the running loop
    if config.max_concurrent_compiles is not None:
        app.state.compile_limiter = anyio.CapacityLimiter(config.max_concurrent_compiles)
    logger.info(
        "Solidity compiler listening at http://%s:%d (solc: %s)",
        config.host,
        config.port,
        config.solc_binary or config.solc_version or "default",
    )
    yield
    # Shutdown: nothing to clean up


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Answer malformed request bodies with the service's error shape."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the application around one set of settings."""
    config = config or default_settings
    configure_logging()

    app = FastAPI(
        title="Solidity Compile Server",
        description="HTTP adapter around solc's standard-JSON interface",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.compiler = CompilerService.from_settings(config)
    app.state.compile_limiter = None

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Mount routes
    app.include_router(compile_router, tags=["compile"])
    app.include_router(meta_router, tags=["meta"])

    return app


app = create_app()


def run():
    """Entry point for solc-server command."""
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
