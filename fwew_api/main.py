"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
import uvicorn

from fwew_api.api.endpoints import build_router
from fwew_api.config import Settings, load_settings
from fwew_api.engine import DictionaryEngine, EngineError, RemoteDictionaryEngine
from fwew_api.errors import register_exception_handlers
from fwew_api.routes import API_VERSIONS, routes_for
from fwew_api.schemas import VersionInfo

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[DictionaryEngine] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to serve with, loaded from config.json if omitted
        engine: Dictionary engine, a RemoteDictionaryEngine if omitted

    Returns:
        FastAPI: The configured application
    """
    if settings is None:
        settings = load_settings()
    if engine is None:
        engine = RemoteDictionaryEngine(settings.engine_url, timeout=settings.engine_timeout)
    api_version = API_VERSIONS[settings.api_generation]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Fix the version info once before serving."""
        try:
            engine_version = await run_in_threadpool(engine.version)
        except EngineError:
            logger.error("Dictionary engine at %s is unavailable, not starting", settings.engine_url)
            raise
        app.state.version = VersionInfo(
            api_version=api_version,
            fwew_version=engine_version["version"],
            dict_build=engine_version["dict_build"],
        )
        logger.info("Serving API %s on engine %s", api_version, engine_version["version"])
        yield

    app = FastAPI(
        title="Fwew API",
        description="Na'vi dictionary lookup, conversion and name generation",
        version=api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def open_cors_header(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    register_exception_handlers(app)
    app.include_router(build_router(routes_for(settings.api_generation)), tags=["fwew"])
    return app


def run() -> None:
    """Serve the API with uvicorn on the configured port."""
    settings = load_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
