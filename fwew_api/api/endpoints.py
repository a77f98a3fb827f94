"""
API endpoint definitions.

Every route in the table is served by the same pipeline:
decode -> dispatch -> shape. Errors raised on the way are turned into
message envelopes by the handlers in fwew_api.errors.
"""
from typing import Any, Callable, Iterable

from fastapi import APIRouter, Depends, Request

from fwew_api.catalog import catalog
from fwew_api.config import Settings
from fwew_api.decoder import decode
from fwew_api.dispatcher import dispatch
from fwew_api.engine import DictionaryEngine
from fwew_api.routes import API_PREFIX, Route
from fwew_api.schemas import VersionInfo
from fwew_api.shaper import shape

ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

LENITION_TABLE = {
    "kx": "k",
    "px": "p",
    "tx": "t",
    "k": "h",
    "p": "f",
    "t": "s",
    "ts": "s",
    "'": "(disappears, except before ll or rr)",
}


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings loaded at startup."""
    return request.app.state.settings


def get_engine(request: Request) -> DictionaryEngine:
    """Dependency returning the dictionary engine."""
    return request.app.state.engine


def get_version(request: Request) -> VersionInfo:
    """Dependency returning the version info built in the app lifespan."""
    return request.app.state.version


def _static_handler(route: Route, routes: Iterable[Route]) -> Callable[..., Any]:
    mounted = tuple(routes)

    if route.endpoint == "catalog":
        def endpoint(settings: Settings = Depends(get_settings)):
            return catalog(settings.web_root, mounted)
    elif route.endpoint == "lenition":
        def endpoint():
            return LENITION_TABLE
    else:
        def endpoint(version: VersionInfo = Depends(get_version)):
            return version.model_dump(by_alias=True)

    return endpoint


def _query_handler(route: Route) -> Callable[..., Any]:
    def endpoint(request: Request, engine: DictionaryEngine = Depends(get_engine)):
        segments = request.path_params
        query = decode(route, segments)
        result = dispatch(engine, query)
        return shape(result, route.shape, segments.get("lang"))

    return endpoint


def build_router(routes: Iterable[Route]) -> APIRouter:
    """
    Mount the given routes under the API prefix.

    Args:
        routes: Routes to serve, usually routes_for(settings.api_generation)

    Returns:
        APIRouter: Router with one endpoint per route
    """
    routes = tuple(routes)
    router = APIRouter(prefix=API_PREFIX)
    for route in routes:
        if route.endpoint in ("catalog", "lenition", "version"):
            endpoint = _static_handler(route, routes)
        else:
            endpoint = _query_handler(route)
        endpoint.__doc__ = route.description
        router.add_api_route(
            route.path,
            endpoint,
            methods=ROUTE_METHODS,
            name=route.name,
            summary=route.description,
        )
    return router
