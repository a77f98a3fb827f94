"""
Self-describing index of the mounted routes.
"""
from typing import Dict, Iterable

from fwew_api.routes import Route


def catalog(root_url: str, routes: Iterable[Route]) -> Dict[str, Dict[str, str]]:
    """
    Build the endpoint catalog for the deployment's public root.

    Built fresh on every call so a changed root is picked up immediately.

    Args:
        root_url: Public URL the API prefix is served under
        routes: Routes currently mounted

    Returns:
        Dict[str, Dict[str, str]]: "<name>_url" -> {"url", "description"}
    """
    root = root_url.rstrip("/")
    return {
        f"{route.name}_url": {"url": root + route.path, "description": route.description}
        for route in routes
    }
