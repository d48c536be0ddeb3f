# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Client / post / location catalog lookups.
"""

from typing import Optional

from fastapi import APIRouter

from app.core import catalog

router = APIRouter(prefix="/api/v1", tags=["Catalog"])


@router.get("/catalog/clients")
def list_clients():
    return catalog.get_clients()


@router.get("/catalog/posts")
def list_posts(client: Optional[str] = None):
    """Posts offered by one client, or across all clients."""
    if client:
        return catalog.get_posts_for_client(client)
    return catalog.get_all_posts()


@router.get("/catalog/locations")
def list_locations(client: Optional[str] = None, post: Optional[str] = None):
    """Locations for a client + post pair, or every known location."""
    if client and post:
        return catalog.get_locations_for_client_post(client, post)
    return catalog.get_all_locations()
