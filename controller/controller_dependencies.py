# controller/controller_dependencies.py
from fastapi import Depends, Request
from core.listing_client import ListingClient
from model.session import Credentials
from service.namespace_service import NamespaceService
from service.session_service import SessionService


def get_listing_client() -> ListingClient:
    return ListingClient()


def get_session_service(
    client: ListingClient = Depends(get_listing_client),
) -> SessionService:
    return SessionService(client)


def get_namespace_service(
    client: ListingClient = Depends(get_listing_client),
) -> NamespaceService:
    return NamespaceService(client)


def get_credentials(request: Request) -> Credentials:
    """Per-request session context; 401 when either cookie is missing."""
    return SessionService.authorize(request.headers)
