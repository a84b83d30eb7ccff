# service/namespace_service.py
import logging
from config.settings import settings
from core.listing_client import ListingClient
from core.pagination import fetch_all_namespaces
from model.listing import NamespaceRecord, ObjectRecord
from model.session import Credentials
from util.enums import ErrorMessage
from util.errors import AppError, TransportError, UpstreamError
from util.timing import timed

logger = logging.getLogger(__name__)


class NamespaceService:
    def __init__(
        self,
        client: ListingClient,
        page_size: int = settings.NAMESPACES_PAGE_SIZE,
        max_pages: int = settings.NAMESPACES_MAX_PAGES,
    ) -> None:
        self._client = client
        self._page_size = page_size
        self._max_pages = max_pages

    async def list_namespaces(self, credentials: Credentials) -> list[NamespaceRecord]:
        try:
            return await fetch_all_namespaces(
                self._client,
                credentials,
                page_size=self._page_size,
                max_pages=self._max_pages,
            )
        except (UpstreamError, TransportError) as e:
            raise AppError.of(ErrorMessage.NAMESPACES_FAILED, e)

    async def list_objects(
        self, credentials: Credentials, namespace_id: str | None
    ) -> list[ObjectRecord]:
        if not namespace_id:
            raise AppError.of(ErrorMessage.MISSING_NAMESPACE_ID)
        try:
            with timed(logger, "listing.objects", namespace=namespace_id) as fields:
                objects = await self._client.list_objects(credentials, namespace_id)
                fields["count"] = len(objects)
        except (UpstreamError, TransportError) as e:
            raise AppError.of(ErrorMessage.OBJECTS_FAILED, e)
        return objects
