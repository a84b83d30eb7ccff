# core/listing_client.py
import logging
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote
import httpx
from pydantic import BaseModel, ValidationError
from config.settings import settings
from model.listing import NamespacePage, ObjectListing, ObjectRecord
from model.session import Credentials
from util.constants import ExternalURIs
from util.errors import MalformedPayloadError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ListingClient:
    """
    Read-only wrapper over the Durable Objects management endpoints.

    One short-lived AsyncClient per call; nothing is shared between requests.
    `transport` exists so tests can plug in an httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: str = settings.CF_API_BASE_URL,
        timeout: float = settings.UPSTREAM_TIMEOUT_SECONDS,
        objects_limit: int = settings.OBJECTS_LIMIT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._objects_limit = objects_limit
        self._transport = transport

    def _namespaces_url(self, account_id: str) -> str:
        path = ExternalURIs.NAMESPACES.format(account_id=quote(account_id, safe=""))
        return self._base_url + path

    def _objects_url(self, account_id: str, namespace_id: str) -> str:
        path = ExternalURIs.OBJECTS.format(
            account_id=quote(account_id, safe=""),
            namespace_id=quote(namespace_id, safe=""),
        )
        return self._base_url + path

    async def _get(
        self,
        operation: str,
        url: str,
        credentials: Credentials,
        params: Dict[str, Any],
    ) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {credentials.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                res = await client.get(url, headers=headers, params=params)
        except httpx.RequestError as e:
            logger.error("listing.request_error op=%s err=%s", operation, type(e).__name__)
            raise TransportError(operation, e) from e

        if not res.is_success:
            logger.warning("listing.bad_status op=%s status=%d", operation, res.status_code)
            raise UpstreamError(operation, res.status_code, res.reason_phrase)
        return res

    @staticmethod
    def _decode(operation: str, res: httpx.Response, model: Type[M]) -> M:
        try:
            return model.model_validate(res.json())
        except ValueError as e:
            # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
            reason = "schema mismatch" if isinstance(e, ValidationError) else "invalid JSON"
            logger.error("listing.malformed op=%s reason=%s", operation, reason)
            raise MalformedPayloadError(operation, res.status_code, reason) from e

    async def probe(self, credentials: Credentials) -> None:
        """Single-item namespace request; returns on 2xx, raises otherwise. Body is ignored."""
        await self._get(
            "validate credentials",
            self._namespaces_url(credentials.account_id),
            credentials,
            {"per_page": 1},
        )

    async def list_namespaces_page(
        self, credentials: Credentials, page: int, page_size: int
    ) -> NamespacePage:
        operation = "fetch namespaces"
        res = await self._get(
            operation,
            self._namespaces_url(credentials.account_id),
            credentials,
            {"page": page, "per_page": page_size},
        )
        envelope = self._decode(operation, res, NamespacePage)
        logger.debug(
            "listing.namespaces.page page=%d items=%d last=%s",
            page,
            len(envelope.result),
            envelope.is_last,
        )
        return envelope

    async def list_objects(
        self, credentials: Credentials, namespace_id: str
    ) -> list[ObjectRecord]:
        # One bounded page; the limit is the API maximum, so no follow-up calls.
        operation = "fetch objects"
        res = await self._get(
            operation,
            self._objects_url(credentials.account_id, namespace_id),
            credentials,
            {"limit": self._objects_limit},
        )
        listing = self._decode(operation, res, ObjectListing)
        return listing.result or []
