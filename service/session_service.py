# service/session_service.py
import logging
from typing import Mapping, Optional
from core import cookie_codec
from core.listing_client import ListingClient
from model.session import Credentials
from util.enums import ErrorMessage
from util.errors import AppError, TransportError, UpstreamError

logger = logging.getLogger(__name__)


class SessionService:
    """
    Session gate. Credentials are checked once, at login, with a single probe
    call; afterwards the cookie contents are trusted until the next upstream
    call fails.
    """

    def __init__(self, client: ListingClient) -> None:
        self._client = client

    async def login(
        self, account_id: Optional[str], api_key: Optional[str]
    ) -> Credentials:
        if not account_id or not api_key:
            raise AppError.of(ErrorMessage.MISSING_CREDENTIALS)

        candidate = Credentials(account_id=account_id, api_key=api_key)
        try:
            await self._client.probe(candidate)
        except UpstreamError as e:
            # Any non-2xx is reported as bad credentials, whatever the cause.
            logger.warning(
                "session.login.rejected account=%s status=%d", account_id, e.status_code
            )
            raise AppError.of(ErrorMessage.INVALID_CREDENTIALS)
        except TransportError:
            logger.error("session.login.unreachable account=%s", account_id)
            raise AppError.of(ErrorMessage.VALIDATION_FAILED)

        logger.info("session.login.ok account=%s", account_id)
        return candidate

    @staticmethod
    def authorize(headers: Mapping[str, str]) -> Credentials:
        credentials = cookie_codec.decode(headers).complete()
        if credentials is None:
            raise AppError.of(ErrorMessage.UNAUTHORIZED)
        return credentials
