# core/pagination.py
import logging
from config.settings import settings
from core.listing_client import ListingClient
from model.listing import NamespaceRecord
from model.session import Credentials
from util.errors import ProtocolError
from util.timing import timed

logger = logging.getLogger(__name__)

_OPERATION = "fetch namespaces"


async def fetch_all_namespaces(
    client: ListingClient,
    credentials: Credentials,
    page_size: int = settings.NAMESPACES_PAGE_SIZE,
    max_pages: int = settings.NAMESPACES_MAX_PAGES,
) -> list[NamespaceRecord]:
    """
    Walk the namespace listing from page 1 until the upstream reports the last
    page, returning every record in upstream order.

    - Strictly sequential: page n+1 is requested only after page n says there is more.
    - A page without `result_info` ends the walk (normal for a final page).
    - All-or-nothing: any error propagates and the partial list is dropped.
    - ProtocolError when the upstream page counter lags the requested page, or
      after `max_pages` pages, so a misbehaving upstream cannot loop us forever.
    """
    namespaces: list[NamespaceRecord] = []
    page = 1

    with timed(logger, "listing.namespaces", account=credentials.account_id) as fields:
        while True:
            envelope = await client.list_namespaces_page(credentials, page, page_size)
            namespaces.extend(envelope.result)

            if envelope.is_last:
                break

            reported = envelope.result_info.page  # type: ignore[union-attr]
            if reported < page:
                raise ProtocolError(
                    _OPERATION,
                    f"page counter did not advance (requested {page}, got {reported})",
                )
            if page >= max_pages:
                raise ProtocolError(_OPERATION, f"more than {max_pages} pages")
            page += 1

        fields["pages"] = page
        fields["count"] = len(namespaces)

    return namespaces
