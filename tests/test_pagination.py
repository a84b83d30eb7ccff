# tests/test_pagination.py
import httpx
import pytest
from conftest import namespace_pages
from core.pagination import fetch_all_namespaces
from model.session import Credentials
from util.errors import ProtocolError, UpstreamError

CREDS = Credentials(account_id="acct1", api_key="secret-token")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "total, per_page, expected_calls",
    [(137, 100, 2), (250, 50, 5), (100, 100, 1), (0, 100, 1), (7, 3, 3)],
)
async def test_concatenates_every_page_in_order(upstream, total, per_page, expected_calls):
    upstream.handler = namespace_pages(total, per_page)

    namespaces = await fetch_all_namespaces(upstream.client(), CREDS, page_size=per_page)

    assert [ns.id for ns in namespaces] == [f"ns-{i}" for i in range(total)]
    assert [int(r.url.params["page"]) for r in upstream.requests] == list(
        range(1, expected_calls + 1)
    )
    assert {r.url.params["per_page"] for r in upstream.requests} == {str(per_page)}


@pytest.mark.asyncio
async def test_stops_when_final_page_omits_result_info(upstream):
    upstream.handler = namespace_pages(5, 2, omit_last_info=True)

    namespaces = await fetch_all_namespaces(upstream.client(), CREDS, page_size=2)

    assert len(namespaces) == 5
    assert len(upstream.requests) == 3


@pytest.mark.asyncio
async def test_first_page_without_result_info_is_the_only_page(upstream):
    upstream.handler = lambda r: httpx.Response(200, json={"result": [{"id": "a"}, {"id": "b"}]})

    namespaces = await fetch_all_namespaces(upstream.client(), CREDS)

    assert [ns.id for ns in namespaces] == ["a", "b"]
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_error_mid_walk_discards_partial_results(upstream):
    ok = namespace_pages(300, 100)

    def handler(request):
        if request.url.params["page"] == "2":
            return httpx.Response(500)
        return ok(request)

    upstream.handler = handler

    with pytest.raises(UpstreamError) as exc_info:
        await fetch_all_namespaces(upstream.client(), CREDS)

    assert exc_info.value.status_code == 500
    assert len(upstream.requests) == 2


@pytest.mark.asyncio
async def test_stuck_page_counter_raises_protocol_error(upstream):
    upstream.handler = lambda r: httpx.Response(
        200, json={"result": [{"id": "x"}], "result_info": {"page": 1, "total_pages": 2}}
    )

    with pytest.raises(ProtocolError):
        await fetch_all_namespaces(upstream.client(), CREDS)

    assert len(upstream.requests) == 2


@pytest.mark.asyncio
async def test_page_cap_raises_protocol_error(upstream):
    def endless(request):
        page = int(request.url.params["page"])
        return httpx.Response(
            200,
            json={"result": [{"id": f"ns-{page}"}], "result_info": {"page": page, "total_pages": page + 1}},
        )

    upstream.handler = endless

    with pytest.raises(ProtocolError):
        await fetch_all_namespaces(upstream.client(), CREDS, max_pages=5)

    assert len(upstream.requests) == 5
