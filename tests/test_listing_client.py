# tests/test_listing_client.py
import httpx
import pytest
from conftest import NAMESPACES_PATH
from model.session import Credentials
from util.errors import MalformedPayloadError, TransportError, UpstreamError

CREDS = Credentials(account_id="acct1", api_key="secret-token")


@pytest.mark.asyncio
async def test_namespaces_page_request_shape(upstream):
    upstream.handler = lambda r: httpx.Response(
        200,
        json={
            "result": [{"id": "ns-1", "name": "Counter", "class": "Counter", "script": "w", "use_sqlite": True}],
            "result_info": {"page": 2, "total_pages": 3},
        },
    )

    page = await upstream.client().list_namespaces_page(CREDS, page=2, page_size=100)

    request = upstream.requests[0]
    assert request.method == "GET"
    assert request.url.path == NAMESPACES_PATH
    assert request.url.params["page"] == "2"
    assert request.url.params["per_page"] == "100"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert page.result[0].id == "ns-1"
    assert page.result[0].class_name == "Counter"
    assert page.result[0].use_sqlite is True
    assert page.is_last is False


@pytest.mark.asyncio
async def test_namespace_record_accepts_camel_case_sqlite_flag_and_keeps_extras(upstream):
    upstream.handler = lambda r: httpx.Response(
        200, json={"result": [{"id": "ns-1", "useSqlite": False, "created_on": "2024-01-01"}]}
    )

    page = await upstream.client().list_namespaces_page(CREDS, page=1, page_size=100)

    record = page.result[0]
    assert record.use_sqlite is False
    assert record.model_dump(by_alias=True, exclude_none=True) == {
        "id": "ns-1",
        "use_sqlite": False,
        "created_on": "2024-01-01",
    }
    assert page.is_last is True


@pytest.mark.asyncio
async def test_non_success_status_raises_upstream_error_with_status_text(upstream):
    upstream.handler = lambda r: httpx.Response(403, json={"success": False})

    with pytest.raises(UpstreamError) as exc_info:
        await upstream.client().list_namespaces_page(CREDS, page=1, page_size=100)

    assert exc_info.value.status_code == 403
    assert exc_info.value.status_text == "Forbidden"
    assert str(exc_info.value) == "Failed to fetch namespaces: Forbidden"


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error(upstream):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    upstream.handler = boom

    with pytest.raises(TransportError):
        await upstream.client().list_objects(CREDS, "ns-1")


@pytest.mark.asyncio
async def test_malformed_namespace_payload_fails_fast(upstream):
    upstream.handler = lambda r: httpx.Response(200, json={"result": [{"name": "no id"}]})

    with pytest.raises(MalformedPayloadError):
        await upstream.client().list_namespaces_page(CREDS, page=1, page_size=100)


@pytest.mark.asyncio
async def test_non_json_body_fails_fast(upstream):
    upstream.handler = lambda r: httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(MalformedPayloadError):
        await upstream.client().list_objects(CREDS, "ns-1")


@pytest.mark.asyncio
async def test_list_objects_single_bounded_call(upstream):
    upstream.handler = lambda r: httpx.Response(
        200,
        json={"result": [{"id": "obj-1", "hasStoredData": True}, {"id": "obj-2", "hasStoredData": False}]},
    )

    objects = await upstream.client().list_objects(CREDS, "ns-1")

    assert len(upstream.requests) == 1
    request = upstream.requests[0]
    assert request.url.path == NAMESPACES_PATH + "/ns-1/objects"
    assert request.url.params["limit"] == "10000"
    assert [(o.id, o.hasStoredData) for o in objects] == [("obj-1", True), ("obj-2", False)]


@pytest.mark.asyncio
async def test_list_objects_missing_result_is_empty(upstream):
    upstream.handler = lambda r: httpx.Response(200, json={"success": True})

    assert await upstream.client().list_objects(CREDS, "ns-1") == []


@pytest.mark.asyncio
async def test_probe_requests_single_item_and_ignores_body(upstream):
    upstream.handler = lambda r: httpx.Response(200, text="not json")

    await upstream.client().probe(CREDS)

    assert len(upstream.requests) == 1
    assert upstream.requests[0].url.params["per_page"] == "1"
