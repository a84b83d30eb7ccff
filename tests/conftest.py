# tests/conftest.py
from typing import Callable
import httpx
import pytest
from fastapi.testclient import TestClient
from controller.controller_dependencies import get_listing_client
from core.listing_client import ListingClient
from main import app

BASE_URL = "https://cf.test/client/v4"
NAMESPACES_PATH = "/client/v4/accounts/acct1/workers/durable_objects/namespaces"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """Records every outbound request and answers through `handler`."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(200, json={"result": []})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> ListingClient:
        return ListingClient(base_url=BASE_URL, transport=httpx.MockTransport(self))


def namespace_pages(total: int, per_page: int, *, omit_last_info: bool = False) -> Handler:
    """Serve `total` namespaces split into pages of `per_page` (last one partial)."""
    items = [
        {"id": f"ns-{i}", "name": f"Namespace{i}", "class": "Counter", "script": "worker", "use_sqlite": i % 2 == 0}
        for i in range(total)
    ]
    total_pages = max(1, -(-total // per_page))

    def handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        chunk = items[(page - 1) * per_page : page * per_page]
        body: dict = {"result": chunk}
        if not (omit_last_info and page == total_pages):
            body["result_info"] = {"page": page, "per_page": per_page, "total_pages": total_pages}
        return httpx.Response(200, json=body)

    return handler


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(upstream: FakeUpstream):
    app.dependency_overrides[get_listing_client] = upstream.client
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


@pytest.fixture
def session_cookie() -> dict[str, str]:
    return {"cookie": "accountId=acct1; apiKey=secret-token"}
