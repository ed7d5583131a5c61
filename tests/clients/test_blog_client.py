# tests/clients/test_blog_client.py
"""Tests for app/clients/blog_client.py module."""

from collections.abc import Callable

import pytest
from httpx import ConnectError, MockTransport, ReadTimeout, Request, Response
from pydantic import SecretStr

from app.clients import BlogClient
from app.errors import MalformedRecordError, UpstreamFetchError
from app.schemas import Blog

BLOG_URL = "https://blogs.example.test/api/rest/blogs"
ADMIN_SECRET = "s3cret"

ClientFactory = Callable[[Callable[[Request], Response]], BlogClient]


@pytest.mark.asyncio
async def test_fetch_sends_admin_secret(make_blog_client: ClientFactory) -> None:
    """Test the request goes to the configured URL with the admin secret header."""
    seen: list[Request] = []

    def handler(request: Request) -> Response:
        seen.append(request)
        return Response(200, json={"blogs": []})

    client = make_blog_client(handler)
    await client.fetch_blogs()
    await client.close()

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == BLOG_URL
    assert seen[0].headers["x-hasura-admin-secret"] == ADMIN_SECRET


@pytest.mark.asyncio
async def test_fetch_returns_blogs_in_order(make_blog_client: ClientFactory) -> None:
    """Test blogs are returned in remote order with extra fields kept."""
    payload = {
        "blogs": [
            {"id": "1", "title": "Second Post", "image_url": "https://img.test/1.png"},
            {"id": "2", "title": "First Post"},
        ],
    }
    client = make_blog_client(lambda _: Response(200, json=payload))

    blogs = await client.fetch_blogs()

    assert [blog.title for blog in blogs] == ["Second Post", "First Post"]
    assert all(isinstance(blog, Blog) for blog in blogs)
    assert blogs[0].model_extra == {"id": "1", "image_url": "https://img.test/1.png"}


@pytest.mark.asyncio
async def test_fetch_accepts_secret_str() -> None:
    """Test a SecretStr credential is unwrapped into the header."""
    seen: list[str] = []

    def handler(request: Request) -> Response:
        seen.append(request.headers["x-hasura-admin-secret"])
        return Response(200, json={"blogs": []})

    client = BlogClient(BLOG_URL, SecretStr("hidden"), transport=MockTransport(handler))
    await client.fetch_blogs()

    assert seen == ["hidden"]


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 404, 500, 503])
async def test_non_success_status(make_blog_client: ClientFactory, status_code: int) -> None:
    """Test a non-2xx response raises UpstreamFetchError."""
    client = make_blog_client(lambda _: Response(status_code, json={"error": "nope"}))

    with pytest.raises(UpstreamFetchError) as exc_info:
        await client.fetch_blogs()

    assert exc_info.value.detail.startswith("Error fetching data from the third-party API")
    assert str(status_code) in exc_info.value.detail
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize("error_type", [ConnectError, ReadTimeout])
async def test_transport_error(make_blog_client: ClientFactory, error_type: type) -> None:
    """Test transport failures are wrapped and chained."""

    def handler(request: Request) -> Response:
        raise error_type("connection refused", request=request)

    client = make_blog_client(handler)

    with pytest.raises(UpstreamFetchError) as exc_info:
        await client.fetch_blogs()

    assert isinstance(exc_info.value.__cause__, error_type)


@pytest.mark.asyncio
async def test_non_json_body(make_blog_client: ClientFactory) -> None:
    """Test an undecodable body raises UpstreamFetchError."""
    client = make_blog_client(lambda _: Response(200, content=b"<html>oops</html>"))

    with pytest.raises(UpstreamFetchError):
        await client.fetch_blogs()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"data": []},
        {"blogs": None},
        {"blogs": [{"title": "ok"}, {"id": "no-title"}]},
        {"blogs": [{"title": 12}]},
        [{"title": "not wrapped"}],
    ],
)
async def test_malformed_payload(make_blog_client: ClientFactory, payload: object) -> None:
    """Test payloads that are not a list of titled blogs raise MalformedRecordError."""
    client = make_blog_client(lambda _: Response(200, json=payload))

    with pytest.raises(MalformedRecordError):
        await client.fetch_blogs()


@pytest.mark.asyncio
async def test_no_retry(make_blog_client: ClientFactory) -> None:
    """Test a failed fetch is attempted exactly once."""
    calls = 0

    def handler(_: Request) -> Response:
        nonlocal calls
        calls += 1
        return Response(502)

    client = make_blog_client(handler)

    with pytest.raises(UpstreamFetchError):
        await client.fetch_blogs()

    assert calls == 1
