# app/clients/blog_client.py

"""
Client for the remote content-graph endpoint that serves blog records.

One GET per call, authenticated with the admin secret header. Failures are
wrapped with context and re-raised; nothing is retried.
"""

from json import JSONDecodeError
from typing import Any

from httpx import AsyncBaseTransport, AsyncClient, HTTPError, HTTPStatusError
from pydantic import SecretStr, ValidationError

from app.configs import ADMIN_SECRET_HEADER
from app.errors import MalformedRecordError, UpstreamFetchError
from app.monitoring import get_logger
from app.schemas import Blog, BlogFeed

logger = get_logger(__name__)


class BlogClient:
    """
    Async client for the remote blog endpoint.

    Attributes:
        url: Endpoint returning ``{"blogs": [{"title": ...}, ...]}``.
    """

    def __init__(
        self,
        url: str,
        secret: SecretStr | str,
        timeout: float | None = None,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            url: Remote endpoint URL.
            secret: Admin credential sent with every request.
            timeout: Request timeout in seconds, None waits indefinitely.
            transport: Optional httpx transport, used by tests.
        """
        self.url = url
        secret_value = secret.get_secret_value() if isinstance(secret, SecretStr) else secret
        self._client = AsyncClient(
            headers={ADMIN_SECRET_HEADER: secret_value, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def fetch_blogs(self) -> list[Blog]:
        """
        Fetch the current blog collection.

        Returns:
            Blogs in the order the remote endpoint returned them.

        Raises:
            UpstreamFetchError: On transport errors, non-2xx responses or a non-JSON body.
            MalformedRecordError: When the payload is not a list of titled blogs.
        """
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
            payload: Any = response.json()
        except HTTPStatusError as e:
            logger.warning(f"Blog endpoint answered {e.response.status_code}")
            raise UpstreamFetchError(f"status {e.response.status_code}") from e
        except HTTPError as e:
            logger.warning(f"Blog endpoint request failed: {e!r}")
            raise UpstreamFetchError(str(e) or type(e).__name__) from e
        except (JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Blog endpoint returned a non-JSON body")
            raise UpstreamFetchError("invalid JSON body") from e

        try:
            feed = BlogFeed.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Blog payload failed validation: {e.error_count()} error(s)")
            mssg = f"Blog payload failed validation: {e.errors(include_url=False)}"
            raise MalformedRecordError(mssg) from e

        logger.debug(f"Fetched {len(feed.blogs)} blogs")
        return feed.blogs

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
