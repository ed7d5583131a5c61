# tests/errors/test_base.py
"""Tests for app/errors/base.py and the blog error taxonomy."""

from unittest.mock import MagicMock

import pytest

from app.errors import (
    BaseAppError,
    BlogSearchError,
    BlogServiceError,
    BlogStatsError,
    ConfigMissingError,
    InvalidQueryError,
    MalformedRecordError,
    UpstreamFetchError,
    create_exception_handler,
    create_unhandled_exception_handler,
)


def make_request() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/test"
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns detail."""
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestBlogErrors:
    """Tests for the blog error hierarchy."""

    def test_request_scoped_failures_share_a_base(self) -> None:
        """Test fetch and record failures are both BlogServiceError."""
        assert issubclass(UpstreamFetchError, BlogServiceError)
        assert issubclass(MalformedRecordError, BlogServiceError)
        assert not issubclass(InvalidQueryError, BlogServiceError)

    def test_upstream_message_has_context(self) -> None:
        """Test the upstream error prefixes its reason."""
        error = UpstreamFetchError("status 502")
        assert error.detail == "Error fetching data from the third-party API: status 502"
        assert error.status_code == 500

    @pytest.mark.parametrize(
        ("error", "status_code", "detail"),
        [
            (InvalidQueryError(), 400, "Query parameter 'query' is required."),
            (
                BlogStatsError(),
                500,
                "An error occurred while fetching and analyzing blog data.",
            ),
            (BlogSearchError(), 500, "An error occurred while searching for blogs."),
        ],
    )
    def test_client_facing_errors(
        self,
        error: BaseAppError,
        status_code: int,
        detail: str,
    ) -> None:
        """Test the client-facing errors carry the documented bodies."""
        assert error.status_code == status_code
        assert error.detail == detail

    def test_config_missing_single_variable(self) -> None:
        """Test the message for a single missing variable."""
        assert str(ConfigMissingError(["URL"])) == "Please set the 'URL' environment variable."


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self) -> None:
        """Test handler renders detail under the error key."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(make_request(), BaseAppError(detail="Test error", status_code=400))

        assert response.status_code == 400
        assert response.body == b'{"error":"Test error"}'
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    @pytest.mark.asyncio
    async def test_handler_hides_cause(self) -> None:
        """Test a chained cause never reaches the response body."""
        handler = create_exception_handler(MagicMock())
        try:
            raise BlogSearchError from UpstreamFetchError("secret internal detail")
        except BlogSearchError as error:
            response = await handler(make_request(), error)

        assert response.status_code == 500
        assert b"secret internal detail" not in response.body
        assert response.body == b'{"error":"An error occurred while searching for blogs."}'

    @pytest.mark.asyncio
    async def test_handler_with_plain_exception(self) -> None:
        """Test non-application exceptions get the generic body."""
        handler = create_exception_handler(MagicMock())
        response = await handler(make_request(), ValueError("boom"))

        assert response.status_code == 500
        assert response.body == b'{"error":"An unexpected error occurred on the server."}'


@pytest.mark.asyncio
async def test_unhandled_exception_handler() -> None:
    """Test the catch-all handler logs with the exception and answers 500."""
    logger = MagicMock()
    handler = create_unhandled_exception_handler(logger)
    error = RuntimeError("boom")

    response = await handler(make_request(), error)

    assert response.status_code == 500
    assert response.body == b'{"error":"An unexpected error occurred on the server."}'
    logger.error.assert_called_once()
    assert logger.error.call_args.kwargs["exc_info"] is error
