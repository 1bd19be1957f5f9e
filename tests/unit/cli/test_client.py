"""Unit tests for CLI HTTP client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from shortlink.cli.client import APIClient
from shortlink.core.exceptions import ConfigurationError


class TestAPIClient:
    """Tests for APIClient class."""

    @pytest.fixture
    def client(self) -> APIClient:
        """Create a test client."""
        return APIClient(base_url="http://test:8080/api")

    def test_client_initialization(self, client: APIClient) -> None:
        """Test client initializes with correct base URL."""
        assert client.base_url == "http://test:8080/api"
        assert client.timeout == 30.0

    def test_client_strips_trailing_slash(self) -> None:
        """Test client strips trailing slash from base URL."""
        client = APIClient(base_url="http://test:8080/api/")
        assert client.base_url == "http://test:8080/api"

    def test_explicit_timeout(self) -> None:
        client = APIClient(base_url="http://test:8080/api", timeout=5)
        assert client.timeout == 5

    def test_defaults_from_config(self) -> None:
        """Test client reads the base URL from application.yaml."""
        with patch("shortlink.cli.client.get_api_settings", return_value=("http://cfg:9000/api", 12.0)):
            client = APIClient()

        assert client.base_url == "http://cfg:9000/api"
        assert client.timeout == 12.0

    def test_missing_config_raises(self) -> None:
        with patch("shortlink.cli.client.get_api_settings", side_effect=RuntimeError("no root")):
            with pytest.raises(ConfigurationError, match="Could not determine API URL"):
                APIClient()

    def test_url_for(self, client: APIClient) -> None:
        assert client.url_for("/urls/AbC123") == "http://test:8080/api/urls/AbC123"

    @pytest.mark.asyncio
    async def test_get_request(self, client: APIClient) -> None:
        """Test GET request."""
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 200

        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            response = await client.get("/urls")

            assert response.status_code == 200
            mock_request.assert_awaited_once_with("GET", "/urls")

        await client.close()

    @pytest.mark.asyncio
    async def test_post_request(self, client: APIClient) -> None:
        """Test POST request."""
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 201

        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            response = await client.post("/users", json={"email": "a@b.com"})

            assert response.status_code == 201
            mock_request.assert_awaited_once_with("POST", "/users", json={"email": "a@b.com"})

        await client.close()

    @pytest.mark.asyncio
    async def test_non_success_status_is_returned(self, client: APIClient) -> None:
        """Test failing statuses are returned to the caller, not raised."""
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 404

        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            response = await client.get("/urls/missing")

            assert response.status_code == 404

        await client.close()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, client: APIClient) -> None:
        """Test connection failures reach the caller."""
        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(httpx.ConnectError):
                await client.get("/urls")

        await client.close()

    @pytest.mark.asyncio
    async def test_client_does_not_follow_redirects(self, client: APIClient) -> None:
        """Test redirects are left for the caller to inspect."""
        internal_client = await client._get_client()
        assert internal_client.follow_redirects is False
        await client.close()

    @pytest.mark.asyncio
    async def test_client_includes_frontend_header(self, client: APIClient) -> None:
        """Test client includes X-Frontend-ID header."""
        internal_client = await client._get_client()
        assert internal_client.headers.get("X-Frontend-ID") == "cli"
        await client.close()

    @pytest.mark.asyncio
    async def test_client_reused_between_requests(self, client: APIClient) -> None:
        first = await client._get_client()
        second = await client._get_client()
        assert first is second
        await client.close()

    @pytest.mark.asyncio
    async def test_close_client(self, client: APIClient) -> None:
        """Test client closes properly."""
        await client._get_client()
        assert client._client is not None

        await client.close()
        assert client._client is None
