"""
HTTP Client for CLI.

Provides async HTTP client for communicating with the URL shortener API.
Redirects are never followed: the resolve operation needs to see the
redirect response itself.
"""

from typing import Any

import httpx

from shortlink.core.config import get_api_settings
from shortlink.core.exceptions import ConfigurationError
from shortlink.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for backend API communication.

    Features:
    - Base URL (including the /api prefix) from application.yaml
    - X-Frontend-ID header for backend log routing
    - Structured logging of requests/responses
    - One lazily created connection pool reused for the whole session

    Usage:
        client = APIClient()
        response = await client.post("/users/login", json={"email": "a@b.com"})
        response = await client.get("/urls")
        await client.close()
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """
        Initialize the API client.

        Args:
            base_url: Backend API base URL. If None, reads from config/settings/application.yaml.
            timeout: Request timeout in seconds. If None, reads from config/settings/application.yaml.
        """
        if base_url is None:
            try:
                config_base_url, config_timeout = get_api_settings()
            except Exception as e:
                raise ConfigurationError(
                    f"Could not determine API URL from config/settings/application.yaml: {e}"
                ) from e
        else:
            config_base_url, config_timeout = base_url, 30.0

        self.base_url = config_base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else config_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=False,
                headers={"X-Frontend-ID": "cli"},
            )
        return self._client

    def url_for(self, path: str) -> str:
        """Return the absolute URL a path resolves to, for operator echo."""
        return f"{self.base_url}/{path.lstrip('/')}"

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the backend.

        Non-success statuses are returned, not raised: callers decide how
        each status is reported.

        Args:
            method: HTTP method (GET, POST)
            path: API path relative to the base URL (e.g., /users/login)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On transport failure (connection refused, timeout)
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = await client.request(method, path, **kwargs)

            log_with_source(
                logger,
                "cli",
                "debug",
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)
