"""
Base API client with common functionality
"""

from abc import ABC
from typing import Optional, Dict, Any, Union, List
import httpx
from taskboard.utils.logger import logger
from taskboard.utils.error_handler import RemoteError


JSONData = Union[Dict[str, Any], List[Any]]


def _error_message(response: httpx.Response) -> str:
    """Extract human readable message from error response body"""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "error_description", "msg", "error"):
            if body.get(key):
                return str(body[key])

    text = response.text.strip()
    if text:
        return text[:500]
    return f"Request failed with status {response.status_code}"


class BaseAPIClient(ABC):
    """Base class for API clients with common functionality"""

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        """
        Initialize base API client

        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds (None disables the timeout)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(timeout=timeout)
        self.logger = logger

    async def _request(
        self,
        method: str,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[JSONData] = None,
    ) -> Any:
        """
        Make a single HTTP request (no retries)

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: API endpoint
            headers: Request headers
            params: Query parameters
            json_data: JSON body

        Returns:
            Decoded JSON body, or {} for empty responses

        Raises:
            RemoteError: If the request fails for any reason
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        request_kwargs = {
            "method": method,
            "url": url,
            "headers": headers,
            "params": params,
        }

        if json_data is not None:
            request_kwargs["json"] = json_data
            self.logger.debug(f"Request JSON data: {json_data}")

        try:
            self.logger.debug(f"Request: {method} {url} params={params}")
            response = await self.client.request(**request_kwargs)
            self.logger.debug(f"Response status: {response.status_code}")

            if response.status_code >= 400:
                self.logger.warning(f"Error response body: {response.text[:1000]}")

            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise RemoteError(
                _error_message(e.response),
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            raise RemoteError(str(e) or type(e).__name__) from e

        # Handle empty response (204 No Content or empty body)
        if response.status_code == 204 or not response.text.strip():
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(f"Invalid JSON in response from {url}") from e

    async def get(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make GET request"""
        return await self._request("GET", endpoint, headers=headers, params=params)

    async def post(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[JSONData] = None,
    ) -> Any:
        """Make POST request"""
        return await self._request("POST", endpoint, headers=headers, params=params, json_data=json_data)

    async def patch(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[JSONData] = None,
    ) -> Any:
        """Make PATCH request"""
        return await self._request("PATCH", endpoint, headers=headers, params=params, json_data=json_data)

    async def delete(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make DELETE request"""
        return await self._request("DELETE", endpoint, headers=headers, params=params)

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
