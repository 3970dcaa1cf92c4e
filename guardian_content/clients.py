# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Client module for the Guardian content API.
Each call to send() performs exactly one GET request; there are no retries.
"""

import logging

import httpx

from guardian_content.data_models.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    normalize_base_url,
)
from guardian_content.data_models.enums import Endpoint
from guardian_content.data_models.response import SearchResponse, decode_response
from guardian_content.exceptions import ApiError, NetworkError
from guardian_content.query import API_KEY_PARAM, ContentQuery

logger = logging.getLogger(__name__)


class GuardianContentClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client. No network I/O happens here.

        Raises ValueError if the api_key is empty or the base_url is not an
        absolute http(s) URL.

        API keys can be requested at https://open-platform.theguardian.com/access/

        Args:
            api_key: API key sent as the ``api-key`` query parameter
            base_url: Base URL of the content API, an absolute http(s) URL
            timeout: Request timeout in seconds, only used when this client
                creates its own httpx.AsyncClient
            http_client: Optional httpx.AsyncClient to send requests with. It is
                not closed by ``aclose()``.
        """
        if not api_key:
            raise ValueError("Must specify an api_key")

        self._api_key = api_key
        self._base_url = normalize_base_url(base_url)
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = (
                httpx.AsyncClient(timeout=timeout)
                if timeout is not None
                else httpx.AsyncClient()
            )
        self._http_client = http_client

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def query(self) -> ContentQuery:
        """Starts a new, empty query on the content endpoint."""
        return ContentQuery(self)

    def search(self, q: str) -> ContentQuery:
        return self.query().search(q)

    def endpoint(self, endpoint: Endpoint) -> ContentQuery:
        return self.query().endpoint(endpoint)

    def build_request(self, query: ContentQuery) -> httpx.Request:
        params = [*query.params(), (API_KEY_PARAM, self._api_key)]
        return self._http_client.build_request(
            "GET", f"{self._base_url}/{query.path()}", params=params
        )

    async def send(self, query: ContentQuery) -> SearchResponse:
        """
        Sends a query and decodes the response.

        Raises:
            NetworkError: If the request failed before a response was received.
            ApiError: If the API answered with a non-2xx status.
            DecodeError: If the response body could not be decoded.
            MissingQueryParameterError: If the single-item endpoint has no id.
        """
        request = self.build_request(query)
        logger.debug(
            "GET %s params=%s",
            request.url.path,
            [name for name, _ in query.params()],
        )
        try:
            response = await self._http_client.send(request)
        except httpx.RequestError as e:
            raise NetworkError(
                f"Request to {request.url.path} failed: {e!r}"
            ) from e

        if not response.is_success:
            message = _extract_error_message(response)
            logger.warning(
                "Content API returned %s for %s: %s",
                response.status_code,
                request.url.path,
                message,
            )
            raise ApiError(response.status_code, message, response.text)

        search_response = decode_response(response.content)
        if search_response.is_error:
            logger.warning(
                "Content API reported an error status: %s", search_response.message
            )
        return search_response

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "GuardianContentClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"GuardianContentClient(base_url={self._base_url!r})"


def _extract_error_message(response: httpx.Response) -> str | None:
    """Pulls the error message out of an error response, if its body is JSON."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    inner = data.get("response")
    if isinstance(inner, dict) and inner.get("message"):
        return str(inner["message"])
    if data.get("message"):
        return str(data["message"])
    return None


def create_client(config: ClientConfig) -> GuardianContentClient:
    """
    Factory function to create a GuardianContentClient from configuration.

    Args:
        config: ClientConfig, typically from ``config.get_client_config()``
    """
    return GuardianContentClient(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
    )
