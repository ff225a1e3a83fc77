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
Client for the remote personal accounts search API.
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import httpx

from personal_accounts_mcp.data_models.config import (
    DEFAULT_TIMEOUT_SECONDS,
    SEARCH_PATH,
    AccountsConfig,
)
from personal_accounts_mcp.data_models.search import SearchRequest
from personal_accounts_mcp.exceptions import RemoteAPIError, TransportError

logger = logging.getLogger(__name__)

_api_token_override: ContextVar[str | None] = ContextVar(
    "accounts_api_token_override", default=None
)


@contextmanager
def use_api_token(api_token: str) -> Iterator[None]:
    """Overrides the bearer token for searches made inside the block."""
    reset_token = _api_token_override.set(api_token)
    try:
        yield
    finally:
        _api_token_override.reset(reset_token)


class AccountsClient:
    def __init__(
        self,
        base_url: str,
        api_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the AccountsClient.

        Args:
            base_url: Base URL of the data API, e.g. "https://host/v1/data"
            api_token: Default bearer token, used unless overridden per request
            timeout: Timeout in seconds for each search request
            transport: Optional httpx transport, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout = timeout
        self.transport = transport

    @property
    def search_url(self) -> str:
        return self.base_url + SEARCH_PATH

    def _headers(self) -> dict[str, str]:
        api_token = _api_token_override.get() or self.api_token
        if not api_token:
            raise TransportError("No API token configured for the accounts API.")
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_token}",
        }

    async def search(self, request: SearchRequest) -> list[Any]:
        """
        Sends a single search request to the remote API.

        No retries are attempted.

        Returns:
            The account records, in the order returned by the API.

        Raises:
            RemoteAPIError: If the API answers with a non-2xx status.
            TransportError: If the request fails or the body is not a JSON array.
        """
        headers = self._headers()
        body = json.dumps(request.to_payload())

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.search_url, content=body, headers=headers
                )
        except httpx.RequestError as e:
            raise TransportError(str(e) or e.__class__.__name__) from e

        logger.info("Accounts search returned status %s", response.status_code)
        if not response.is_success:
            raise RemoteAPIError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in search response: {e}") from e

        if not isinstance(data, list):
            raise TransportError(
                f"Expected a JSON array from the search API, got {type(data).__name__}."
            )
        return data


def create_client(config: AccountsConfig) -> AccountsClient:
    """
    Factory function to create an AccountsClient from configuration.
    """
    if not config.api_token:
        logger.warning(
            "No API token configured; searches need an X-Accounts-Token header."
        )
    return AccountsClient(
        base_url=config.base_url,
        api_token=config.api_token,
        timeout=config.timeout,
    )
