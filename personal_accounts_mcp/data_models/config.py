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
Pydantic models for configuring the MCP server.
"""

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://h7m.g4educacao.com/v1/data"
DEFAULT_TIMEOUT_SECONDS = 30.0
SEARCH_PATH = "/personal-accounts/search"


class AccountsConfig(BaseModel):
    """Configuration for the remote personal accounts API."""

    api_token: str | None = Field(
        default=None,
        description="Bearer token for the personal accounts API",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the data API, without the search path",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout in seconds for a single search request",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got '{v}'")
        return v.rstrip("/")

    @property
    def search_url(self) -> str:
        return self.base_url + SEARCH_PATH
