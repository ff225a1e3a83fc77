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
Exceptions raised while building, sending and rendering account searches.
"""


class AccountsSearchError(Exception):
    """Base class for all personal accounts search errors."""


class SearchValidationError(AccountsSearchError, ValueError):
    """Caller supplied criteria that fail a precondition.

    Raised before any request is sent to the remote API.
    """


class RemoteAPIError(AccountsSearchError):
    """The remote search endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API Error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class TransportError(AccountsSearchError):
    """The remote call failed before a usable response was received."""


class ConfigurationError(AccountsSearchError, ValueError):
    """Required configuration is missing or invalid."""
