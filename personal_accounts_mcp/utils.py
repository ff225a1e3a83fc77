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

import logging

from pydantic import ValidationError

from personal_accounts_mcp.config import ACCOUNTS_API_TOKEN_ENV
from personal_accounts_mcp.exceptions import ConfigurationError


def validate_api_token(api_token: str | None) -> str:
    """
    Checks that an API token is configured.

    The remote API has no side-effect free endpoint to probe, so this only
    rejects tokens that are missing or were never substituted by the host
    (e.g. a literal "${ACCOUNTS_API_TOKEN}").

    Returns:
        The stripped token.

    Raises:
        ConfigurationError: If the token is missing or looks like a placeholder.
    """
    token = (api_token or "").strip()
    if not token:
        raise ConfigurationError(f"{ACCOUNTS_API_TOKEN_ENV} is not set.")
    if token.startswith("$"):
        raise ConfigurationError(
            f"{ACCOUNTS_API_TOKEN_ENV} looks like an unsubstituted variable: {token}"
        )
    logging.info("Personal accounts API token is configured.")
    return token


def describe_error(error: BaseException) -> str:
    """Returns the error's message, falling back to its type name."""
    return str(error) or error.__class__.__name__


def format_validation_error(error: ValidationError) -> str:
    """Flattens a pydantic ValidationError into one readable line."""
    messages = []
    for detail in error.errors():
        msg = detail["msg"].removeprefix("Value error, ")
        loc = ".".join(str(part) for part in detail["loc"])
        messages.append(f"'{loc}': {msg}" if loc else msg)
    return "; ".join(messages)
