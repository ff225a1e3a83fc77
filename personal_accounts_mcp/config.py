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
Configuration module for the personal accounts API client.
"""

import os

from dotenv import load_dotenv
from pydantic import ValidationError

from .data_models.config import AccountsConfig
from .exceptions import ConfigurationError

# Environment variable names
ACCOUNTS_API_TOKEN_ENV = "ACCOUNTS_API_TOKEN"
ACCOUNTS_API_BASE_URL_ENV = "ACCOUNTS_API_BASE_URL"
ACCOUNTS_API_TIMEOUT_ENV = "ACCOUNTS_API_TIMEOUT"


def _load_env_file() -> None:
    """Load .env file if present in the current directory."""
    load_dotenv()


def get_accounts_config() -> AccountsConfig:
    """
    Get the personal accounts API configuration from environment variables.

    The API token is optional here: in HTTP mode it may be supplied per
    request instead. Use `utils.validate_api_token` where one is required.

    Returns:
        AccountsConfig object containing the configuration

    Raises:
        ConfigurationError: If a provided value is invalid
    """
    # Load .env file if present
    _load_env_file()

    api_token = os.getenv(ACCOUNTS_API_TOKEN_ENV)
    base_url = os.getenv(ACCOUNTS_API_BASE_URL_ENV)
    timeout = os.getenv(ACCOUNTS_API_TIMEOUT_ENV)

    # Build config data, only including fields that are provided
    config_data = {}
    if api_token and api_token.strip():
        config_data["api_token"] = api_token.strip()
    if base_url:
        config_data["base_url"] = base_url
    if timeout:
        config_data["timeout"] = timeout

    try:
        return AccountsConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid accounts API configuration: {e}") from e
