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
Tests for configuration module.
"""

import os
from unittest.mock import patch

import pytest

from personal_accounts_mcp.config import get_accounts_config
from personal_accounts_mcp.data_models.config import AccountsConfig
from personal_accounts_mcp.exceptions import ConfigurationError
from personal_accounts_mcp.utils import validate_api_token


class TestGetAccountsConfig:
    """Test get_accounts_config function."""

    def test_get_accounts_config_defaults(self):
        """Test defaults are applied when only the token is set."""
        with patch.dict(os.environ, {"ACCOUNTS_API_TOKEN": "test_token"}):
            config = get_accounts_config()

            assert isinstance(config, AccountsConfig)
            assert config.api_token == "test_token"
            assert config.base_url == "https://h7m.g4educacao.com/v1/data"
            assert config.timeout == 30.0
            assert (
                config.search_url
                == "https://h7m.g4educacao.com/v1/data/personal-accounts/search"
            )

    def test_get_accounts_config_missing_token(self):
        """Test the token is optional at this level."""
        config = get_accounts_config()
        assert config.api_token is None

    def test_get_accounts_config_blank_token(self):
        """Test a whitespace-only token counts as missing."""
        with patch.dict(os.environ, {"ACCOUNTS_API_TOKEN": "   "}):
            assert get_accounts_config().api_token is None

    def test_get_accounts_config_strips_token(self):
        with patch.dict(os.environ, {"ACCOUNTS_API_TOKEN": " test_token\n"}):
            assert get_accounts_config().api_token == "test_token"

    def test_get_accounts_config_environment_overrides(self):
        """Test env vars override defaults."""
        with patch.dict(
            os.environ,
            {
                "ACCOUNTS_API_TOKEN": "test_token",
                "ACCOUNTS_API_BASE_URL": "https://staging.example.com/v1/data/",
                "ACCOUNTS_API_TIMEOUT": "5.5",
            },
        ):
            config = get_accounts_config()

            assert config.base_url == "https://staging.example.com/v1/data"
            assert config.timeout == 5.5
            assert (
                config.search_url
                == "https://staging.example.com/v1/data/personal-accounts/search"
            )

    def test_get_accounts_config_invalid_timeout(self):
        with patch.dict(os.environ, {"ACCOUNTS_API_TIMEOUT": "0"}):
            with pytest.raises(ConfigurationError, match="timeout"):
                get_accounts_config()

    def test_get_accounts_config_invalid_base_url(self):
        with patch.dict(os.environ, {"ACCOUNTS_API_BASE_URL": "ftp://example.com"}):
            with pytest.raises(ConfigurationError, match="http\\(s\\) URL"):
                get_accounts_config()


class TestValidateApiToken:
    def test_valid_token(self):
        assert validate_api_token("  abc123 ") == "abc123"

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token(self, token):
        with pytest.raises(ConfigurationError, match="ACCOUNTS_API_TOKEN is not set"):
            validate_api_token(token)

    def test_unsubstituted_placeholder(self):
        with pytest.raises(ConfigurationError, match="unsubstituted variable"):
            validate_api_token("${ACCOUNTS_API_TOKEN}")
