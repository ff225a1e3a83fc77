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

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from personal_accounts_mcp.cli import cli
from personal_accounts_mcp.middleware import APITokenMiddleware


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_mcp():
    with patch("personal_accounts_mcp.server.mcp") as mcp:
        yield mcp


class TestServe:
    def test_missing_token_exits(self, runner, mock_mcp):
        result = runner.invoke(cli, ["serve", "stdio"])

        assert result.exit_code == 1
        assert "ACCOUNTS_API_TOKEN is not set." in result.output
        mock_mcp.run.assert_not_called()

    def test_invalid_config_exits(self, runner, mock_mcp):
        result = runner.invoke(
            cli,
            ["serve", "stdio"],
            env={"ACCOUNTS_API_TOKEN": "token", "ACCOUNTS_API_TIMEOUT": "-1"},
        )

        assert result.exit_code == 1
        assert "Invalid accounts API configuration" in result.output
        mock_mcp.run.assert_not_called()

    def test_stdio(self, runner, mock_mcp):
        result = runner.invoke(
            cli, ["serve", "stdio"], env={"ACCOUNTS_API_TOKEN": "token"}
        )

        assert result.exit_code == 0
        mock_mcp.run.assert_called_once_with(transport="stdio")

    def test_skip_token_check(self, runner, mock_mcp):
        result = runner.invoke(cli, ["serve", "--skip-token-check", "stdio"])

        assert result.exit_code == 0
        assert "Skipping API token check as requested." in result.output
        mock_mcp.run.assert_called_once_with(transport="stdio")

    def test_http(self, runner, mock_mcp):
        result = runner.invoke(
            cli,
            ["serve", "http", "--host", "0.0.0.0", "--port", "9090"],
            env={"ACCOUNTS_API_TOKEN": "token"},
        )

        assert result.exit_code == 0
        assert "http://0.0.0.0:9090/mcp" in result.output
        mock_mcp.run.assert_called_once()
        kwargs = mock_mcp.run.call_args.kwargs
        assert kwargs["transport"] == "streamable-http"
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9090
        assert kwargs["stateless_http"] is True
        assert [m.cls for m in kwargs["middleware"]] == [APITokenMiddleware]
