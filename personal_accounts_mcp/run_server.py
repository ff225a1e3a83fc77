#!/usr/bin/env python3
"""
Wrapper script to run the MCP server from a desktop MCP host.
"""

import os
import sys

from personal_accounts_mcp.config import (
    ACCOUNTS_API_BASE_URL_ENV,
    ACCOUNTS_API_TIMEOUT_ENV,
    ACCOUNTS_API_TOKEN_ENV,
    get_accounts_config,
)
from personal_accounts_mcp.exceptions import ConfigurationError
from personal_accounts_mcp.utils import validate_api_token


def main() -> None:
    print("=" * 60, file=sys.stderr)
    print("Personal Accounts MCP Server Startup", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    # Only the server's own settings; the token is never printed.
    for key in (ACCOUNTS_API_BASE_URL_ENV, ACCOUNTS_API_TIMEOUT_ENV):
        print(f"  {key}={os.environ.get(key, '<default>')}", file=sys.stderr)

    api_token_raw = os.environ.get(ACCOUNTS_API_TOKEN_ENV, "")
    try:
        api_token = validate_api_token(api_token_raw)
    except ConfigurationError as e:
        print(f"\n{e}", file=sys.stderr)
        print(
            f"Configure {ACCOUNTS_API_TOKEN_ENV} in your MCP host's settings "
            "for this server.",
            file=sys.stderr,
        )
        # Don't exit - let the server start so tool calls can report the error
        os.environ.pop(ACCOUNTS_API_TOKEN_ENV, None)
    else:
        if api_token != api_token_raw:
            print(
                f"  Stripped whitespace from {ACCOUNTS_API_TOKEN_ENV}",
                file=sys.stderr,
            )
        os.environ[ACCOUNTS_API_TOKEN_ENV] = api_token
        print(
            f"  {ACCOUNTS_API_TOKEN_ENV}=<present, {len(api_token)} chars>",
            file=sys.stderr,
        )

    try:
        get_accounts_config()
    except ConfigurationError as e:
        # Tool calls report this too, as an error message per search
        print(f"\n{e}", file=sys.stderr)

    print("=" * 60, file=sys.stderr)

    from personal_accounts_mcp.server import mcp

    print("Starting FastMCP server...", file=sys.stderr)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
