import logging
import sys

import click

from .config import ACCOUNTS_API_TOKEN_ENV, get_accounts_config
from .exceptions import ConfigurationError
from .middleware import API_TOKEN_HEADER
from .utils import validate_api_token
from .version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Personal Accounts MCP CLI - Model Context Protocol server for account search."""
    logging.basicConfig(level=logging.INFO)


@cli.group()
@click.option(
    "--skip-token-check",
    is_flag=True,
    default=False,
    help=f"Skip the check for {ACCOUNTS_API_TOKEN_ENV} at startup.",
)
@click.pass_context
def serve(ctx: click.Context, *, skip_token_check: bool) -> None:
    """Serve the MCP server in different modes."""
    try:
        config = get_accounts_config()
        if not skip_token_check:
            validate_api_token(config.api_token)
    except ConfigurationError as e:
        click.echo(str(e), err=True)
        click.echo(
            f"Set {ACCOUNTS_API_TOKEN_ENV} in the environment or in a .env file. "
            f"In http mode you can instead pass --skip-token-check and send the "
            f"token in the {API_TOKEN_HEADER} header.",
            err=True,
        )
        sys.stderr.flush()
        ctx.exit(1)

    if skip_token_check:
        click.echo("Skipping API token check as requested.", err=True)


@serve.command()
@click.option("--host", default="localhost", help="Host to bind.")
@click.option("--port", default=8080, help="Port to bind.", type=int)
def http(host: str, port: int) -> None:
    """Start the MCP server in Streamable HTTP mode."""
    try:
        from starlette.middleware import Middleware

        from personal_accounts_mcp.middleware import APITokenMiddleware
        from personal_accounts_mcp.server import mcp

        click.echo("Starting Personal Accounts MCP server in Streamable HTTP mode")
        click.echo(f"Version: {__version__}")
        click.echo(f"Server URL: http://{host}:{port}")
        click.echo(f"Streamable HTTP endpoint: http://{host}:{port}/mcp")
        click.echo("Press CTRL+C to stop")

        mcp.run(
            transport="streamable-http",
            host=host,
            port=port,
            stateless_http=True,
            middleware=[Middleware(APITokenMiddleware)],
        )

    except ImportError as e:
        click.echo(f"Error importing server: {e}", err=True)
        sys.exit(1)


@serve.command()
def stdio() -> None:
    """Start the MCP server in stdio mode."""
    try:
        from personal_accounts_mcp.server import mcp

        click.echo("Starting Personal Accounts MCP server in stdio mode", err=True)
        click.echo(f"Version: {__version__}", err=True)
        click.echo("Server is ready to receive requests via stdin/stdout", err=True)

        mcp.run(transport="stdio")

    except ImportError as e:
        click.echo(f"Error importing server: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()
