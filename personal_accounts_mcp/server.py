"""
FastMCP server exposing the personal accounts search tools.
"""

import logging
from functools import lru_cache
from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from personal_accounts_mcp import services
from personal_accounts_mcp.clients import AccountsClient, create_client
from personal_accounts_mcp.config import get_accounts_config

logger = logging.getLogger(__name__)

mcp = FastMCP("Personal Accounts Server")


@lru_cache(maxsize=1)
def get_client() -> AccountsClient:
    """Creates the shared client from the environment on first use."""
    return create_client(get_accounts_config())


@mcp.tool()
async def search_personal_accounts(
    search_by_names: Annotated[
        list[str] | None,
        Field(description="Names to search for (substring search, case-insensitive)"),
    ] = None,
    search_by_phones: Annotated[
        list[str] | None,
        Field(description="Phone numbers to search for (substring search)"),
    ] = None,
    search_by_cpfs: Annotated[
        list[str] | None,
        Field(description="CPF numbers to search for (exact match)"),
    ] = None,
    search_by_emails: Annotated[
        list[str] | None,
        Field(
            description="Email addresses to search for (exact match, case-insensitive)"
        ),
    ] = None,
    mode: Annotated[
        Literal["or", "and"],
        Field(
            description=(
                "Search mode: 'or' returns accounts matching any criteria, "
                "'and' returns accounts matching all criteria"
            )
        ),
    ] = "or",
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results to return (1-50)",
            json_schema_extra={"minimum": 1, "maximum": 50},
        ),
    ] = 50,
    after: Annotated[
        int,
        Field(
            description="Number of results to skip (for pagination)",
            json_schema_extra={"minimum": 0},
        ),
    ] = 0,
) -> str:
    """Search personal accounts by names, phones, CPFs and/or emails.

    At least one of the search_by_* lists must be non-empty.
    """
    return await services.search_personal_accounts(
        get_client,
        search_by_names=search_by_names,
        search_by_phones=search_by_phones,
        search_by_cpfs=search_by_cpfs,
        search_by_emails=search_by_emails,
        mode=mode,
        limit=limit,
        after=after,
    )


@mcp.tool()
async def search_by_phone(
    phone: Annotated[str, Field(description="Phone number to search for")],
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results to return (1-50)",
            json_schema_extra={"minimum": 1, "maximum": 50},
        ),
    ] = 1,
) -> str:
    """Quick lookup of personal accounts by a single phone number."""
    return await services.search_by_phone(get_client, phone=phone, limit=limit)


@mcp.tool()
async def search_by_email(
    email: Annotated[str, Field(description="Email address to search for")],
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results to return (1-50)",
            json_schema_extra={"minimum": 1, "maximum": 50},
        ),
    ] = 1,
) -> str:
    """Quick lookup of personal accounts by a single email address."""
    return await services.search_by_email(get_client, email=email, limit=limit)
