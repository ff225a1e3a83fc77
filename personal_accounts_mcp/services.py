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
from collections.abc import Callable, Sequence
from typing import Union

from pydantic import ValidationError

from personal_accounts_mcp.clients import AccountsClient
from personal_accounts_mcp.data_models.enums import SearchKind, SearchMode
from personal_accounts_mcp.data_models.results import (
    HttpErrorOutcome,
    SearchEmpty,
    SearchOutcome,
    SearchSuccess,
    TransportErrorOutcome,
    ValidationErrorOutcome,
)
from personal_accounts_mcp.data_models.search import (
    DEFAULT_LOOKUP_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    NO_CRITERIA_MESSAGE,
    EmailLookup,
    SearchCriteria,
    SearchRequest,
    SearchTarget,
)
from personal_accounts_mcp.exceptions import (
    ConfigurationError,
    RemoteAPIError,
    SearchValidationError,
    TransportError,
)
from personal_accounts_mcp.formatting import render_outcome
from personal_accounts_mcp.utils import describe_error, format_validation_error

logger = logging.getLogger(__name__)

# A ready client, or a zero-argument factory resolved on each call.
ClientSource = Union[AccountsClient, Callable[[], AccountsClient]]


def build_search_request(
    names: Sequence[str] | None = None,
    phones: Sequence[str] | None = None,
    cpfs: Sequence[str] | None = None,
    emails: Sequence[str] | None = None,
    mode: SearchMode | str = SearchMode.OR,
    limit: int = DEFAULT_SEARCH_LIMIT,
    after: int = 0,
) -> SearchRequest:
    """Validates inputs and builds a SearchRequest.

    The caller's sequences are copied, never mutated.

    Raises:
        SearchValidationError: If no criteria are given, or mode, limit or
            after are out of range.
    """
    try:
        criteria = SearchCriteria(
            names=list(names or []),
            phones=list(phones or []),
            cpfs=list(cpfs or []),
            emails=list(emails or []),
        )
    except ValidationError as e:
        raise SearchValidationError(format_validation_error(e)) from None

    if criteria.is_empty():
        raise SearchValidationError(NO_CRITERIA_MESSAGE)

    try:
        return SearchRequest(criteria=criteria, mode=mode, limit=limit, after=after)
    except ValidationError as e:
        raise SearchValidationError(format_validation_error(e)) from None


def build_phone_request(phone: str, limit: int = DEFAULT_LOOKUP_LIMIT) -> SearchRequest:
    """Builds a single-phone request; mode is always 'or' and after is 0."""
    if not phone or not phone.strip():
        raise SearchValidationError("'phone' must be a non-empty string.")
    return build_search_request(phones=[phone], mode=SearchMode.OR, limit=limit)


def build_email_request(email: str, limit: int = DEFAULT_LOOKUP_LIMIT) -> SearchRequest:
    """Builds a single-email request after checking the address syntax."""
    try:
        EmailLookup(email=email)
    except ValidationError:
        raise SearchValidationError(
            f"'{email}' is not a valid email address."
        ) from None
    return build_search_request(emails=[email], mode=SearchMode.OR, limit=limit)


async def run_search(client: AccountsClient, request: SearchRequest) -> SearchOutcome:
    """Sends a built request and classifies what came back.

    Never raises: every failure is turned into an outcome.
    """
    try:
        records = await client.search(request)
    except RemoteAPIError as e:
        logger.warning("Accounts API returned status %s", e.status_code)
        return HttpErrorOutcome(status_code=e.status_code, body=e.body)
    except TransportError as e:
        logger.error("Accounts search failed: %s", e)
        return TransportErrorOutcome(message=describe_error(e))
    except Exception as e:  # noqa: BLE001
        logger.exception("Unexpected error during accounts search")
        return TransportErrorOutcome(message=describe_error(e))

    if not records:
        return SearchEmpty()
    return SearchSuccess(records=records)


def _resolve_client(client: ClientSource) -> AccountsClient:
    if isinstance(client, AccountsClient):
        return client
    return client()


async def _build_and_run(
    client: ClientSource, target: SearchTarget, build, **kwargs
) -> str:
    try:
        request = build(**kwargs)
    except SearchValidationError as e:
        logger.info("Rejected %s search: %s", target.kind.value, e)
        return render_outcome(ValidationErrorOutcome(message=str(e)), target)

    try:
        resolved_client = _resolve_client(client)
    except ConfigurationError as e:
        logger.error("Accounts client is misconfigured: %s", e)
        outcome = TransportErrorOutcome(message=describe_error(e))
        return render_outcome(outcome, target)

    payload = request.to_payload()
    logger.info(
        "Running %s search: fields=%s mode=%s limit=%s after=%s",
        target.kind.value,
        [key for key in payload if key.startswith("search_by_")],
        payload["mode"],
        payload["limit"],
        payload["after"],
    )
    outcome = await run_search(resolved_client, request)
    return render_outcome(outcome, target)


async def search_personal_accounts(
    client: ClientSource,
    search_by_names: list[str] | None = None,
    search_by_phones: list[str] | None = None,
    search_by_cpfs: list[str] | None = None,
    search_by_emails: list[str] | None = None,
    mode: SearchMode | str = SearchMode.OR,
    limit: int = DEFAULT_SEARCH_LIMIT,
    after: int = 0,
) -> str:
    """Searches personal accounts by any combination of criteria."""
    return await _build_and_run(
        client,
        SearchTarget(kind=SearchKind.CRITERIA),
        build_search_request,
        names=search_by_names,
        phones=search_by_phones,
        cpfs=search_by_cpfs,
        emails=search_by_emails,
        mode=mode,
        limit=limit,
        after=after,
    )


async def search_by_phone(
    client: ClientSource, phone: str, limit: int = DEFAULT_LOOKUP_LIMIT
) -> str:
    return await _build_and_run(
        client,
        SearchTarget(kind=SearchKind.PHONE, value=phone),
        build_phone_request,
        phone=phone,
        limit=limit,
    )


async def search_by_email(
    client: ClientSource, email: str, limit: int = DEFAULT_LOOKUP_LIMIT
) -> str:
    return await _build_and_run(
        client,
        SearchTarget(kind=SearchKind.EMAIL, value=email),
        build_email_request,
        email=email,
        limit=limit,
    )
