"""Rendering of search outcomes into the text returned to the agent."""

import json
from typing import Any

from personal_accounts_mcp.data_models.enums import SearchKind
from personal_accounts_mcp.data_models.results import (
    HttpErrorOutcome,
    SearchEmpty,
    SearchOutcome,
    SearchSuccess,
    ValidationErrorOutcome,
)
from personal_accounts_mcp.data_models.search import SearchTarget

OPERATION_NAMES = {
    SearchKind.CRITERIA: "searching personal accounts",
    SearchKind.PHONE: "searching by phone",
    SearchKind.EMAIL: "searching by email",
}


def format_records(records: list[Any]) -> str:
    """Pretty-prints records verbatim, two-space indented."""
    return json.dumps(records, indent=2, ensure_ascii=False)


def _empty_message(target: SearchTarget) -> str:
    if target.kind == SearchKind.PHONE:
        return f"No personal accounts found for phone number: {target.value}"
    if target.kind == SearchKind.EMAIL:
        return f"No personal accounts found for email: {target.value}"
    return "No personal accounts found matching the search criteria."


def _found_suffix(target: SearchTarget) -> str:
    if target.kind == SearchKind.PHONE:
        return f" for phone {target.value}"
    if target.kind == SearchKind.EMAIL:
        return f" for email {target.value}"
    return ""


def render_outcome(outcome: SearchOutcome, target: SearchTarget) -> str:
    """
    Renders a search outcome as a single text message.

    Every outcome maps to text, errors included; this never raises.
    """
    if isinstance(outcome, ValidationErrorOutcome):
        return f"Error: {outcome.message}"
    if isinstance(outcome, HttpErrorOutcome):
        return f"API Error ({outcome.status_code}): {outcome.body}"
    if isinstance(outcome, SearchEmpty):
        return _empty_message(target)
    if isinstance(outcome, SearchSuccess):
        count = len(outcome.records)
        return (
            f"Found {count} account(s){_found_suffix(target)}:\n\n"
            f"{format_records(outcome.records)}"
        )
    return f"Error {OPERATION_NAMES[target.kind]}: {outcome.message}"
