"""
Data models for personal account searches.

This module defines the Pydantic models for the criteria a caller can search
by and the canonical request payload sent to the remote search endpoint.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from .enums import SearchKind, SearchMode

MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 50
DEFAULT_LOOKUP_LIMIT = 1

NO_CRITERIA_MESSAGE = (
    "no search criteria provided. At least one of names, phones, CPFs, "
    "or emails must be given."
)

# Wire keys in payload order, paired with the SearchCriteria attribute.
CRITERIA_FIELDS: list[tuple[str, str]] = [
    ("search_by_names", "names"),
    ("search_by_phones", "phones"),
    ("search_by_cpfs", "cpfs"),
    ("search_by_emails", "emails"),
]


class SearchCriteria(BaseModel):
    """The optional filters of a search. Empty lists mean "not filtered"."""

    model_config = ConfigDict(frozen=True)

    names: list[str] = Field(
        default_factory=list,
        description="Names to search for (substring, case-insensitive)",
    )
    phones: list[str] = Field(
        default_factory=list, description="Phone numbers to search for (substring)"
    )
    cpfs: list[str] = Field(
        default_factory=list, description="CPF numbers to search for (exact match)"
    )
    emails: list[str] = Field(
        default_factory=list,
        description="Email addresses to search for (exact match, case-insensitive)",
    )

    def is_empty(self) -> bool:
        return not any(getattr(self, attr) for _, attr in CRITERIA_FIELDS)

    def to_payload_fields(self) -> dict[str, list[str]]:
        """Returns the non-empty criteria keyed by their wire names."""
        fields = {}
        for wire_key, attr in CRITERIA_FIELDS:
            values = getattr(self, attr)
            if values:
                fields[wire_key] = list(values)
        return fields


class SearchRequest(BaseModel):
    """Canonical request for the personal accounts search endpoint."""

    model_config = ConfigDict(frozen=True)

    criteria: SearchCriteria
    mode: SearchMode = Field(default=SearchMode.OR)
    limit: int = Field(default=DEFAULT_SEARCH_LIMIT, ge=MIN_LIMIT, le=MAX_LIMIT)
    after: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def require_criteria(self) -> "SearchRequest":
        if self.criteria.is_empty():
            raise ValueError(NO_CRITERIA_MESSAGE)
        return self

    def to_payload(self) -> dict[str, Any]:
        """
        Builds the JSON body for the remote endpoint.

        Criteria fields are only attached when they carry at least one value;
        the remote API never receives empty arrays.
        """
        payload: dict[str, Any] = {
            "mode": self.mode.value,
            "limit": self.limit,
            "after": self.after,
        }
        payload.update(self.criteria.to_payload_fields())
        return payload


class EmailLookup(BaseModel):
    """Single email address accepted by the email lookup tool."""

    email: EmailStr


class SearchTarget(BaseModel):
    """What a search was about, e.g. the phone number of a phone lookup."""

    kind: SearchKind = SearchKind.CRITERIA
    value: str | None = None
