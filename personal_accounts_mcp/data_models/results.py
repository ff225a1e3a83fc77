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
Outcome models for a single search invocation.

Every tool call ends in exactly one of these outcomes, which the formatting
module renders into the text returned to the agent.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

# Account records are owned by the remote system and are passed through
# untouched, in the order they were returned.
AccountRecord = Any


class SearchSuccess(BaseModel):
    status: Literal["success"] = "success"
    records: list[AccountRecord] = Field(min_length=1)


class SearchEmpty(BaseModel):
    status: Literal["empty"] = "empty"


class HttpErrorOutcome(BaseModel):
    """The remote API answered with a non-2xx status."""

    status: Literal["http_error"] = "http_error"
    status_code: int
    body: str


class TransportErrorOutcome(BaseModel):
    """The remote call failed (network, timeout, malformed response)."""

    status: Literal["transport_error"] = "transport_error"
    message: str


class ValidationErrorOutcome(BaseModel):
    """The caller's input was rejected before any request was sent."""

    status: Literal["validation_error"] = "validation_error"
    message: str


SearchOutcome = Annotated[
    Union[
        SearchSuccess,
        SearchEmpty,
        HttpErrorOutcome,
        TransportErrorOutcome,
        ValidationErrorOutcome,
    ],
    Field(discriminator="status"),
]
