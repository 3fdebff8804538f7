"""
Command response domain model.

This module defines the response an invocation produces, the payload wrapper
stored in it, the payload written for execution faults and the outcome of
pre-execution validation.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mcp_core.constants import SUCCESS_MESSAGE, SUCCESS_STATUS_CODE
from mcp_core.interfaces.model_bases import DomainModel


class ResponseResult:
    """Opaque payload attached to a response.

    Pydantic models are serialized with their aliases; other values must be
    JSON serializable.
    """

    def __init__(self, value: Any) -> None:
        self._value = value

    @classmethod
    def create(cls, value: Any) -> ResponseResult:
        return cls(value)

    @property
    def value(self) -> Any:
        return self._value

    def to_data(self) -> Any:
        if isinstance(self._value, BaseModel):
            return self._value.model_dump(by_alias=True, mode="json")
        return self._value

    def to_json(self) -> str:
        if isinstance(self._value, BaseModel):
            return self._value.model_dump_json(by_alias=True)
        return json.dumps(self._value)

    def __repr__(self) -> str:
        return f"<ResponseResult {type(self._value).__name__}>"


class CommandResponse(DomainModel):
    """Mutable response owned by the caller of one invocation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: int = SUCCESS_STATUS_CODE
    message: str = SUCCESS_MESSAGE
    results: ResponseResult | None = None
    duration: float | None = Field(
        default=None, description="Invocation time in milliseconds"
    )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "message": self.message,
            "results": self.results.to_data() if self.results is not None else None,
            "duration": self.duration,
        }


class ExceptionResult(DomainModel):
    """Payload written into a response when execution raised."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    message: str
    stack_trace: str | None = None
    type: str


@dataclass
class ValidationResult:
    """Outcome of validating a parse result before execution."""

    is_valid: bool = True
    error_message: str | None = None
