"""Shared schema pieces: camelCase base model and the error envelope."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON while accepting snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def required_text(value: str, label: str, max_length: int | None = None) -> str:
    """Strip a required string; reject empty, whitespace-only or over-long input."""
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    if max_length is not None and len(value) > max_length:
        raise ValueError(f"{label} must be at most {max_length} characters")
    return value


def reject_bool(value: Any) -> Any:
    """Refuse JSON booleans where a number is expected (lax mode reads true as 1)."""
    if isinstance(value, bool):
        raise ValueError("Expected a number")
    return value


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, list[str]] | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request data"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Storage or internal error"},
}
