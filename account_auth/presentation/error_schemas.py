"""Pydantic models for error bodies, used in the OpenAPI schema.

Every error response has ``detail`` and ``error_code``; 422 responses add
``errors``. None of them carry request input.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body written by the coded-exception handlers."""

    detail: str = Field(..., examples=["Invalid username or password"])
    error_code: str = Field(..., examples=["INVALID_CREDENTIALS"])


class ValidationErrorDetail(BaseModel):
    """One rejected field. The offending value is never included."""

    field: str = Field(
        ...,
        description="Dotted location of the field, e.g. 'body.username'",
        examples=["body.username", "body.new_password"],
    )
    message: str = Field(
        ...,
        examples=["String should have at least 8 characters"],
    )


class ValidationErrorResponse(ErrorResponse):
    """Body of a 422 response, as written by validation_error_handler."""

    errors: list[ValidationErrorDetail] = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "body.username",
                        "message": "String should match pattern '^[A-Za-z0-9_\\-.]{1,16}$'",
                    },
                ],
            }
        }
    }


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """Build a route's ``responses=`` entry documenting ErrorResponse bodies."""
    return {code: {"model": ErrorResponse} for code in status_codes}
