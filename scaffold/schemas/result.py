"""Uniform result envelope returned for handled errors."""

from pydantic import BaseModel, ConfigDict, Field


class ApiRestResult(BaseModel):
    """Status code, human-readable message and optional diagnostic detail."""

    model_config = ConfigDict(frozen=True)

    status: str = Field(..., description="Error code or HTTP status code")
    message: str = Field(..., description="Human-readable message")
    result: str | None = Field(default=None, description="Diagnostic detail, e.g. stack trace text")

    @classmethod
    def err(cls, message: str, status: str, result: str | None = None) -> "ApiRestResult":
        return cls(status=status, message=message, result=result)


class FieldError(BaseModel):
    """Single validation failure tied to one input field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
