"""Pydantic models for the HTTP response shape carried by decorated errors."""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorPayload(BaseModel):
    """Response body rendered for an error."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status_code: Optional[int] = Field(
        None, alias="statusCode", description="HTTP status code"
    )
    error: Optional[str] = Field(None, description="HTTP reason phrase")
    message: Optional[str] = Field(None, description="Client-facing message")
    attributes: Optional[Union[str, Dict[str, Any]]] = Field(
        None, description="Authentication challenge attributes (401 only)"
    )


class ErrorOutput(BaseModel):
    """Status code, payload and headers a serving layer should respond with."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", ge=400)
    payload: ErrorPayload = Field(default_factory=ErrorPayload)
    headers: Dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Render the wire shape: camelCase keys, unset payload keys dropped."""
        return {
            "statusCode": self.status_code,
            "payload": self.payload.model_dump(by_alias=True, exclude_none=True),
            "headers": dict(self.headers),
        }
