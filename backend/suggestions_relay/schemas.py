"""API request/response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SuggestionRequest(BaseModel):
    """Incoming payload from the frontend.

    ``content`` is untyped and forwarded to the prompt as-is unless the relay
    runs with ``require_content`` enabled.
    """

    model_config = ConfigDict(extra="ignore")

    content: Any = None


class ErrorResponse(BaseModel):
    """Error body returned to the frontend."""

    error: str
