"""Errors raised by the client."""
from typing import Any, Dict, Optional

from openai_client.models.internal import APIErrorDetail, APIErrorResponse


class OpenAIError(Exception):
    """Base class for client errors."""


class EmptyDataError(OpenAIError):
    """The transport succeeded but returned no body."""

    def __init__(self, url: str = ""):
        self.url = url
        super().__init__(f"Empty response body from {url}" if url else "Empty response body")


class APIError(OpenAIError):
    """Error reported by the service in its response body."""

    def __init__(
        self,
        message: str,
        type: str,
        param: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.type = type
        self.param = param
        self.code = code
        super().__init__(message)

    @classmethod
    def from_response(cls, response: APIErrorResponse) -> "APIError":
        """Build from the decoded error envelope."""
        error = response.error
        return cls(
            message=error.message,
            type=error.type,
            param=error.param,
            code=error.code,
        )

    @property
    def detail(self) -> APIErrorDetail:
        return APIErrorDetail(
            message=self.message,
            type=self.type,
            param=self.param,
            code=self.code,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire envelope for this error."""
        return APIErrorResponse(error=self.detail).model_dump()

    def __repr__(self) -> str:
        return f"APIError(type={self.type!r}, message={self.message!r}, code={self.code!r})"
