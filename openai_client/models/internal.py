"""Internal data structures for the transport layer."""
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class HTTPRequest(BaseModel):
    """A fully formed HTTP request handed to a transport."""
    model_config = ConfigDict(frozen=True)

    method: str = "POST"
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""
    timeout: float = 60.0


class HTTPResponse(BaseModel):
    """Raw response reported back by a transport."""
    model_config = ConfigDict(frozen=True)

    status: int = 200
    # Repeated fields are joined with ", ".
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""


class APIErrorDetail(BaseModel):
    """Error payload returned by the service."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str
    type: str
    param: Optional[str] = None
    code: Optional[str] = None


class APIErrorResponse(BaseModel):
    """Error envelope returned by the service."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    error: APIErrorDetail
