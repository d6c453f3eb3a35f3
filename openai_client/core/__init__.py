"""Request execution and transport."""
from .client import OpenAIClient
from .endpoints import Endpoint
from .errors import OpenAIError, EmptyDataError, APIError
from .transport import Transport, AiohttpTransport

__all__ = [
    "OpenAIClient",
    "Endpoint",
    "OpenAIError",
    "EmptyDataError",
    "APIError",
    "Transport",
    "AiohttpTransport",
]
