"""Typed async client for the OpenAI completions, images, embeddings and chat APIs."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import (
    OpenAIClient,
    Endpoint,
    OpenAIError,
    EmptyDataError,
    APIError,
    Transport,
    AiohttpTransport,
)
from .models import (
    Model,
    ImageSize,
    CompletionsQuery,
    CompletionsResult,
    ImagesQuery,
    ImagesResult,
    EmbeddingsQuery,
    EmbeddingsResult,
    Role,
    ChatMessage,
    ChatQuery,
    ChatResult,
    HTTPRequest,
    HTTPResponse,
)

__all__ = [
    "OpenAIClient",
    "Endpoint",
    "OpenAIError",
    "EmptyDataError",
    "APIError",
    "Transport",
    "AiohttpTransport",
    "Model",
    "ImageSize",
    "CompletionsQuery",
    "CompletionsResult",
    "ImagesQuery",
    "ImagesResult",
    "EmbeddingsQuery",
    "EmbeddingsResult",
    "Role",
    "ChatMessage",
    "ChatQuery",
    "ChatResult",
    "HTTPRequest",
    "HTTPResponse",
    "__version__",
]
