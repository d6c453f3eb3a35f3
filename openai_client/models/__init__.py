"""Data models for API."""
from .openai import (
    Model,
    ImageSize,
    Query,
    Result,
    CompletionsQuery,
    CompletionsResult,
    CompletionChoice,
    ImagesQuery,
    ImagesResult,
    ImageURL,
    EmbeddingsQuery,
    EmbeddingsResult,
    Embedding,
    Role,
    ChatMessage,
    ChatQuery,
    ChatResult,
    ChatChoice,
    Usage,
)
from .internal import (
    HTTPRequest,
    HTTPResponse,
    APIErrorDetail,
    APIErrorResponse,
)

__all__ = [
    "Model",
    "ImageSize",
    "Query",
    "Result",
    "CompletionsQuery",
    "CompletionsResult",
    "CompletionChoice",
    "ImagesQuery",
    "ImagesResult",
    "ImageURL",
    "EmbeddingsQuery",
    "EmbeddingsResult",
    "Embedding",
    "Role",
    "ChatMessage",
    "ChatQuery",
    "ChatResult",
    "ChatChoice",
    "Usage",
    "HTTPRequest",
    "HTTPResponse",
    "APIErrorDetail",
    "APIErrorResponse",
]
