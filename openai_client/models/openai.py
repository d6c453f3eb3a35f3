"""OpenAI API request and response models."""
from enum import Enum
from typing import List, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field


class Model:
    """Well-known model identifiers."""
    GPT4 = "gpt-4"
    GPT4_0314 = "gpt-4-0314"
    GPT4_32K = "gpt-4-32k"
    GPT3_5_TURBO = "gpt-3.5-turbo"
    GPT3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_002 = "text-davinci-002"
    TEXT_CURIE = "text-curie-001"
    TEXT_BABBAGE = "text-babbage-001"
    TEXT_ADA = "text-ada-001"
    TEXT_EMBEDDING_ADA = "text-embedding-ada-002"


class ImageSize:
    """Image sizes accepted by the images endpoint."""
    SMALL = "256x256"
    MEDIUM = "512x512"
    LARGE = "1024x1024"


class Query(BaseModel):
    """Base for request payloads."""
    model_config = ConfigDict(frozen=True)

    def to_json(self) -> bytes:
        """Serialize to the wire body, leaving out unset optional fields."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class Result(BaseModel):
    """Base for decoded responses."""
    model_config = ConfigDict(frozen=True, extra="ignore")


# Completions

class CompletionsQuery(Query):
    """Request for text completion."""
    model: str
    prompt: str
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = Field(
        default=None, description="Between -2.0 and 2.0"
    )
    presence_penalty: Optional[float] = Field(
        default=None, description="Between -2.0 and 2.0"
    )
    stop: Optional[List[str]] = Field(default=None, description="Up to 4 sequences")
    user: Optional[str] = None


class CompletionChoice(Result):
    """A completion choice."""
    text: str
    index: int


class CompletionsResult(Result):
    """Response for text completion."""
    id: str
    object: str
    created: float
    model: str
    choices: List[CompletionChoice]


# Images

class ImagesQuery(Query):
    """Request for image generation."""
    prompt: str = Field(description="At most 1000 characters")
    n: Optional[int] = Field(default=None, description="Between 1 and 10")
    size: Optional[str] = None


class ImageURL(Result):
    """A generated image location."""
    url: str


class ImagesResult(Result):
    """Response for image generation."""
    created: float
    data: List[ImageURL]


# Embeddings

class EmbeddingsQuery(Query):
    """Request for embeddings."""
    model: str
    input: str


class Embedding(Result):
    """A single embedding vector."""
    object: str
    embedding: List[float]
    index: int


class EmbeddingsResult(Result):
    """Response for embeddings."""
    data: List[Embedding]


# Chat

class Role(str, Enum):
    """Author of a chat message."""
    SYSTEM = "system"
    ASSISTANT = "assistant"
    USER = "user"


class ChatMessage(BaseModel):
    """A chat message."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    role: Role
    content: str


class ChatQuery(Query):
    """Request for chat completion."""
    model: str
    messages: List[ChatMessage]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    # Serialized as given; responses are always decoded as a single body.
    stream: Optional[bool] = None
    stop: Optional[List[str]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None


class ChatChoice(Result):
    """A chat completion choice."""
    index: int
    message: ChatMessage
    finish_reason: str


class Usage(Result):
    """Token usage information."""
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatResult(Result):
    """Response for chat completion."""
    id: str
    object: str
    created: float
    model: str
    choices: List[ChatChoice]
    usage: Usage
