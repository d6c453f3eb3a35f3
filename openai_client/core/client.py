"""HTTP client for the OpenAI API."""
from typing import Optional, Type, TypeVar

from pydantic import ValidationError

from openai_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings, get_settings
from openai_client.core.endpoints import Endpoint
from openai_client.core.errors import APIError, EmptyDataError
from openai_client.core.transport import AiohttpTransport, Transport
from openai_client.models.internal import APIErrorResponse, HTTPRequest
from openai_client.models.openai import (
    ChatQuery,
    ChatResult,
    CompletionsQuery,
    CompletionsResult,
    EmbeddingsQuery,
    EmbeddingsResult,
    ImagesQuery,
    ImagesResult,
    Query,
    Result,
)
from openai_client.utils.logging import get_logger

logger = get_logger(__name__)

ResultT = TypeVar("ResultT", bound=Result)


class OpenAIClient:
    """Async client for the completions, images, embeddings and chat endpoints."""

    def __init__(
        self,
        api_token: str,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize client with a token and a transport.

        A transport passed in stays owned by the caller and is not closed
        by close(); the default aiohttp transport is.
        """
        self._api_token = api_token
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else AiohttpTransport()
        self._base_url = base_url
        self._timeout = timeout

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
    ) -> "OpenAIClient":
        """Build a client from environment settings."""
        settings = settings or get_settings()
        if not settings.openai_api_key:
            raise ValueError(
                "An API key is required. Set OPENAI_API_KEY in your environment."
            )
        config = settings.client_config()
        return cls(
            api_token=settings.openai_api_key,
            transport=transport,
            base_url=config.base_url,
            timeout=config.request_timeout,
        )

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def timeout(self) -> float:
        return self._timeout

    async def completions(
        self, query: CompletionsQuery, timeout: Optional[float] = None
    ) -> CompletionsResult:
        """Complete a prompt."""
        return await self.perform_request(
            query, Endpoint.COMPLETIONS, CompletionsResult, timeout
        )

    async def images(
        self, query: ImagesQuery, timeout: Optional[float] = None
    ) -> ImagesResult:
        """Generate images from a prompt."""
        return await self.perform_request(query, Endpoint.IMAGES, ImagesResult, timeout)

    async def embeddings(
        self, query: EmbeddingsQuery, timeout: Optional[float] = None
    ) -> EmbeddingsResult:
        """Get a vector representation of the input."""
        return await self.perform_request(
            query, Endpoint.EMBEDDINGS, EmbeddingsResult, timeout
        )

    async def chats(
        self, query: ChatQuery, timeout: Optional[float] = None
    ) -> ChatResult:
        """Complete a chat conversation."""
        return await self.perform_request(query, Endpoint.CHATS, ChatResult, timeout)

    async def perform_request(
        self,
        query: Query,
        endpoint: Endpoint,
        result_type: Type[ResultT],
        timeout: Optional[float] = None,
    ) -> ResultT:
        """
        Send a query and decode the response.

        Raises the transport's own exception on network failure,
        EmptyDataError on an empty body, APIError when the body is an
        error envelope, and the original ValidationError when the body
        matches neither shape.
        """
        request = self.make_request(query, endpoint, timeout)

        logger.debug("request_sent", endpoint=endpoint.value, size=len(request.body))
        response = await self._transport.send(request)
        logger.debug(
            "response_received",
            endpoint=endpoint.value,
            status=response.status,
            size=len(response.body),
        )

        if not response.body:
            raise EmptyDataError(request.url)

        try:
            return result_type.model_validate_json(response.body)
        except ValidationError as e:
            decode_error = e

        try:
            error_response = APIErrorResponse.model_validate_json(response.body)
        except ValidationError:
            raise decode_error from None

        raise APIError.from_response(error_response)

    def make_request(
        self, query: Query, endpoint: Endpoint, timeout: Optional[float] = None
    ) -> HTTPRequest:
        """Build the POST request for a query."""
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_token}"
        }
        return HTTPRequest(
            method="POST",
            url=endpoint.url(self._base_url),
            headers=headers,
            body=query.to_json(),
            timeout=self._timeout if timeout is None else timeout,
        )

    async def close(self) -> None:
        """Close the transport if the client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> "OpenAIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
