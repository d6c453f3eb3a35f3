"""Transport abstraction for performing HTTP calls."""
from abc import ABC, abstractmethod
from typing import Dict, Optional

import aiohttp

from openai_client.models.internal import HTTPRequest, HTTPResponse
from openai_client.utils.logging import get_logger

logger = get_logger(__name__)


def _join_headers(headers) -> Dict[str, str]:
    """Fold repeated header fields into one comma-separated value."""
    joined: Dict[str, str] = {}
    for name, value in headers.items():
        joined[name] = f"{joined[name]}, {value}" if name in joined else value
    return joined


class Transport(ABC):
    """
    Contract for transports.

    Every implementation MUST:
    - Perform exactly one network call per send()
    - Raise its own exception on network failure instead of returning
    """

    @abstractmethod
    async def send(self, request: HTTPRequest) -> HTTPResponse:
        """Perform the request and return the raw response."""

    async def close(self) -> None:
        """Release any resources held by the transport."""


class AiohttpTransport(Transport):
    """Transport backed by an aiohttp client session."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        """Use the given session, or create one lazily and own it."""
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        session = await self._get_session()
        async with session.request(
            request.method,
            request.url,
            data=request.body,
            headers=request.headers,
            timeout=aiohttp.ClientTimeout(total=request.timeout),
        ) as response:
            body = await response.read()
            return HTTPResponse(
                status=response.status,
                headers=_join_headers(response.headers),
                body=body,
            )

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("session_closed")
        self._session = None
