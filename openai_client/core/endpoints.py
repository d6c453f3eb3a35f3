"""Fixed service endpoints."""
from enum import Enum


class Endpoint(str, Enum):
    """Resource paths served by the API."""
    COMPLETIONS = "/v1/completions"
    IMAGES = "/v1/images/generations"
    EMBEDDINGS = "/v1/embeddings"
    CHATS = "/v1/chat/completions"

    def url(self, base_url: str) -> str:
        """Join the path onto a base URL."""
        return base_url.rstrip("/") + self.value
