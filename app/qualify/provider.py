"""LLM provider adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from .errors import ProviderError
from .prompts import ProviderRequest

logger = logging.getLogger(__name__)


class ProviderAdapter(ABC):
    """Abstract interface for structured-output LLM providers."""

    name: str = "base"

    @abstractmethod
    def render(self, request: ProviderRequest) -> dict[str, Any]:
        """
        Render a provider request into the provider's JSON body.

        Args:
            request: The convention-neutral request

        Returns:
            JSON-serialisable request body
        """
        pass

    @abstractmethod
    async def complete(self, request: ProviderRequest) -> dict[str, Any]:
        """
        Send the request and return the decoded reply envelope.

        Raises:
            ProviderError: if the provider answers with a non-success status
        """
        pass


class OpenAIResponsesAdapter(ProviderAdapter):
    """OpenAI Responses API with JSON Schema structured outputs."""

    name = "openai-responses"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4.1-mini",
        base_url: str = "https://api.openai.com/v1",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.url = f"{base_url.rstrip('/')}/responses"
        self.timeout = timeout
        self._transport = transport

    def render(self, request: ProviderRequest) -> dict[str, Any]:
        return {
            "model": self.model,
            "input": [
                {"role": "system", "content": request.system},
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": part} for part in request.user_parts
                    ],
                },
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": request.schema_name,
                    "schema": request.schema,
                    "strict": True,
                }
            },
        }

    async def complete(self, request: ProviderRequest) -> dict[str, Any]:
        body = self.render(request)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=body,
            )

        if not response.is_success:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            logger.warning(f"Provider {self.name} returned HTTP {response.status_code}")
            raise ProviderError(response.status_code, payload)

        return response.json()
