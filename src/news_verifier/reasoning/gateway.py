"""Reasoning through an OpenAI-compatible chat-completions gateway."""

import logging

import httpx

from news_verifier.config.models import GatewayReasonerConfig
from news_verifier.errors import ReasoningTransportError
from news_verifier.reasoning.base import ReasoningPrompt

logger = logging.getLogger(__name__)


class GatewayReasoner:
    """Send prompts to a chat-completions endpoint over HTTP.

    Args:
        api_key: Bearer token for the gateway.
        config: Endpoint, model and timeout settings.
    """

    def __init__(self, *, api_key: str, config: GatewayReasonerConfig | None = None) -> None:
        if not api_key:
            raise ValueError("Gateway API key required.")
        self._api_key = api_key
        self._config = config or GatewayReasonerConfig()

    async def generate(self, prompt: ReasoningPrompt) -> str:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.user},
            ],
        }

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(url, headers=headers, json=body)
        except httpx.HTTPError as e:
            logger.error("Reasoning gateway request error: %s", e)
            raise ReasoningTransportError(f"Request failed: {e}") from e

        if not response.is_success:
            logger.error("Reasoning gateway error: %s", response.text)
            raise ReasoningTransportError(
                "Reasoning gateway error", status=response.status_code, body=response.text
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ReasoningTransportError("Reasoning gateway returned a non-JSON body") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        logger.info("AI response received: has_choices=%s", bool(choices))
        content = None
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            message = choices[0].get("message") or {}
            content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content:
            raise ReasoningTransportError("No content in reasoning response")
        return content
