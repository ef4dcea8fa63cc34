"""Reasoning through Anthropic's Messages API."""

import logging

import anthropic

from news_verifier.config.models import ClaudeReasonerConfig
from news_verifier.errors import ReasoningTransportError
from news_verifier.reasoning.base import ReasoningPrompt

logger = logging.getLogger(__name__)


class ClaudeReasoner:
    """Send prompts to Claude and return the concatenated text blocks.

    Args:
        api_key: Anthropic API key.
        config: Model and token limit settings.
    """

    def __init__(self, *, api_key: str, config: ClaudeReasonerConfig | None = None) -> None:
        if not api_key:
            raise ValueError("Anthropic API key required.")
        self._config = config or ClaudeReasonerConfig()
        self._client = anthropic.AsyncAnthropic(api_key=api_key)

    async def generate(self, prompt: ReasoningPrompt) -> str:
        try:
            response = await self._client.messages.create(
                model=self._config.model,
                max_tokens=self._config.max_tokens,
                system=prompt.system,
                messages=[{"role": "user", "content": prompt.user}],
            )
        except anthropic.APIStatusError as e:
            logger.error("Claude API error %s: %s", e.status_code, e.message)
            raise ReasoningTransportError(
                "Claude API error", status=e.status_code, body=str(e.body)
            ) from e
        except anthropic.APIError as e:
            logger.error("Claude request error: %s", e)
            raise ReasoningTransportError(f"Request failed: {e}") from e

        text = ""
        for block in response.content:
            if hasattr(block, "text"):
                text += block.text
        if not text:
            raise ReasoningTransportError("No content in reasoning response")
        return text
