from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ReasoningPrompt:
    """A system instruction paired with a single user payload."""

    system: str
    user: str


class TextReasoner(Protocol):
    """Interface for the external reasoning service."""

    async def generate(self, prompt: ReasoningPrompt) -> str:
        """Send the prompt and return the raw, untrusted reply text.

        Raises:
            ReasoningTransportError: If the service cannot be reached or
                replies with an error.
        """
        ...
