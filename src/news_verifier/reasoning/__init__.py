from news_verifier.reasoning.base import ReasoningPrompt, TextReasoner
from news_verifier.reasoning.claude import ClaudeReasoner
from news_verifier.reasoning.gateway import GatewayReasoner

__all__ = [
    "ClaudeReasoner",
    "GatewayReasoner",
    "ReasoningPrompt",
    "TextReasoner",
]
