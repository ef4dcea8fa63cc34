"""Pydantic configuration models for the news verifier."""

import math
import os
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from news_verifier.errors import ConfigurationError

# ============================================================
# Outlet Configs
# ============================================================

SearchStrategy = Literal["domain", "boosted"]


class OutletConfig(BaseModel):
    """A news outlet to cross-reference claims against.

    ``domain`` searches restrict NewsAPI to ``domains``; ``boosted`` searches
    append ``AND (<boost>)`` to the query instead. ``strategies`` sets the
    order they are tried for every candidate query.
    """

    label: str
    display_name: str
    domains: str
    boost: str
    source_keyword: str
    strategies: tuple[SearchStrategy, ...] = ("domain", "boosted")

    model_config = {"frozen": True}


DEFAULT_OUTLETS: tuple[OutletConfig, ...] = (
    OutletConfig(
        label="bbc",
        display_name="BBC",
        domains="bbc.com,bbc.co.uk",
        boost='bbc.com OR "BBC"',
        source_keyword="bbc",
    ),
    OutletConfig(
        label="cnn",
        display_name="CNN",
        domains="cnn.com",
        boost='cnn.com OR "CNN"',
        source_keyword="cnn",
        strategies=("boosted", "domain"),
    ),
    OutletConfig(
        label="abc",
        display_name="ABC News",
        domains="abcnews.go.com",
        boost='abcnews OR "ABC News"',
        source_keyword="abc",
    ),
    OutletConfig(
        label="guardian",
        display_name="Guardian",
        domains="theguardian.com",
        boost='theguardian OR "The Guardian"',
        source_keyword="guardian",
    ),
)


class NewsAPIConfig(BaseModel):
    """Configuration for NewsAPI outlet searches."""

    base_url: str = "https://newsapi.org/v2/everything"
    language: str = "en"
    sort_by: str = "relevancy"
    page_size: int = Field(default=10, ge=1, le=100)
    timeout: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Reasoner Configs
# ============================================================


class GatewayReasonerConfig(BaseModel):
    """Configuration for an OpenAI-compatible chat-completions gateway."""

    type: Literal["gateway"] = "gateway"
    base_url: str = "https://ai.gateway.lovable.dev/v1"
    model: str = "google/gemini-2.5-flash"
    timeout: float = 120.0
    api_key_env: str = "AI_GATEWAY_API_KEY"

    model_config = {"frozen": True}


class ClaudeReasonerConfig(BaseModel):
    """Configuration for ClaudeReasoner."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 4096
    api_key_env: str = "CLAUDE_API_KEY"

    model_config = {"frozen": True}


ReasonerConfig = Annotated[
    GatewayReasonerConfig | ClaudeReasonerConfig,
    Field(discriminator="type"),
]


# ============================================================
# Scoring Config
# ============================================================


class ScoringConfig(BaseModel):
    """Weights and thresholds for the overall score.

    ``relatability_score`` and ``trustworthiness_score`` stand in for the
    sibling dimensions, which are scored outside this package.
    """

    legitimacy_weight: float = 0.55
    relatability_weight: float = 0.30
    trustworthiness_weight: float = 0.15
    verified_threshold: int = 75
    suspicious_threshold: int = 50
    relatability_score: float = 72
    trustworthiness_score: float = 68

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_weights_and_thresholds(self) -> "ScoringConfig":
        total = self.legitimacy_weight + self.relatability_weight + self.trustworthiness_weight
        if not math.isclose(total, 1.0):
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")
        if self.verified_threshold <= self.suspicious_threshold:
            raise ValueError("verified_threshold must be greater than suspicious_threshold")
        return self


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-run JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class VerifierConfig(BaseModel):
    """Root configuration for the news verifier."""

    newsapi: NewsAPIConfig = Field(default_factory=NewsAPIConfig)
    outlets: tuple[OutletConfig, ...] = DEFAULT_OUTLETS
    reasoner: GatewayReasonerConfig | ClaudeReasonerConfig = Field(
        default_factory=GatewayReasonerConfig, discriminator="type"
    )
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_unique_labels(self) -> "VerifierConfig":
        labels = [outlet.label for outlet in self.outlets]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Outlet labels must be unique, got {labels}")
        return self


# ============================================================
# Credentials
# ============================================================


class Credentials(BaseModel):
    """API keys for the outlet search and reasoning services.

    Build explicitly, or with ``from_env`` which is the only place the
    environment is read.
    """

    newsapi_key: str | None = None
    reasoner_api_key: str | None = None
    reasoner_key_name: str = "AI_GATEWAY_API_KEY"

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, reasoner: GatewayReasonerConfig | ClaudeReasonerConfig) -> "Credentials":
        return cls(
            newsapi_key=os.environ.get("NEWSAPI_KEY"),
            reasoner_api_key=os.environ.get(reasoner.api_key_env),
            reasoner_key_name=reasoner.api_key_env,
        )

    def require(self) -> tuple[str, str]:
        """Return ``(newsapi_key, reasoner_api_key)``.

        Raises:
            ConfigurationError: Naming the first missing credential.
        """
        if not self.reasoner_api_key:
            raise ConfigurationError(self.reasoner_key_name)
        if not self.newsapi_key:
            raise ConfigurationError("NEWSAPI_KEY")
        return (self.newsapi_key, self.reasoner_api_key)
