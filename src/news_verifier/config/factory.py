"""Factory functions to create components from configuration."""

from pathlib import Path

from news_verifier.config.models import (
    ClaudeReasonerConfig,
    Credentials,
    GatewayReasonerConfig,
    VerifierConfig,
)
from news_verifier.pipeline.verifier import NewsVerifier
from news_verifier.reasoning.base import TextReasoner
from news_verifier.reasoning.claude import ClaudeReasoner
from news_verifier.reasoning.gateway import GatewayReasoner
from news_verifier.run_logger import RunLogger
from news_verifier.search.corpus import CorpusAggregator
from news_verifier.search.newsapi import NewsAPISearcher


def create_reasoner(
    config: GatewayReasonerConfig | ClaudeReasonerConfig, api_key: str
) -> TextReasoner:
    """Create a reasoning service client from config."""
    if isinstance(config, GatewayReasonerConfig):
        return GatewayReasoner(api_key=api_key, config=config)
    if isinstance(config, ClaudeReasonerConfig):
        return ClaudeReasoner(api_key=api_key, config=config)
    msg = f"Unknown reasoner config type: {type(config)}"
    raise ValueError(msg)


def create_aggregator(config: VerifierConfig, newsapi_key: str) -> CorpusAggregator:
    """Create one NewsAPI searcher per configured outlet."""
    searchers = [
        NewsAPISearcher(outlet, api_key=newsapi_key, config=config.newsapi)
        for outlet in config.outlets
    ]
    return CorpusAggregator(searchers)


def create_from_config(
    config: VerifierConfig,
    credentials: Credentials | None = None,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> NewsVerifier:
    """Create a complete verifier from root config.

    Credentials are checked once, before anything is built.

    Args:
        config: Root configuration.
        credentials: API keys. Read from the environment when omitted.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        A ready NewsVerifier.

    Raises:
        ConfigurationError: If a required credential is missing.
    """
    credentials = credentials or Credentials.from_env(config.reasoner)
    newsapi_key, reasoner_key = credentials.require()

    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    return NewsVerifier(
        create_aggregator(config, newsapi_key),
        create_reasoner(config.reasoner, reasoner_key),
        scoring=config.scoring,
        run_logger=RunLogger(log_dir=log_dir, enabled=log_enabled),
    )
