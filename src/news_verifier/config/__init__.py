"""Configuration module for the news verifier."""

from news_verifier.config.models import (
    DEFAULT_OUTLETS,
    ClaudeReasonerConfig,
    Credentials,
    GatewayReasonerConfig,
    LoggingConfig,
    NewsAPIConfig,
    OutletConfig,
    ReasonerConfig,
    ScoringConfig,
    VerifierConfig,
)
from news_verifier.config.factory import create_from_config
from news_verifier.config.loader import get_default_config_path, load_config

__all__ = [
    "DEFAULT_OUTLETS",
    "ClaudeReasonerConfig",
    "Credentials",
    "GatewayReasonerConfig",
    "LoggingConfig",
    "NewsAPIConfig",
    "OutletConfig",
    "ReasonerConfig",
    "ScoringConfig",
    "VerifierConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
