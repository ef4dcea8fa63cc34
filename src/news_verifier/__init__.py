"""News Verifier: cross-reference news text against major outlets."""

from news_verifier.config import (
    Credentials,
    OutletConfig,
    ScoringConfig,
    VerifierConfig,
    create_from_config,
    load_config,
)
from news_verifier.data import (
    Article,
    ArticleMatch,
    Claim,
    OutletVerdict,
    SearchTerms,
    VerificationResult,
)
from news_verifier.errors import (
    ConfigurationError,
    InvalidReasoningOutput,
    MissingContentError,
    ReasoningTransportError,
    VerifierError,
)
from news_verifier.normalize import normalize_result
from news_verifier.pipeline import NewsAnalysis, NewsVerifier, VerifyNewsRequest, VerifyResponse
from news_verifier.prompt import build_verification_prompt
from news_verifier.query import build_query_plan, extract_search_terms
from news_verifier.reasoning import ClaudeReasoner, GatewayReasoner, ReasoningPrompt, TextReasoner
from news_verifier.run_logger import RunLogger
from news_verifier.scoring import OverallScore, Verdict, aggregate_scores
from news_verifier.search import Corpus, CorpusAggregator, NewsAPISearcher, OutletSearcher
from news_verifier.service import handle_request

__all__ = [
    # Models
    "Article",
    "ArticleMatch",
    "Claim",
    "Corpus",
    "NewsAnalysis",
    "OutletVerdict",
    "OverallScore",
    "ReasoningPrompt",
    "SearchTerms",
    "Verdict",
    "VerificationResult",
    "VerifyNewsRequest",
    "VerifyResponse",
    # Errors
    "ConfigurationError",
    "InvalidReasoningOutput",
    "MissingContentError",
    "ReasoningTransportError",
    "VerifierError",
    # Functions
    "aggregate_scores",
    "build_query_plan",
    "build_verification_prompt",
    "extract_search_terms",
    "handle_request",
    "normalize_result",
    # Protocols
    "OutletSearcher",
    "TextReasoner",
    # Searchers
    "CorpusAggregator",
    "NewsAPISearcher",
    # Reasoners
    "ClaudeReasoner",
    "GatewayReasoner",
    # Pipeline
    "NewsVerifier",
    # Logging
    "RunLogger",
    # Config
    "Credentials",
    "OutletConfig",
    "ScoringConfig",
    "VerifierConfig",
    "create_from_config",
    "load_config",
]
