"""Data models for the news verifier."""

from news_verifier.data.models import Article, Claim, SearchTerms
from news_verifier.data.result import ArticleMatch, OutletVerdict, VerificationResult

__all__ = [
    "Article",
    "ArticleMatch",
    "Claim",
    "OutletVerdict",
    "SearchTerms",
    "VerificationResult",
]
