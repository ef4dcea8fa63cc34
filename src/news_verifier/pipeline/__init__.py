from news_verifier.pipeline.request import VerifyNewsRequest, VerifyResponse, parse_request
from news_verifier.pipeline.verifier import NewsAnalysis, NewsVerifier

__all__ = [
    "NewsAnalysis",
    "NewsVerifier",
    "VerifyNewsRequest",
    "VerifyResponse",
    "parse_request",
]
