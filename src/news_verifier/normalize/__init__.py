from news_verifier.normalize.normalizer import normalize_result, parse_reply, strip_code_fence

__all__ = [
    "normalize_result",
    "parse_reply",
    "strip_code_fence",
]
