from news_verifier.query.terms import STOP_WORDS, build_query_plan, extract_search_terms

__all__ = [
    "STOP_WORDS",
    "build_query_plan",
    "extract_search_terms",
]
