"""Derive search strings from free claim text.

No API calls are made; the same text always yields the same terms.
"""

import re

from news_verifier.data import SearchTerms

MAX_ENTITIES = 4
MAX_KEYWORDS = 4
MIN_KEYWORD_LENGTH = 6
MAX_HEADLINE_QUERY_LENGTH = 100
MIN_QUERY_LENGTH = 6

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "from", "as", "is", "was", "are", "were", "been", "be", "have", "has", "had",
        "that", "this", "it", "their",
    }
)

# A capitalized word, optionally followed by a second one ("Gaza", "Joe Biden").
_PROPER_NOUN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?\b")
_QUOTES = "'\""


def _first_line(text: str) -> str:
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


def _trim_quotes(line: str) -> str:
    if line[:1] in _QUOTES:
        line = line[1:]
    if line[-1:] in _QUOTES:
        line = line[:-1]
    return line.strip()


def _first_distinct(tokens: list[str], limit: int) -> list[str]:
    seen: list[str] = []
    for token in tokens:
        if token not in seen:
            seen.append(token)
            if len(seen) == limit:
                break
    return seen


def extract_search_terms(text: str) -> SearchTerms:
    """Extract a headline, proper-noun entities and keywords from claim text.

    Args:
        text: Raw claim text. Callers reject empty text before getting here.

    Returns:
        SearchTerms. ``entities`` is empty when the text has no capitalized
        words and ``keywords`` is empty when every long token is a stop word.
    """
    headline = _trim_quotes(_first_line(text))

    entities = _first_distinct(_PROPER_NOUN.findall(text), MAX_ENTITIES)

    candidates = [
        word
        for word in text.lower().split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]
    keywords = _first_distinct(candidates, MAX_KEYWORDS)

    return SearchTerms(
        headline=headline,
        keywords=" ".join(keywords),
        entities=" ".join(entities),
    )


def build_query_plan(terms: SearchTerms) -> list[str]:
    """Order the candidate queries an outlet search should try.

    The headline (cut to 100 characters) comes first, then the entities, then
    the keywords. Candidates of five characters or fewer are dropped.
    """
    candidates = [
        terms.headline[:MAX_HEADLINE_QUERY_LENGTH],
        terms.entities,
        terms.keywords,
    ]
    return [query for query in candidates if len(query) >= MIN_QUERY_LENGTH]
