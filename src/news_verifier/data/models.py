"""Core data models for the verification pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Claim:
    """A piece of submitted news text to verify."""

    text: str
    source_url: str | None = None


@dataclass(frozen=True)
class SearchTerms:
    """Search strings derived once from a claim.

    ``entities`` and ``keywords`` hold up to four space-separated tokens each
    and may be empty.
    """

    headline: str
    keywords: str = ""
    entities: str = ""


@dataclass(frozen=True)
class Article:
    """A news article retrieved from an outlet search."""

    url: str
    source_name: str
    title: str = ""
    description: str = ""
    content: str = ""
    published_at: str = ""
