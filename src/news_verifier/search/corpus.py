"""Concurrent cross-outlet search and the resulting corpus."""

import asyncio
import logging
from dataclasses import dataclass, field

from news_verifier.config.models import OutletConfig
from news_verifier.data import Article, SearchTerms
from news_verifier.search.base import OutletSearcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corpus:
    """Articles retrieved for one claim, grouped by the outlet that found them.

    ``by_outlet`` follows the configured outlet order. Duplicates across
    outlets are kept.
    """

    outlets: tuple[OutletConfig, ...] = ()
    by_outlet: dict[str, list[Article]] = field(default_factory=dict)

    @property
    def articles(self) -> list[Article]:
        """All articles, flattened in outlet order."""
        return [
            article for outlet in self.outlets for article in self.by_outlet.get(outlet.label, [])
        ]

    def partition(self) -> dict[str, list[Article]]:
        """Group articles by publisher, matching ``source_keyword`` in the source name."""
        articles = self.articles
        return {
            outlet.label: [
                article
                for article in articles
                if outlet.source_keyword.lower() in article.source_name.lower()
            ]
            for outlet in self.outlets
        }


class CorpusAggregator:
    """Run every outlet searcher concurrently and merge the results.

    All searches are awaited to completion; an outlet that finds nothing, or
    whose searcher fails unexpectedly, contributes an empty list and never
    cancels the others.

    Args:
        searchers: One searcher per outlet, in reporting order.
    """

    def __init__(self, searchers: list[OutletSearcher]) -> None:
        self._searchers = searchers

    @property
    def outlets(self) -> tuple[OutletConfig, ...]:
        return tuple(searcher.outlet for searcher in self._searchers)

    async def collect(self, terms: SearchTerms) -> Corpus:
        """Search all outlets for the given terms.

        Args:
            terms: Search terms derived from the claim.

        Returns:
            Corpus partitioned by outlet.
        """
        logger.info(
            "Fetching from %s with multiple strategies...",
            ", ".join(searcher.outlet.display_name for searcher in self._searchers),
        )
        results = await asyncio.gather(
            *(searcher.search(terms) for searcher in self._searchers),
            return_exceptions=True,
        )

        by_outlet: dict[str, list[Article]] = {}
        for searcher, result in zip(self._searchers, results, strict=True):
            outlet = searcher.outlet
            if isinstance(result, BaseException):
                logger.warning(f"Error during {outlet.display_name} search: {result}")
                result = []
            by_outlet[outlet.label] = list(result)
            logger.info(f"Total {outlet.display_name} articles found: {len(result)}")

        return Corpus(outlets=self.outlets, by_outlet=by_outlet)
