from typing import Protocol

from news_verifier.config.models import OutletConfig
from news_verifier.data import Article, SearchTerms


class OutletSearcher(Protocol):
    """Interface for searching one news outlet for articles about a claim."""

    @property
    def outlet(self) -> OutletConfig: ...

    async def search(self, terms: SearchTerms) -> list[Article]:
        """Search the outlet, falling back through the query plan.

        Args:
            terms: Search terms derived from the claim.

        Returns:
            Articles from the first attempt that found any, or an empty list.
            Implementations never raise.
        """
        ...
