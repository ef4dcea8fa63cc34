"""Outlet search using the NewsAPI ``everything`` endpoint."""

import logging
from typing import Any

import httpx

from news_verifier.config.models import NewsAPIConfig, OutletConfig
from news_verifier.data import Article, SearchTerms
from news_verifier.query import build_query_plan

logger = logging.getLogger(__name__)


class NewsAPISearcher:
    """Search a single outlet through NewsAPI.

    For each candidate query of the plan (headline, entities, keywords) the
    outlet's strategies are tried in order, one request each. The first
    request that returns any article wins. Failed requests are logged and
    treated as empty, so ``search`` never raises.

    Args:
        outlet: Outlet descriptor (domains, boost expression, strategy order).
        api_key: NewsAPI key.
        config: Endpoint and paging settings.
    """

    def __init__(
        self,
        outlet: OutletConfig,
        *,
        api_key: str,
        config: NewsAPIConfig | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("NewsAPI key required.")
        self._outlet = outlet
        self._api_key = api_key
        self._config = config or NewsAPIConfig()

    @property
    def outlet(self) -> OutletConfig:
        return self._outlet

    async def search(self, terms: SearchTerms) -> list[Article]:
        """Search the outlet for articles matching the claim's terms.

        Args:
            terms: Search terms derived from the claim.

        Returns:
            Up to ``page_size`` articles, or an empty list once every
            candidate query is exhausted.
        """
        name = self._outlet.display_name
        queries = build_query_plan(terms)
        if not queries:
            logger.info("No usable %s queries for claim", name)
            return []

        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            for query in queries:
                logger.info(f"Trying {name} search with: {query}")
                for strategy in self._outlet.strategies:
                    articles = await self._attempt(client, query, strategy)
                    if articles:
                        logger.info(
                            f"{name} search successful with query: {query} Found: {len(articles)}"
                        )
                        return articles[: self._config.page_size]

        return []

    def _params(self, query: str, strategy: str) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "sortBy": self._config.sort_by,
            "pageSize": self._config.page_size,
            "language": self._config.language,
            "apiKey": self._api_key,
        }
        if strategy == "domain":
            params["q"] = query
            params["domains"] = self._outlet.domains
        else:
            params["q"] = f"{query} AND ({self._outlet.boost})"
        return params

    async def _attempt(
        self, client: httpx.AsyncClient, query: str, strategy: str
    ) -> list[Article]:
        """Run one request; any failure yields an empty list."""
        name = self._outlet.display_name
        try:
            response = await client.get(self._config.base_url, params=self._params(query, strategy))
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("%s search error: %s", name, e)
            return []

        if not isinstance(data, dict):
            logger.error("%s NewsAPI returned a non-object body", name)
            return []
        if not response.is_success:
            logger.error("%s NewsAPI error: %s", name, data.get("message") or data.get("code"))
            return []

        items = data.get("articles")
        if not isinstance(items, list):
            return []
        return [_to_article(item) for item in items if isinstance(item, dict)]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_article(item: dict[str, Any]) -> Article:
    source = item.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None
    return Article(
        url=_text(item.get("url")),
        source_name=_text(source_name),
        title=_text(item.get("title")),
        description=_text(item.get("description")),
        content=_text(item.get("content")),
        published_at=_text(item.get("publishedAt")),
    )
