"""Tests for NewsAPISearcher."""

from unittest.mock import MagicMock

import httpx
import pytest

from news_verifier.config import DEFAULT_OUTLETS, NewsAPIConfig
from news_verifier.data import Article, SearchTerms
from news_verifier.search import NewsAPISearcher

BBC, CNN, ABC, GUARDIAN = DEFAULT_OUTLETS

TERMS = SearchTerms(
    headline="Israeli strikes hit Gaza City",
    entities="Israeli Gaza City",
    keywords="israeli strikes overnight",
)


def _response(data: object, *, ok: bool = True) -> MagicMock:
    response = MagicMock()
    response.is_success = ok
    response.json.return_value = data
    return response


class TestNewsAPISearcher:
    """Tests for NewsAPISearcher."""

    @pytest.fixture
    def mock_response_data(self) -> dict:
        """Sample NewsAPI response."""
        return {
            "status": "ok",
            "totalResults": 2,
            "articles": [
                {
                    "source": {"id": "bbc-news", "name": "BBC News"},
                    "author": None,
                    "title": "Strikes hit Gaza",
                    "description": "Overnight strikes were reported.",
                    "url": "https://www.bbc.com/news/1",
                    "publishedAt": "2026-02-01T10:00:00Z",
                    "content": "Strikes hit Gaza City overnight...",
                },
                {
                    "source": {"id": None, "name": "BBC News"},
                    "title": "Gaza ceasefire talks",
                    "description": None,
                    "url": "https://www.bbc.com/news/2",
                    "publishedAt": "2026-02-01T11:00:00Z",
                    "content": None,
                },
            ],
        }

    @pytest.fixture
    def searcher(self) -> NewsAPISearcher:
        return NewsAPISearcher(BBC, api_key="test-key")

    def test_init_requires_api_key(self):
        """Should raise if no API key provided."""
        with pytest.raises(ValueError, match="key required"):
            NewsAPISearcher(BBC, api_key="")

    async def test_search_returns_articles(
        self,
        searcher: NewsAPISearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should map NewsAPI items to Article objects."""

        async def mock_get(self, url, params=None):
            return _response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await searcher.search(TERMS)

        assert len(articles) == 2
        assert all(isinstance(a, Article) for a in articles)
        assert articles[0].source_name == "BBC News"
        assert articles[0].title == "Strikes hit Gaza"
        assert articles[0].published_at == "2026-02-01T10:00:00Z"
        assert articles[1].description == ""
        assert articles[1].content == ""

    async def test_domain_strategy_params(
        self,
        searcher: NewsAPISearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """First BBC attempt should be domain-restricted with the headline."""
        captured: list[dict] = []

        async def mock_get(self, url, params=None):
            captured.append(dict(params or {}))
            return _response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await searcher.search(TERMS)

        assert len(captured) == 1
        params = captured[0]
        assert params["q"] == "Israeli strikes hit Gaza City"
        assert params["domains"] == "bbc.com,bbc.co.uk"
        assert params["sortBy"] == "relevancy"
        assert params["pageSize"] == 10
        assert params["language"] == "en"
        assert params["apiKey"] == "test-key"

    async def test_boosted_strategy_first_for_cnn(
        self,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """CNN tries the boosted query before the domain filter."""
        captured: list[dict] = []

        async def mock_get(self, url, params=None):
            captured.append(dict(params or {}))
            return _response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await NewsAPISearcher(CNN, api_key="test-key").search(TERMS)

        assert captured[0]["q"] == 'Israeli strikes hit Gaza City AND (cnn.com OR "CNN")'
        assert "domains" not in captured[0]

    async def test_falls_back_until_articles_found(
        self,
        searcher: NewsAPISearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should try the next strategy, then the next query, on empty results."""
        captured: list[dict] = []

        async def mock_get(self, url, params=None):
            captured.append(dict(params or {}))
            if len(captured) < 3:
                return _response({"status": "ok", "articles": []})
            return _response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await searcher.search(TERMS)

        assert len(articles) == 2
        assert len(captured) == 3
        assert captured[1]["q"] == 'Israeli strikes hit Gaza City AND (bbc.com OR "BBC")'
        assert captured[2]["q"] == "Israeli Gaza City"

    async def test_error_responses_are_not_fatal(
        self,
        searcher: NewsAPISearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """An error status counts as zero results and the ladder continues."""
        call_count = 0

        async def mock_get(self, url, params=None):
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                return _response(
                    {"status": "error", "code": "rateLimited", "message": "Too many requests"},
                    ok=False,
                )
            return _response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await searcher.search(TERMS)

        assert len(articles) == 2
        assert call_count == 2

    async def test_exhausted_ladder_returns_empty(
        self,
        searcher: NewsAPISearcher,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should make at most queries x strategies attempts and never raise."""
        call_count = 0

        async def mock_get(self, url, params=None):
            nonlocal call_count
            call_count += 1
            if call_count % 2:
                raise httpx.ConnectError("connection refused")
            response = _response(None)
            response.json.side_effect = ValueError("not json")
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await searcher.search(TERMS)

        assert articles == []
        assert call_count == 6

    async def test_no_usable_queries_makes_no_requests(
        self,
        searcher: NewsAPISearcher,
        monkeypatch: pytest.MonkeyPatch,
    ):
        call_count = 0

        async def mock_get(self, url, params=None):
            nonlocal call_count
            call_count += 1
            return _response({"articles": []})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await searcher.search(SearchTerms(headline="Hi"))

        assert articles == []
        assert call_count == 0

    async def test_caps_articles_at_page_size(self, monkeypatch: pytest.MonkeyPatch):
        items = [
            {"source": {"name": "BBC News"}, "title": f"A{i}", "url": f"https://bbc.com/{i}"}
            for i in range(15)
        ]

        async def mock_get(self, url, params=None):
            return _response({"articles": items})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        searcher = NewsAPISearcher(BBC, api_key="k", config=NewsAPIConfig(page_size=10))
        articles = await searcher.search(TERMS)

        assert len(articles) == 10
