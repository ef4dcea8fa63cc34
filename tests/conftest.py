import pytest

from fakes import make_article
from news_verifier.config import DEFAULT_OUTLETS, OutletConfig
from news_verifier.data import Article


@pytest.fixture
def outlets() -> tuple[OutletConfig, ...]:
    return DEFAULT_OUTLETS


@pytest.fixture
def bbc_article() -> Article:
    return make_article(
        "BBC News",
        "Strikes hit Gaza",
        description="Overnight strikes were reported.",
        content="Strikes hit Gaza City overnight...",
        published_at="2026-02-01T10:00:00Z",
    )
