from news_verifier.search.base import OutletSearcher
from news_verifier.search.corpus import Corpus, CorpusAggregator
from news_verifier.search.newsapi import NewsAPISearcher

__all__ = [
    "Corpus",
    "CorpusAggregator",
    "NewsAPISearcher",
    "OutletSearcher",
]
