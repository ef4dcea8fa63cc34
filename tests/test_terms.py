"""Tests for search term extraction and query planning."""

from news_verifier.data import SearchTerms
from news_verifier.query import STOP_WORDS, build_query_plan, extract_search_terms

SAMPLE = (
    "Israeli strikes hit Gaza City overnight\n"
    "Officials in Washington said the conflict continues."
)


class TestExtractSearchTerms:
    """Tests for extract_search_terms."""

    def test_headline_is_first_line(self) -> None:
        terms = extract_search_terms(SAMPLE)
        assert terms.headline == "Israeli strikes hit Gaza City overnight"

    def test_headline_skips_blank_lines_and_trims_quotes(self) -> None:
        terms = extract_search_terms('\n\n  "Markets rally after rate cut"  \nBody text')
        assert terms.headline == "Markets rally after rate cut"

    def test_entities_are_capitalized_phrases_in_first_seen_order(self) -> None:
        terms = extract_search_terms(SAMPLE)
        assert terms.entities == "Israeli Gaza City Officials Washington"

    def test_entities_are_deduplicated_and_capped(self) -> None:
        terms = extract_search_terms("Biden met Biden and Trump met Putin in Paris near Rome")
        assert terms.entities.split() == ["Biden", "Trump", "Putin", "Paris"]

    def test_two_word_names_stay_together(self) -> None:
        terms = extract_search_terms("Joe Biden spoke with Donald Trump today")
        assert terms.entities == "Joe Biden Donald Trump"

    def test_keywords_are_long_lowercase_tokens(self) -> None:
        terms = extract_search_terms(SAMPLE)
        assert terms.keywords == "israeli strikes overnight officials"

    def test_keywords_are_deduplicated(self) -> None:
        terms = extract_search_terms("pandemic pandemic pandemic lockdown")
        assert terms.keywords == "pandemic lockdown"

    def test_keywords_exclude_short_tokens_and_stop_words(self) -> None:
        terms = extract_search_terms("A short note on rising prices across regional markets")
        keywords = terms.keywords.split()
        assert len(keywords) <= 4
        assert all(len(word) > 5 for word in keywords)
        assert not STOP_WORDS.intersection(keywords)

    def test_lowercase_text_has_no_entities(self) -> None:
        terms = extract_search_terms("no capital letters anywhere in this sentence")
        assert terms.entities == ""

    def test_stop_word_text_has_no_keywords(self) -> None:
        terms = extract_search_terms("the and this that")
        assert terms.keywords == ""
        assert terms.entities == ""

    def test_is_deterministic(self) -> None:
        assert extract_search_terms(SAMPLE) == extract_search_terms(SAMPLE)


class TestBuildQueryPlan:
    """Tests for build_query_plan."""

    def test_orders_headline_entities_keywords(self) -> None:
        terms = SearchTerms(
            headline="Israeli strikes hit Gaza City",
            entities="Israeli Gaza City",
            keywords="israeli strikes overnight",
        )
        assert build_query_plan(terms) == [
            "Israeli strikes hit Gaza City",
            "Israeli Gaza City",
            "israeli strikes overnight",
        ]

    def test_truncates_headline_to_100_characters(self) -> None:
        terms = SearchTerms(headline="x" * 150)
        assert build_query_plan(terms) == ["x" * 100]

    def test_drops_candidates_of_five_characters_or_fewer(self) -> None:
        terms = SearchTerms(headline="Short", entities="Paris", keywords="london")
        assert build_query_plan(terms) == ["london"]

    def test_empty_terms_give_empty_plan(self) -> None:
        assert build_query_plan(SearchTerms(headline="Hi")) == []
