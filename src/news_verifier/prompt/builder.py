"""Cross-reference prompt for the reasoning service.

The scoring policy below (match criteria, similarity floors and the
source-count to legitimacy mapping) is reproduced verbatim so verdicts stay
comparable across providers.
"""

from news_verifier.data import Article, Claim
from news_verifier.reasoning.base import ReasoningPrompt
from news_verifier.search.corpus import Corpus

SYSTEM_PROMPT = """\
You are a helpful news verification assistant. When comparing articles, be \
generous with matches - articles covering the same general event or topic \
should be considered related even if specific details differ. Return only \
valid JSON without markdown formatting.\
"""

NO_ARTICLES_TEXT = "No matching articles found in NewsAPI."

POLICY = """\
CRITICAL INSTRUCTIONS FOR VERIFICATION:

1. MATCHING CRITERIA (be VERY LIBERAL with matches):
   - Same topic/event (e.g., Russia-Ukraine war, Gaza conflict, political scandal) = HIGH match
   - Same location mentioned (e.g., Ukraine, Gaza, Washington) = MODERATE match
   - Same timeframe or date range = MODERATE match
   - Related events from same category = MODERATE match
   - If articles cover the SAME GENERAL STORY even with different specific details = VERIFIED

2. VERIFICATION THRESHOLDS (use these generously):
   - Mark as VERIFIED=TRUE if articles are about the SAME TOPIC
   - Articles don't need exact matches - covering the same event/topic is sufficient
   - Example: User's content about "Israeli strikes in Gaza" matches ANY article about Israel-Gaza conflict

3. SIMILARITY SCORING (be GENEROUS - articles found via keyword search are already topically related):
   - If articles found AND topic matches: MINIMUM 65% similarity (start here)
   - 80-100: Exact same event with matching details
   - 65-79: Same event/topic, details may vary
   - 50-64: Related topic, similar timeframe
   - 30-49: Same general category but different specific event
   - 0-29: Completely different topics (use ONLY if truly unrelated)

4. IMPORTANT: Articles were found through keyword search, so they're already topically relevant. Don't score below 60% unless articles are truly about different topics.

5. LEGITIMACY SCORE CALCULATION:
   - If 3+ sources verified: 75-95
   - If 2 sources verified: 70-85
   - If 1 source verified: 60-75
   - If 0 sources verified: 20-40

6. For each matched article, include: title, similarity score (minimum 65 if topic matches), url, publishDate, and excerpt (first 150 chars).\
"""

ARTICLE_SCHEMA = (
    '[{"title": string, "similarity": number, "url": string, '
    '"publishDate": string, "excerpt": string}]'
)

SUMMARY_SCHEMA = """\
  "legitimacyScore": number (0-100, average of all source similarities),
  "topics": string[],
  "locations": string[],
  "dates": string[],
  "credibilityIndicators": string[],
  "redFlags": string[],
  "overallAssessment": string\
"""


def format_article(article: Article, index: int) -> str:
    """Format one retrieved article for the prompt listing."""
    return (
        f"Article {index + 1} [{article.source_name}]:\n"
        f"Title: {article.title}\n"
        f"Description: {article.description or 'N/A'}\n"
        f"Content: {article.content or 'N/A'}\n"
        f"Published: {article.published_at}\n"
        f"URL: {article.url}\n"
    )


def _output_schema(labels: list[str]) -> str:
    lines = []
    for label in labels:
        lines.append(f'  "{label}Verified": boolean,')
        lines.append(f'  "{label}Similarity": number (0-100),')
        lines.append(f'  "{label}Articles": {ARTICLE_SCHEMA},')
    return "{\n" + "\n".join(lines) + "\n" + SUMMARY_SCHEMA + "\n}"


def build_verification_prompt(claim: Claim, corpus: Corpus) -> ReasoningPrompt:
    """Render the claim and retrieved corpus into a reasoning prompt.

    Args:
        claim: The submitted news text and optional source URL.
        corpus: Articles retrieved from the configured outlets.

    Returns:
        ReasoningPrompt with the fixed system instruction and the user payload.
    """
    articles = corpus.articles
    partition = corpus.partition()

    if articles:
        listing = "\n---\n".join(format_article(a, i) for i, a in enumerate(articles))
    else:
        listing = NO_ARTICLES_TEXT

    counts = "\n".join(
        f"- {outlet.display_name} Articles Found: {len(partition[outlet.label])}"
        for outlet in corpus.outlets
    )
    source_url = f"User's Source URL: {claim.source_url}\n" if claim.source_url else ""

    user = (
        "You are a news verification assistant. Compare the user's news content "
        "against real articles from major news sources.\n\n"
        f"User's News Content:\n{claim.text}\n\n"
        f"{source_url}\n\n"
        f"Found Articles ({len(articles)} total):\n{counts}\n\n"
        f"{listing}\n\n"
        f"{POLICY}\n\n"
        "Respond in JSON format only:\n"
        f"{_output_schema([outlet.label for outlet in corpus.outlets])}"
    )
    return ReasoningPrompt(system=SYSTEM_PROMPT, user=user)
