"""Verification pipeline: search outlets, reason over the corpus, score."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from news_verifier.config.models import ScoringConfig
from news_verifier.data import Claim, VerificationResult
from news_verifier.errors import MissingContentError, VerifierError
from news_verifier.normalize import normalize_result
from news_verifier.pipeline.request import VerifyResponse, parse_request
from news_verifier.prompt import build_verification_prompt
from news_verifier.query import extract_search_terms
from news_verifier.reasoning.base import TextReasoner
from news_verifier.run_logger import RunLogger
from news_verifier.scoring import OverallScore, aggregate_scores
from news_verifier.search.corpus import CorpusAggregator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewsAnalysis:
    """A verification result together with its blended overall score."""

    result: VerificationResult
    overall: OverallScore


class NewsVerifier:
    """Verify news text by cross-referencing it against several outlets.

    Flow:
    1. Derive search terms from the claim text
    2. Search every outlet concurrently and collect the corpus
    3. Build the cross-reference prompt and call the reasoning service once
    4. Normalize the reply into a schema-complete result

    Holds no per-request state; concurrent calls are independent.

    Args:
        aggregator: Runs the per-outlet searches.
        reasoner: External reasoning service.
        scoring: Weights, thresholds and sibling-dimension scores.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        aggregator: CorpusAggregator,
        reasoner: TextReasoner,
        *,
        scoring: ScoringConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._reasoner = reasoner
        self._scoring = scoring or ScoringConfig()
        self._run_logger = run_logger or RunLogger(Path("logs"), enabled=False)

    async def verify(self, claim: Claim) -> VerificationResult:
        """Cross-reference a claim and return the normalized result.

        Raises:
            MissingContentError: If the claim text is blank. Raised before any
                network call.
            ReasoningTransportError: If the reasoning call fails.
            InvalidReasoningOutput: If the reasoning reply is not parseable.
        """
        if not claim.text or not claim.text.strip():
            raise MissingContentError()

        logger.info(
            "Verifying news content: content_length=%d has_url=%s",
            len(claim.text),
            bool(claim.source_url),
        )
        run_logger = self._run_logger
        record = run_logger.start_run(claim)
        article_count = 0

        try:
            t0 = time.monotonic()
            terms = extract_search_terms(claim.text)
            logger.info(f"Search terms: {terms}")
            run_logger.log_stage(
                record,
                stage="term_extraction",
                component="extract_search_terms",
                input_data=claim.text,
                output_data=terms,
                duration_seconds=time.monotonic() - t0,
            )

            t0 = time.monotonic()
            corpus = await self._aggregator.collect(terms)
            article_count = len(corpus.articles)
            run_logger.log_stage(
                record,
                stage="search",
                component=type(self._aggregator).__name__,
                input_data=terms,
                output_data={label: len(found) for label, found in corpus.by_outlet.items()},
                duration_seconds=time.monotonic() - t0,
            )

            prompt = build_verification_prompt(claim, corpus)

            logger.info("Calling AI for verification...")
            t0 = time.monotonic()
            reply = await self._reasoner.generate(prompt)
            run_logger.log_stage(
                record,
                stage="reasoning",
                component=type(self._reasoner).__name__,
                input_data=prompt,
                output_data=reply,
                duration_seconds=time.monotonic() - t0,
            )

            t0 = time.monotonic()
            labels = [outlet.label for outlet in corpus.outlets]
            result = normalize_result(reply, labels)
            run_logger.log_stage(
                record,
                stage="normalization",
                component="normalize_result",
                input_data=labels,
                output_data=result,
                duration_seconds=time.monotonic() - t0,
            )
        except VerifierError as e:
            run_logger.finish_run(record, article_count=article_count, error=e.message)
            raise

        logger.info(
            "Verification complete: %s legitimacy_score=%s",
            {label: verdict.verified for label, verdict in result.outlets.items()},
            result.legitimacy_score,
        )
        run_logger.finish_run(record, article_count=article_count, result=result)
        return result

    def score(self, result: VerificationResult) -> OverallScore:
        """Blend a result's legitimacy with the configured sibling dimensions."""
        return aggregate_scores(
            result.legitimacy_score,
            self._scoring.relatability_score,
            self._scoring.trustworthiness_score,
            self._scoring,
        )

    async def analyze(self, claim: Claim) -> NewsAnalysis:
        """Verify a claim and attach the overall score and verdict."""
        result = await self.verify(claim)
        return NewsAnalysis(result=result, overall=self.score(result))

    async def respond(self, claim: Claim) -> VerifyResponse:
        """Verify a claim and render the outcome as a response."""
        try:
            result = await self.verify(claim)
        except MissingContentError as e:
            return VerifyResponse.from_error(e, status_code=400)
        except VerifierError as e:
            logger.error("Error in verify-news: %s (%s)", e.message, e.details)
            return VerifyResponse.from_error(e)
        except Exception as e:
            logger.exception("Unhandled error while verifying news")
            return VerifyResponse(
                status_code=500,
                body={"error": str(e) or "Failed to verify news", "details": repr(e)},
            )
        return VerifyResponse(status_code=200, body=result.to_payload())

    async def handle(self, payload: Any) -> VerifyResponse:
        """Validate a raw request body, then verify it."""
        try:
            claim = parse_request(payload)
        except MissingContentError as e:
            return VerifyResponse.from_error(e, status_code=400)
        return await self.respond(claim)
