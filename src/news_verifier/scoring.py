"""Weighted overall score and verdict."""

import logging
import math
from dataclasses import dataclass
from enum import StrEnum

from news_verifier.config.models import ScoringConfig

logger = logging.getLogger(__name__)


class Verdict(StrEnum):
    """Three-way verdict over the overall score."""

    VERIFIED = "VERIFIED"
    SUSPICIOUS = "SUSPICIOUS"
    FAKE = "FAKE"


@dataclass(frozen=True)
class OverallScore:
    """Blended score of the three dimensions and its verdict."""

    score: int
    verdict: Verdict
    legitimacy: float
    relatability: float
    trustworthiness: float


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def verdict_for(score: int, config: ScoringConfig | None = None) -> Verdict:
    """Map an overall score to a verdict."""
    config = config or ScoringConfig()
    if score >= config.verified_threshold:
        return Verdict.VERIFIED
    if score >= config.suspicious_threshold:
        return Verdict.SUSPICIOUS
    return Verdict.FAKE


def aggregate_scores(
    legitimacy: float,
    relatability: float,
    trustworthiness: float,
    config: ScoringConfig | None = None,
) -> OverallScore:
    """Blend the three dimension scores into an overall score and verdict.

    Inputs are expected on a 0-100 scale. Values outside that range are passed
    through unchanged; only a warning is logged.

    Args:
        legitimacy: Cross-reference legitimacy score.
        relatability: Relatability dimension score.
        trustworthiness: Trustworthiness dimension score.
        config: Weights and thresholds (defaults 0.55/0.30/0.15, 75/50).

    Returns:
        OverallScore rounded half-up to the nearest integer.
    """
    config = config or ScoringConfig()
    for name, value in (
        ("legitimacy", legitimacy),
        ("relatability", relatability),
        ("trustworthiness", trustworthiness),
    ):
        if not 0 <= value <= 100:
            logger.warning("%s score %s is outside 0-100; using it unclamped", name, value)

    blended = (
        legitimacy * config.legitimacy_weight
        + relatability * config.relatability_weight
        + trustworthiness * config.trustworthiness_weight
    )
    score = _round_half_up(blended)
    return OverallScore(
        score=score,
        verdict=verdict_for(score, config),
        legitimacy=legitimacy,
        relatability=relatability,
        trustworthiness=trustworthiness,
    )
