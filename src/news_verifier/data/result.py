"""Schema of the normalized verification result.

The reasoning service is untrusted, so every field is declared with a
coercing type. The coercion rules live in the ``Annotated`` aliases below and
are applied by pydantic before validation; a field that is absent gets the
type's default.
"""

import logging
import math
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

logger = logging.getLogger(__name__)


def _to_flag(value: Any) -> bool:
    return bool(value)


def _to_score(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        value = value.strip() or 0
    if not isinstance(value, (int, float, str)):
        return 0.0
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _to_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _to_records(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    records = [item for item in value if isinstance(item, dict)]
    if len(records) != len(value):
        logger.warning("Dropped %d non-record article entries", len(value) - len(records))
    return records


Flag = Annotated[bool, BeforeValidator(_to_flag)]
Score = Annotated[float, BeforeValidator(_to_score)]
Text = Annotated[str, BeforeValidator(_to_text)]
TextList = Annotated[list[str], BeforeValidator(_to_text_list)]


class ArticleMatch(BaseModel):
    """An article the reasoning service matched against the claim."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Text = ""
    similarity: Score = 0.0
    url: Text = ""
    publish_date: Text = Field(default="", alias="publishDate")
    excerpt: Text = ""


MatchList = Annotated[list[ArticleMatch], BeforeValidator(_to_records)]


class OutletVerdict(BaseModel):
    """Verification signals for a single outlet."""

    model_config = ConfigDict(frozen=True)

    verified: Flag = False
    similarity: Score = 0.0
    articles: MatchList = Field(default_factory=list)


class VerificationResult(BaseModel):
    """Schema-complete output of the verification pipeline."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    outlets: dict[str, OutletVerdict] = Field(default_factory=dict)
    legitimacy_score: Score = Field(default=0.0, alias="legitimacyScore")
    topics: TextList = Field(default_factory=list)
    locations: TextList = Field(default_factory=list)
    dates: TextList = Field(default_factory=list)
    credibility_indicators: TextList = Field(default_factory=list, alias="credibilityIndicators")
    red_flags: TextList = Field(default_factory=list, alias="redFlags")
    overall_assessment: Text = Field(default="", alias="overallAssessment")

    @classmethod
    def from_reply(cls, raw: dict[str, Any], outlet_labels: list[str]) -> "VerificationResult":
        """Build a result from the flat camelCase reply of the reasoning service.

        Args:
            raw: Parsed reply. Unknown keys are ignored.
            outlet_labels: Outlet prefixes to read (e.g. ``bbc`` reads
                ``bbcVerified``, ``bbcSimilarity`` and ``bbcArticles``).
        """
        outlets = {
            label: OutletVerdict.model_validate(
                {
                    "verified": raw.get(f"{label}Verified"),
                    "similarity": raw.get(f"{label}Similarity"),
                    "articles": raw.get(f"{label}Articles"),
                }
            )
            for label in outlet_labels
        }
        fields = {
            name: raw[name]
            for name in (
                "legitimacyScore",
                "topics",
                "locations",
                "dates",
                "credibilityIndicators",
                "redFlags",
                "overallAssessment",
            )
            if name in raw
        }
        return cls.model_validate({"outlets": outlets, **fields})

    def to_payload(self) -> dict[str, Any]:
        """Render the flat camelCase wire object."""
        payload: dict[str, Any] = {}
        for label, verdict in self.outlets.items():
            payload[f"{label}Verified"] = verdict.verified
            payload[f"{label}Similarity"] = verdict.similarity
            payload[f"{label}Articles"] = [
                match.model_dump(by_alias=True) for match in verdict.articles
            ]
        payload.update(self.model_dump(by_alias=True, exclude={"outlets"}))
        return payload
