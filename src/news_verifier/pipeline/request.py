"""Inbound request and outbound response shapes."""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from news_verifier.data import Claim
from news_verifier.errors import MissingContentError, VerifierError

logger = logging.getLogger(__name__)


class VerifyNewsRequest(BaseModel):
    """Body of a verification request.

    ``sourceUrl`` is optional context; a value that is not a string is
    ignored rather than failing the request.
    """

    news_content: str | None = Field(default=None, alias="newsContent")
    source_url: str | None = Field(default=None, alias="sourceUrl")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("source_url", mode="before")
    @classmethod
    def ignore_non_string_url(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, str):
            logger.warning("Ignoring non-string sourceUrl: %r", v)
            return None
        return v


class VerifyResponse(BaseModel):
    """Status code plus JSON body returned to the caller."""

    status_code: int
    body: dict[str, Any]

    model_config = {"frozen": True}

    @classmethod
    def from_error(cls, error: VerifierError, status_code: int = 500) -> "VerifyResponse":
        return cls(status_code=status_code, body=error.to_dict())


def parse_request(payload: Any) -> Claim:
    """Validate a request body and turn it into a Claim.

    Raises:
        MissingContentError: If ``newsContent`` is absent, not a string, or blank.
    """
    if not isinstance(payload, dict):
        raise MissingContentError()
    try:
        request = VerifyNewsRequest.model_validate(payload)
    except ValidationError as e:
        raise MissingContentError() from e
    if not request.news_content or not request.news_content.strip():
        raise MissingContentError()
    return Claim(text=request.news_content, source_url=request.source_url or None)
