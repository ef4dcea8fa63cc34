"""Single entry point turning a raw request body into a response."""

import logging
from typing import Any

from news_verifier.config.factory import create_from_config
from news_verifier.config.models import Credentials, VerifierConfig
from news_verifier.errors import ConfigurationError, MissingContentError
from news_verifier.pipeline.request import VerifyResponse, parse_request

logger = logging.getLogger(__name__)


async def handle_request(
    payload: Any,
    config: VerifierConfig | None = None,
    credentials: Credentials | None = None,
) -> VerifyResponse:
    """Validate the request, build the verifier, and run it.

    The request body is checked before configuration, so a missing
    ``newsContent`` is reported as a 400 even when credentials are absent.

    Args:
        payload: Decoded JSON body (``newsContent``, optional ``sourceUrl``).
        config: Root configuration (defaults when omitted).
        credentials: API keys. Read from the environment when omitted.

    Returns:
        VerifyResponse with the result payload or an error body.
    """
    try:
        claim = parse_request(payload)
    except MissingContentError as e:
        return VerifyResponse.from_error(e, status_code=400)

    try:
        verifier = create_from_config(config or VerifierConfig(), credentials)
    except ConfigurationError as e:
        logger.error("Error in verify-news: %s", e.message)
        return VerifyResponse.from_error(e)

    return await verifier.respond(claim)
