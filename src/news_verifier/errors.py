"""Exception hierarchy for the verification pipeline."""

from typing import Any


class VerifierError(Exception):
    """Base error carrying a short message and a longer detail string."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details or message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


class MissingContentError(VerifierError):
    """The claim text is missing or blank."""

    def __init__(self) -> None:
        super().__init__("News content is required", "newsContent must be a non-empty string")


class ConfigurationError(VerifierError):
    """A required setting (usually a credential) is absent."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"{setting} not configured", f"Missing required setting: {setting}")


class ReasoningTransportError(VerifierError):
    """The reasoning service could not be reached or answered with an error."""

    def __init__(self, reason: str, *, status: int | None = None, body: str = "") -> None:
        self.status = status
        self.body = body
        message = f"Reasoning service returned {status}" if status is not None else reason
        details = f"{reason}: {body}" if body else reason
        super().__init__(message, details)


class InvalidReasoningOutput(VerifierError):
    """The reasoning reply could not be parsed as a structured value."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid JSON response from reasoning service",
            "The reasoning service reply could not be parsed",
        )
