from news_verifier.prompt.builder import SYSTEM_PROMPT, build_verification_prompt

__all__ = [
    "SYSTEM_PROMPT",
    "build_verification_prompt",
]
