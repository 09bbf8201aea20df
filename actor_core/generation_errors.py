# actor_core/generation_errors.py
"""
Errors raised around the scene pipeline, and user-facing normalization.

The classifier, modifier tables and timeline generators never raise.
Failures come from the surrounding stages (recording, upload, auth,
provider selection) and are turned into short messages here.
"""

from dataclasses import dataclass
from typing import Tuple


class ActorCoreError(Exception):
    """Base error for the Actor Scene Engine."""


class ProviderUnavailableError(ActorCoreError):
    """The selected analysis/generation provider is not implemented."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Provider '{provider}' is not available")


class SettingsError(ActorCoreError):
    """Stored settings could not be read or written."""


@dataclass(frozen=True)
class NormalizedError:
    """User-facing error summary plus a hint for developers."""
    summary: str
    technical_hint: str

    def to_dict(self) -> dict:
        return {"summary": self.summary, "technicalHint": self.technical_hint}


# (substrings, summary, hint), checked in order against the lower-cased message
ERROR_RULES: Tuple[Tuple[Tuple[str, ...], str, str], ...] = (
    (
        ("mediarecorder", "recording"),
        "Video recording failed. Please try again.",
        "MediaRecorder API error - check browser compatibility",
    ),
    (
        ("canvas",),
        "Failed to capture video scene. Please refresh and try again.",
        "Canvas capture error - scene may not be ready",
    ),
    (
        ("network", "fetch", "upload"),
        "Network error during upload. Please check your connection.",
        "Network connectivity issue",
    ),
    (
        ("unauthorized", "authentication"),
        "Authentication required. Please log in and try again.",
        "User not authenticated",
    ),
    (
        ("actor", "canister"),
        "Backend service error. Please try again in a moment.",
        "Backend actor/canister error",
    ),
    (
        ("not supported",),
        "Your browser does not support video generation. Try Chrome or Firefox.",
        "Browser API not supported",
    ),
)


def normalize_generation_error(error: object) -> NormalizedError:
    """
    Map a pipeline failure to a user-friendly message.

    Args:
        error: Anything raised by a generation stage

    Returns:
        NormalizedError
    """
    if isinstance(error, BaseException):
        message = str(error).lower()
        for needles, summary, hint in ERROR_RULES:
            if any(needle in message for needle in needles):
                return NormalizedError(summary=summary, technical_hint=hint)

        return NormalizedError(
            summary=f"Generation failed: {error}",
            technical_hint="See logs for details",
        )

    return NormalizedError(
        summary="An unexpected error occurred. Please try again.",
        technical_hint="Unknown error type",
    )
