# actor_core/providers.py
"""
Emotion-analysis and video-generation provider selection.

Only the local deterministic providers are implemented; the rest are
listed so the selection can be stored and shown, and are reported as
unavailable.

Selections live in a small JSON file and are handed to the pipeline
explicitly; nothing here is read implicitly by the classifier.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from .generation_errors import SettingsError

logger = logging.getLogger(__name__)


class EmotionProvider(str, Enum):
    """Backends for scene emotion analysis."""
    LOCAL = "local"
    GEMINI = "gemini"


class GenerationProvider(str, Enum):
    """Backends for video generation."""
    LOCAL = "local"
    KLING26 = "kling26"
    GEMINI = "gemini"
    GROK = "grok"
    RUNWAY = "runway"
    PICTORY = "pictory"
    FLIKI = "fliki"
    VEED = "veed"


@dataclass(frozen=True)
class ProviderInfo:
    """Display and availability info for a provider."""
    id: str
    name: str
    description: str
    available: bool
    badge: str = ""


EMOTION_PROVIDERS: Mapping[EmotionProvider, ProviderInfo] = MappingProxyType({
    EmotionProvider.LOCAL: ProviderInfo(
        id="local",
        name="Local (Deterministic)",
        description="Fast, rule-based emotion detection with no network calls",
        available=True,
    ),
    EmotionProvider.GEMINI: ProviderInfo(
        id="gemini",
        name="Google Gemini",
        description="AI-powered emotion analysis (Coming soon)",
        available=False,
    ),
})

GENERATION_PROVIDERS: Mapping[GenerationProvider, ProviderInfo] = MappingProxyType({
    GenerationProvider.LOCAL: ProviderInfo(
        id="local",
        name="Local",
        description="Fast, deterministic generation using local algorithms",
        available=True,
    ),
    GenerationProvider.KLING26: ProviderInfo(
        id="kling26",
        name="Kling 2.6",
        description="Best quality-to-cost ratio for professional video generation",
        available=False,
        badge="Best value",
    ),
    GenerationProvider.GEMINI: ProviderInfo(
        id="gemini",
        name="Google Gemini",
        description="Advanced AI-powered generation with Gemini models",
        available=False,
    ),
    GenerationProvider.GROK: ProviderInfo(
        id="grok",
        name="Grok AI",
        description="Next-generation video synthesis with Grok",
        available=False,
    ),
    GenerationProvider.RUNWAY: ProviderInfo(
        id="runway",
        name="Runway (via Easemate.ai)",
        description="Generates 5-10 second clips with customizable aspect ratios",
        available=False,
    ),
    GenerationProvider.PICTORY: ProviderInfo(
        id="pictory",
        name="Pictory AI",
        description="Turns scripts and articles into videos with matched visuals and music",
        available=False,
    ),
    GenerationProvider.FLIKI: ProviderInfo(
        id="fliki",
        name="Fliki",
        description="Human-like AI voices for generating videos from blog posts or text",
        available=False,
    ),
    GenerationProvider.VEED: ProviderInfo(
        id="veed",
        name="VEED.IO",
        description="Animated and customized videos with voiceovers",
        available=False,
    ),
})

DEFAULT_EMOTION_PROVIDER = EmotionProvider.LOCAL
DEFAULT_GENERATION_PROVIDER = GenerationProvider.KLING26

ProviderT = TypeVar("ProviderT", EmotionProvider, GenerationProvider)


def is_provider_available(provider: Union[EmotionProvider, GenerationProvider]) -> bool:
    """Check if a provider is implemented."""
    if isinstance(provider, EmotionProvider):
        return EMOTION_PROVIDERS[provider].available
    if isinstance(provider, GenerationProvider):
        return GENERATION_PROVIDERS[provider].available
    return False


def parse_provider(
    value: Any,
    provider_type: Type[ProviderT],
    default: ProviderT
) -> ProviderT:
    """
    Parse a stored provider id, falling back to default.

    Args:
        value: Stored value (string, enum or None)
        provider_type: EmotionProvider or GenerationProvider
        default: Fallback for missing or unknown values

    Returns:
        Provider enum member
    """
    if value is None:
        return default
    try:
        return provider_type(value)
    except ValueError:
        logger.warning(f"Unknown {provider_type.__name__} '{value}', using '{default.value}'")
        return default


@dataclass
class ProviderSettings:
    """Persisted provider selections."""
    emotion_provider: EmotionProvider = DEFAULT_EMOTION_PROVIDER
    generation_provider: GenerationProvider = DEFAULT_GENERATION_PROVIDER
    path: Optional[Path] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, str]:
        return {
            "emotion-analysis-provider": self.emotion_provider.value,
            "generation-provider": self.generation_provider.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderSettings":
        return cls(
            emotion_provider=parse_provider(
                data.get("emotion-analysis-provider"),
                EmotionProvider,
                DEFAULT_EMOTION_PROVIDER,
            ),
            generation_provider=parse_provider(
                data.get("generation-provider"),
                GenerationProvider,
                DEFAULT_GENERATION_PROVIDER,
            ),
        )

    @classmethod
    def load(cls, path: Path) -> "ProviderSettings":
        """
        Load selections from a JSON file.

        A missing, unreadable or malformed file gives the defaults.
        """
        path = Path(path)
        settings = cls()
        if path.exists():
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to read provider settings from {path}: {e}")
            else:
                if isinstance(data, dict):
                    settings = cls.from_dict(data)
                else:
                    logger.warning(f"Ignoring provider settings in {path}: not a JSON object")
        settings.path = path
        return settings

    def save(self, path: Optional[Path] = None) -> Path:
        """Write selections to JSON. Raises SettingsError on I/O failure."""
        target = Path(path) if path else self.path
        if target is None:
            raise SettingsError("No settings path given")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise SettingsError(f"Failed to save provider settings to {target}: {e}") from e
        self.path = target
        return target

    def set_emotion_provider(self, provider: Union[EmotionProvider, str]) -> None:
        self.emotion_provider = EmotionProvider(provider)

    def set_generation_provider(self, provider: Union[GenerationProvider, str]) -> None:
        self.generation_provider = GenerationProvider(provider)
