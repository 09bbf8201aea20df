"""
Actor Scene Engine Configuration Module

Generation settings (duration, aspect ratio, style preset) and the
engine config loaded from ACTOR_* environment variables and .env files.
"""

import os
import json
import warnings
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dotenv import load_dotenv

from .logger import reset_logging, setup_logging
from .providers import (
    EmotionProvider,
    GenerationProvider,
    DEFAULT_EMOTION_PROVIDER,
    DEFAULT_GENERATION_PROVIDER,
    parse_provider,
)


# =============================================================================
# GENERATION SETTINGS
# =============================================================================

ASPECT_RATIOS: Dict[str, Dict[str, Any]] = {
    "16:9": {"label": "16:9 (Landscape)", "resolution": (1920, 1080)},
    "9:16": {"label": "9:16 (Portrait)", "resolution": (1080, 1920)},
    "1:1": {"label": "1:1 (Square)", "resolution": (1080, 1080)},
    "4:3": {"label": "4:3 (Classic)", "resolution": (1440, 1080)},
}

STYLE_PRESETS: Dict[str, Dict[str, str]] = {
    "cinematic": {"label": "Cinematic", "description": "Film-like depth and color grading"},
    "vibrant": {"label": "Vibrant", "description": "Bold colors and high contrast"},
    "minimal": {"label": "Minimal", "description": "Clean and simple aesthetic"},
    "dramatic": {"label": "Dramatic", "description": "High contrast with strong shadows"},
    "natural": {"label": "Natural", "description": "Realistic and balanced look"},
}

DURATION_OPTIONS: Tuple[int, ...] = (3, 5, 8, 10, 15)
MIN_DURATION = 3.0
MAX_DURATION = 30.0


@dataclass(frozen=True)
class GenerationSettings:
    """Text-to-video settings chosen by the user."""
    duration: float = 5.0  # seconds
    aspect_ratio: str = "16:9"
    style_preset: str = "natural"

    @property
    def resolution(self) -> Tuple[int, int]:
        return get_resolution_for_aspect_ratio(self.aspect_ratio)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "duration": self.duration,
            "aspectRatio": self.aspect_ratio,
            "stylePreset": self.style_preset,
        }


DEFAULT_SETTINGS = GenerationSettings()


def validate_settings(settings: Optional[Mapping[str, Any]] = None) -> GenerationSettings:
    """
    Fill in defaults and clamp duration into [3, 30] seconds.

    Unknown aspect ratios and style presets fall back to the defaults.

    Args:
        settings: Partial settings (duration, aspect_ratio, style_preset)

    Returns:
        Complete GenerationSettings
    """
    settings = settings or {}

    duration = settings.get("duration") or DEFAULT_SETTINGS.duration
    duration = max(MIN_DURATION, min(float(duration), MAX_DURATION))

    aspect_ratio = settings.get("aspect_ratio") or DEFAULT_SETTINGS.aspect_ratio
    if aspect_ratio not in ASPECT_RATIOS:
        aspect_ratio = DEFAULT_SETTINGS.aspect_ratio

    style_preset = settings.get("style_preset") or DEFAULT_SETTINGS.style_preset
    if style_preset not in STYLE_PRESETS:
        style_preset = DEFAULT_SETTINGS.style_preset

    return GenerationSettings(
        duration=duration,
        aspect_ratio=aspect_ratio,
        style_preset=style_preset,
    )


def get_resolution_for_aspect_ratio(aspect_ratio: str) -> Tuple[int, int]:
    """Output resolution (width, height) for an aspect ratio."""
    if aspect_ratio not in ASPECT_RATIOS:
        raise ValueError(f"Unknown aspect ratio: {aspect_ratio}. "
                         f"Available: {list(ASPECT_RATIOS.keys())}")
    return ASPECT_RATIOS[aspect_ratio]["resolution"]


# =============================================================================
# ENGINE CONFIG
# =============================================================================

def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


@dataclass
class ActorConfig:
    """
    Engine configuration.

    Values come from ACTOR_* environment variables (optionally from a
    .env file); nothing is created on disk until ensure_dirs() is called.
    """

    # =========================================================================
    # PATHS
    # =========================================================================
    output_dir: Path = field(default_factory=lambda: Path(os.getenv("ACTOR_OUTPUT_DIR", "./actor_output")))
    settings_path: Path = field(default_factory=lambda: Path(os.getenv("ACTOR_SETTINGS_PATH", "./actor_output/settings.json")))

    # =========================================================================
    # PROVIDERS
    # =========================================================================
    emotion_provider: EmotionProvider = field(default_factory=lambda: parse_provider(
        os.getenv("ACTOR_EMOTION_PROVIDER"), EmotionProvider, DEFAULT_EMOTION_PROVIDER))
    generation_provider: GenerationProvider = field(default_factory=lambda: parse_provider(
        os.getenv("ACTOR_GENERATION_PROVIDER"), GenerationProvider, DEFAULT_GENERATION_PROVIDER))

    # =========================================================================
    # AUDIO
    # =========================================================================
    sample_rate: int = field(default_factory=lambda: int(os.getenv("ACTOR_SAMPLE_RATE", "44100")))
    music_duration: float = field(default_factory=lambda: float(os.getenv("ACTOR_MUSIC_DURATION", "10")))

    # =========================================================================
    # DEBUG
    # =========================================================================
    debug: bool = field(default_factory=lambda: _env_bool("ACTOR_DEBUG"))

    def ensure_dirs(self) -> None:
        """Create output directories."""
        Path(self.output_dir).mkdir(parents=True, exist_ok=True)
        Path(self.settings_path).parent.mkdir(parents=True, exist_ok=True)

    def configure_logging(self, log_file: Optional[str] = None) -> None:
        """Reinstall the user/debug loggers with this config's debug flag."""
        reset_logging()
        setup_logging(debug_mode=self.debug, log_file=log_file)

    def validate(self) -> List[str]:
        """
        Validate configuration settings.

        Returns:
            List of warning messages (empty if all valid)
        """
        validation_warnings: List[str] = []

        if not (8000 <= self.sample_rate <= 192000):
            validation_warnings.append(
                f"sample_rate should be between 8000-192000, got {self.sample_rate}"
            )

        if self.music_duration <= 0:
            validation_warnings.append(
                f"music_duration should be > 0, got {self.music_duration}"
            )

        if self.emotion_provider is not EmotionProvider.LOCAL:
            validation_warnings.append(
                f"Emotion provider '{self.emotion_provider.value}' is not available; "
                "local analysis will be used"
            )

        for warning_msg in validation_warnings:
            warnings.warn(warning_msg, UserWarning)

        return validation_warnings

    def summary(self) -> Dict[str, Any]:
        """Return a readable dict for debugging."""
        return {
            "paths": {
                "output_dir": str(self.output_dir),
                "settings_path": str(self.settings_path),
            },
            "providers": {
                "emotion_provider": self.emotion_provider.value,
                "generation_provider": self.generation_provider.value,
            },
            "audio": {
                "sample_rate": self.sample_rate,
                "music_duration": self.music_duration,
            },
            "debug": self.debug,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to serializable dictionary."""
        data = {}
        for k, v in self.__dict__.items():
            if k.startswith('_'):
                continue
            if isinstance(v, Path):
                v = str(v)
            elif isinstance(v, (EmotionProvider, GenerationProvider)):
                v = v.value
            data[k] = v
        return data

    def save(self, path: Path) -> None:
        """Save config to JSON file."""
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "ActorConfig":
        """Load config from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        for key in ('output_dir', 'settings_path'):
            if key in data:
                data[key] = Path(data[key])
        if 'emotion_provider' in data:
            data['emotion_provider'] = parse_provider(
                data['emotion_provider'], EmotionProvider, DEFAULT_EMOTION_PROVIDER)
        if 'generation_provider' in data:
            data['generation_provider'] = parse_provider(
                data['generation_provider'], GenerationProvider, DEFAULT_GENERATION_PROVIDER)

        return cls(**data)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "ActorConfig":
        """
        Create config from environment variables.

        Args:
            env_file: .env file to load first (default: ./.env if present).
                Variables already set in the environment win.
        """
        if env_file is not None:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv(Path(".env"))
        return cls()

    def __repr__(self) -> str:
        return (
            f"ActorConfig("
            f"output_dir={self.output_dir}, "
            f"emotion_provider={self.emotion_provider.value}, "
            f"generation_provider={self.generation_provider.value}, "
            f"debug={self.debug})"
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_global_config: Optional[ActorConfig] = None


def get_config() -> ActorConfig:
    """Get global config instance (creates if not exists)."""
    global _global_config
    if _global_config is None:
        _global_config = ActorConfig.from_env()
        _global_config.validate()
    return _global_config


def set_config(config: ActorConfig) -> None:
    """Set global config instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset global config to None."""
    global _global_config
    _global_config = None


def list_presets() -> List[str]:
    """List available style presets."""
    return list(STYLE_PRESETS.keys())
