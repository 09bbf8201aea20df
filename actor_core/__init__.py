"""
Actor Scene Engine Core

Deterministic scene-emotion classification and cue timelines for
text-to-3D-actor video generation.
"""

__version__ = "1.0.0"
__author__ = "Actor Scene Engine Team"

# Classification
from .scene_emotion import (
    Emotion,
    Energy,
    Mood,
    EmotionAnalysis,
    classify,
)

# Modifier tables
from .emotion_modifiers import (
    VisualModifiers,
    MusicParameters,
    duration_multiplier,
    visual_modifiers,
    music_parameters,
)

# Timelines
from .emotion_timeline import (
    Gesture,
    EmotionTimelineCue,
    GestureCue,
    generate_emotion_timeline,
    generate_gesture_cues,
    active_emotion_at,
    gesture_at,
)

# Providers and configuration
from .providers import (
    EmotionProvider,
    GenerationProvider,
    ProviderInfo,
    ProviderSettings,
    is_provider_available,
)

from .config import (
    ActorConfig,
    GenerationSettings,
    validate_settings,
)

# Errors
from .generation_errors import (
    ActorCoreError,
    ProviderUnavailableError,
    SettingsError,
    NormalizedError,
    normalize_generation_error,
)

# Pipeline
from .scene_pipeline import (
    ScenePipeline,
    SceneAnalysis,
    SceneConfigRecord,
)


__all__ = [
    # Version
    "__version__",

    # Classification
    "Emotion",
    "Energy",
    "Mood",
    "EmotionAnalysis",
    "classify",

    # Modifiers
    "VisualModifiers",
    "MusicParameters",
    "duration_multiplier",
    "visual_modifiers",
    "music_parameters",

    # Timelines
    "Gesture",
    "EmotionTimelineCue",
    "GestureCue",
    "generate_emotion_timeline",
    "generate_gesture_cues",
    "active_emotion_at",
    "gesture_at",

    # Providers / config
    "EmotionProvider",
    "GenerationProvider",
    "ProviderInfo",
    "ProviderSettings",
    "is_provider_available",
    "ActorConfig",
    "GenerationSettings",
    "validate_settings",

    # Errors
    "ActorCoreError",
    "ProviderUnavailableError",
    "SettingsError",
    "NormalizedError",
    "normalize_generation_error",

    # Pipeline
    "ScenePipeline",
    "SceneAnalysis",
    "SceneConfigRecord",
]
