# actor_core/emotion_modifiers.py
"""
Emotion-derived modifiers for rendering and audio.

Static lookup tables keyed by emotion, mood and energy:
- duration multiplier (scene timing bias)
- visual modifiers (lighting, saturation, contrast, fog)
- music synthesis parameters (base frequency, tempo, decay)

The renderer and the audio stage are calibrated against these exact
constants.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Type

from .scene_emotion import Emotion, Energy, Mood


@dataclass(frozen=True)
class EmotionTone:
    """Per-emotion scene tone."""
    lighting: float
    saturation: float
    contrast: float


@dataclass(frozen=True)
class MoodTone:
    """Per-mood lighting and fog adjustment."""
    lighting_boost: float
    fog_density: float


@dataclass(frozen=True)
class VisualModifiers:
    """Multipliers the renderer applies to its base scene parameters."""
    lighting: float
    saturation: float
    contrast: float
    lighting_boost: float
    fog_density: float

    def scene_lighting(self, base_intensity: float) -> float:
        """Light intensity after emotion and mood adjustment."""
        return base_intensity * self.lighting * self.lighting_boost

    def scene_fog(self, base_density: float) -> float:
        """Fog density after mood adjustment."""
        return base_density * self.fog_density

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emotion": {
                "lighting": self.lighting,
                "saturation": self.saturation,
                "contrast": self.contrast,
            },
            "mood": {
                "lightingBoost": self.lighting_boost,
                "fogDensity": self.fog_density,
            },
        }


@dataclass(frozen=True)
class MusicParameters:
    """Parameters for the synthesized music bed."""
    base_frequency: float  # Hz
    tempo: float
    decay: float  # seconds

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baseFrequency": self.base_frequency,
            "tempo": self.tempo,
            "decay": self.decay,
        }


# =============================================================================
# TABLES
# =============================================================================

DURATION_MULTIPLIERS: Mapping[Emotion, float] = MappingProxyType({
    Emotion.CALM: 1.3,
    Emotion.WONDER: 1.2,
    Emotion.JOY: 1.1,
    Emotion.SADNESS: 1.1,
    Emotion.FEAR: 0.8,
    Emotion.ANGER: 0.7,
    Emotion.SURPRISE: 0.6,
})

EMOTION_TONES: Mapping[Emotion, EmotionTone] = MappingProxyType({
    Emotion.FEAR: EmotionTone(lighting=0.4, saturation=0.6, contrast=1.3),
    Emotion.JOY: EmotionTone(lighting=1.2, saturation=1.2, contrast=0.9),
    Emotion.CALM: EmotionTone(lighting=0.8, saturation=0.8, contrast=0.7),
    Emotion.SADNESS: EmotionTone(lighting=0.6, saturation=0.5, contrast=0.8),
    Emotion.ANGER: EmotionTone(lighting=1.1, saturation=1.3, contrast=1.4),
    Emotion.SURPRISE: EmotionTone(lighting=1.3, saturation=1.0, contrast=1.2),
    Emotion.WONDER: EmotionTone(lighting=1.1, saturation=1.1, contrast=1.0),
})

MOOD_TONES: Mapping[Mood, MoodTone] = MappingProxyType({
    Mood.DARK: MoodTone(lighting_boost=0.7, fog_density=1.3),
    Mood.NEUTRAL: MoodTone(lighting_boost=1.0, fog_density=1.0),
    Mood.BRIGHT: MoodTone(lighting_boost=1.3, fog_density=0.7),
})

BASE_FREQUENCIES: Mapping[Emotion, float] = MappingProxyType({
    Emotion.FEAR: 180.0,
    Emotion.JOY: 440.0,
    Emotion.CALM: 220.0,
    Emotion.SADNESS: 200.0,
    Emotion.ANGER: 160.0,
    Emotion.SURPRISE: 500.0,
    Emotion.WONDER: 330.0,
})

ENERGY_FREQUENCY_MULTIPLIERS: Mapping[Energy, float] = MappingProxyType({
    Energy.LOW: 0.8,
    Energy.MEDIUM: 1.0,
    Energy.HIGH: 1.3,
})

ENERGY_TEMPOS: Mapping[Energy, float] = MappingProxyType({
    Energy.HIGH: 1.5,
    Energy.LOW: 0.7,
    Energy.MEDIUM: 1.0,
})

# calm rings longest, surprise shortest
DECAY_SECONDS: Mapping[Emotion, float] = MappingProxyType({
    Emotion.CALM: 8.0,
    Emotion.SURPRISE: 2.0,
    Emotion.FEAR: 5.0,
    Emotion.JOY: 5.0,
    Emotion.SADNESS: 5.0,
    Emotion.ANGER: 5.0,
    Emotion.WONDER: 5.0,
})


def _require_complete(table: Mapping, keys: Type[Enum], name: str) -> None:
    missing = [member.value for member in keys if member not in table]
    if missing:
        raise ValueError(f"{name} is missing entries for: {', '.join(missing)}")


_require_complete(DURATION_MULTIPLIERS, Emotion, "DURATION_MULTIPLIERS")
_require_complete(EMOTION_TONES, Emotion, "EMOTION_TONES")
_require_complete(MOOD_TONES, Mood, "MOOD_TONES")
_require_complete(BASE_FREQUENCIES, Emotion, "BASE_FREQUENCIES")
_require_complete(ENERGY_FREQUENCY_MULTIPLIERS, Energy, "ENERGY_FREQUENCY_MULTIPLIERS")
_require_complete(ENERGY_TEMPOS, Energy, "ENERGY_TEMPOS")
_require_complete(DECAY_SECONDS, Emotion, "DECAY_SECONDS")


# =============================================================================
# LOOKUPS
# =============================================================================

def duration_multiplier(emotion: Emotion) -> float:
    """
    Timing bias for scene duration.

    adjusted_duration = base_duration * duration_multiplier(emotion)
    """
    return DURATION_MULTIPLIERS[Emotion(emotion)]


def adjusted_duration(base_duration: float, emotion: Emotion) -> float:
    """Scale a base clip duration by the emotion's timing bias."""
    return base_duration * duration_multiplier(emotion)


def visual_modifiers(emotion: Emotion, mood: Mood) -> VisualModifiers:
    """
    Visual modifiers for scene rendering.

    The emotion and mood tables are independent; the renderer multiplies
    both into its base lighting and fog.
    """
    tone = EMOTION_TONES[Emotion(emotion)]
    mood_tone = MOOD_TONES[Mood(mood)]
    return VisualModifiers(
        lighting=tone.lighting,
        saturation=tone.saturation,
        contrast=tone.contrast,
        lighting_boost=mood_tone.lighting_boost,
        fog_density=mood_tone.fog_density,
    )


def music_parameters(emotion: Emotion, energy: Energy) -> MusicParameters:
    """Music synthesis parameters for an emotion and energy level."""
    emotion = Emotion(emotion)
    energy = Energy(energy)
    return MusicParameters(
        base_frequency=BASE_FREQUENCIES[emotion] * ENERGY_FREQUENCY_MULTIPLIERS[energy],
        tempo=ENERGY_TEMPOS[energy],
        decay=DECAY_SECONDS[emotion],
    )
