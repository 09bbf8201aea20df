# actor_core/scene_emotion.py
"""
Scene Emotion Classifier for the Actor Scene Engine.

Rule-based classification of narration text into:
- emotion (7 labels)
- intensity (0.3 - 1.0)
- energy (low / medium / high)
- mood (dark / neutral / bright)

Fully deterministic: keyword tables only, no model, no network calls.
The same text always yields the same EmotionAnalysis.
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Pattern, Tuple

from .logger import debug_enabled, log_debug_data

logger = logging.getLogger(__name__)


class Emotion(str, Enum):
    """Narration emotions, in tie-break order."""
    FEAR = "fear"
    JOY = "joy"
    CALM = "calm"
    SADNESS = "sadness"
    ANGER = "anger"
    SURPRISE = "surprise"
    WONDER = "wonder"


class Energy(str, Enum):
    """Coarse arousal level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Mood(str, Enum):
    """Coarse lighting valence."""
    DARK = "dark"
    NEUTRAL = "neutral"
    BRIGHT = "bright"


@dataclass(frozen=True)
class EmotionAnalysis:
    """Classification result for one piece of narration text."""
    emotion: Emotion
    intensity: float  # 0.3 - 1.0
    energy: Energy
    mood: Mood

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emotion": self.emotion.value,
            "intensity": self.intensity,
            "energy": self.energy.value,
            "mood": self.mood.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmotionAnalysis":
        return cls(
            emotion=Emotion(data["emotion"]),
            intensity=float(data["intensity"]),
            energy=Energy(data["energy"]),
            mood=Mood(data["mood"]),
        )


# =============================================================================
# KEYWORD TABLES
# =============================================================================

def _words(*alternatives: str) -> Pattern[str]:
    """Compile a whole-word, case-insensitive disjunction."""
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b", re.IGNORECASE)


EMOTION_PATTERNS: Mapping[Emotion, Tuple[Pattern[str], ...]] = MappingProxyType({
    Emotion.FEAR: (
        _words("afraid", "scared", "terrified", "frightened", "horror", "panic",
               "dread", "nightmare", "danger", "threat", "monster", "dark",
               "shadow", "creep"),
        _words("anxious", "nervous", "worried", "tense", "uneasy", "alarmed"),
    ),
    Emotion.JOY: (
        _words("happy", "joyful", "delighted", "cheerful", "excited", "thrilled",
               "elated", "celebrate", "laugh", "smile", "fun", "party"),
        _words("wonderful", "amazing", "fantastic", "great", "awesome", "brilliant"),
    ),
    Emotion.CALM: (
        _words("calm", "peaceful", "serene", "tranquil", "quiet", "still",
               "gentle", "soft", "relaxed", "soothing", "meditative"),
        _words("rest", "ease", "comfort", "harmony", "balance"),
    ),
    Emotion.SADNESS: (
        _words("sad", "unhappy", "depressed", "melancholy", "sorrowful", "gloomy",
               "miserable", "lonely", "cry", "tears", "grief"),
        _words("loss", "lost", "empty", "hopeless", "despair"),
    ),
    Emotion.ANGER: (
        _words("angry", "furious", "enraged", "mad", "irritated", "annoyed",
               "frustrated", "hostile", "aggressive", "rage"),
        _words("fight", "battle", "war", "conflict", "attack", "destroy"),
    ),
    Emotion.SURPRISE: (
        _words("surprise", "shocked", "astonished", "amazed", "stunned",
               "startled", "unexpected", "sudden", "wow"),
        _words("gasp", "reveal", "discover", "appear"),
    ),
    Emotion.WONDER: (
        _words("wonder", "magical", "mystical", "enchanted", "mysterious",
               "curious", "fascinating", "awe", "marvel"),
        _words("dream", "fantasy", "imagination", "explore", "discover",
               "beauty", "magnificent"),
    ),
})

HIGH_ENERGY_PATTERN = _words(
    "fast", "quick", "rapid", "energetic", "dynamic", "vibrant", "intense",
    "explosive", "rush", "race", "run", "jump", "burst",
)
LOW_ENERGY_PATTERN = _words(
    "slow", "gentle", "soft", "quiet", "still", "calm", "peaceful", "rest",
    "sleep", "drift", "float",
)

DARK_MOOD_PATTERN = _words(
    "dark", "night", "shadow", "black", "gloomy", "dim", "dusk", "twilight",
    "sinister", "ominous",
)
BRIGHT_MOOD_PATTERN = _words(
    "bright", "light", "sunny", "radiant", "glowing", "luminous", "dawn", "day",
    "shine", "sparkle", "golden",
)

# Emotions whose intensity gets the 1.2x boost
HIGH_AROUSAL_EMOTIONS = frozenset({Emotion.FEAR, Emotion.ANGER, Emotion.SURPRISE})
HIGH_AROUSAL_BOOST = 1.2

DEFAULT_ENERGY: Mapping[Emotion, Energy] = MappingProxyType({
    Emotion.FEAR: Energy.HIGH,
    Emotion.ANGER: Energy.HIGH,
    Emotion.SURPRISE: Energy.HIGH,
    Emotion.CALM: Energy.LOW,
    Emotion.SADNESS: Energy.LOW,
    Emotion.JOY: Energy.MEDIUM,
    Emotion.WONDER: Energy.MEDIUM,
})

DEFAULT_MOOD: Mapping[Emotion, Mood] = MappingProxyType({
    Emotion.FEAR: Mood.DARK,
    Emotion.SADNESS: Mood.DARK,
    Emotion.ANGER: Mood.DARK,
    Emotion.JOY: Mood.BRIGHT,
    Emotion.WONDER: Mood.BRIGHT,
    Emotion.CALM: Mood.NEUTRAL,
    Emotion.SURPRISE: Mood.NEUTRAL,
})

MIN_INTENSITY = 0.3
MAX_INTENSITY = 1.0
MIN_TEXT_LENGTH = 3

NEUTRAL_ANALYSIS = EmotionAnalysis(
    emotion=Emotion.CALM,
    intensity=MIN_INTENSITY,
    energy=Energy.LOW,
    mood=Mood.NEUTRAL,
)


# =============================================================================
# CLASSIFIER
# =============================================================================

def score_emotions(text: str) -> Dict[Emotion, int]:
    """
    Count keyword matches per emotion.

    Args:
        text: Narration text (any case)

    Returns:
        Match count for every emotion, in declaration order
    """
    lower_text = text.lower()
    return {
        emotion: sum(len(pattern.findall(lower_text)) for pattern in patterns)
        for emotion, patterns in EMOTION_PATTERNS.items()
    }


def dominant_emotion(scores: Mapping[Emotion, int]) -> Tuple[Emotion, int]:
    """
    Pick the emotion with the strictly highest score.

    Ties keep the emotion declared first (fear, joy, calm, sadness, anger,
    surprise, wonder). All-zero scores give calm.
    """
    dominant = Emotion.CALM
    max_score = 0
    for emotion in Emotion:
        score = scores.get(emotion, 0)
        if score > max_score:
            max_score = score
            dominant = emotion
    return dominant, max_score


def _intensity(max_score: int, word_count: int, emotion: Emotion) -> float:
    raw = min(max_score / max(word_count / 10, 1), MAX_INTENSITY)
    if emotion in HIGH_AROUSAL_EMOTIONS:
        raw *= HIGH_AROUSAL_BOOST
    return round(min(max(raw, MIN_INTENSITY), MAX_INTENSITY), 2)


def _energy(lower_text: str, emotion: Emotion) -> Energy:
    high = len(HIGH_ENERGY_PATTERN.findall(lower_text))
    low = len(LOW_ENERGY_PATTERN.findall(lower_text))
    if high > low:
        return Energy.HIGH
    if low > high:
        return Energy.LOW
    return DEFAULT_ENERGY[emotion]


def _mood(lower_text: str, emotion: Emotion) -> Mood:
    dark = len(DARK_MOOD_PATTERN.findall(lower_text))
    bright = len(BRIGHT_MOOD_PATTERN.findall(lower_text))
    if dark > bright:
        return Mood.DARK
    if bright > dark:
        return Mood.BRIGHT
    return DEFAULT_MOOD[emotion]


def classify(text: str) -> EmotionAnalysis:
    """
    Classify narration text into emotion, intensity, energy and mood.

    Total over all strings: empty, whitespace-only or very short text
    (under 3 characters after trimming) returns NEUTRAL_ANALYSIS.
    Long text dilutes intensity through the word-count denominator.

    Args:
        text: Narration text

    Returns:
        EmotionAnalysis
    """
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        return NEUTRAL_ANALYSIS

    lower_text = text.lower()
    scores = score_emotions(lower_text)
    emotion, max_score = dominant_emotion(scores)

    analysis = EmotionAnalysis(
        emotion=emotion,
        intensity=_intensity(max_score, len(text.split()), emotion),
        energy=_energy(lower_text, emotion),
        mood=_mood(lower_text, emotion),
    )

    if debug_enabled():
        log_debug_data("classify", {
            **{f"score_{e.value}": s for e, s in scores.items()},
            **analysis.to_dict(),
        })
    return analysis
