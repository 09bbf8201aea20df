# actor_core/emotion_timeline.py
"""
Emotion and gesture timelines for the virtual actor.

Turns an EmotionAnalysis and a clip duration into time-stamped cues that
the avatar animation driver applies during playback.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .scene_emotion import Emotion, EmotionAnalysis, Energy

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 10.0

# Emotion timeline thresholds (seconds)
MIDPOINT_MIN_DURATION = 5.0
END_CUE_MIN_DURATION = 2.0
END_CUE_OFFSET = 0.5

MIDPOINT_BOOST = 1.2
END_DECAY = 0.8
END_MIN_INTENSITY = 0.2

GESTURE_MATCH_TOLERANCE = 0.1


class Gesture(str, Enum):
    """Body gestures the avatar rig knows."""
    RECOIL = "recoil"
    DEFENSIVE = "defensive"
    RETREAT = "retreat"
    WAVE = "wave"
    CELEBRATE = "celebrate"
    CLAP = "clap"
    MEDITATE = "meditate"
    BREATHE = "breathe"
    RELAX = "relax"
    SLUMP = "slump"
    SIGH = "sigh"
    LOOK_DOWN = "look_down"
    POINT = "point"
    FIST = "fist"
    AGGRESSIVE = "aggressive"
    GASP = "gasp"
    STEP_BACK = "step_back"
    WIDE_EYES = "wide_eyes"
    REACH = "reach"
    LOOK_UP = "look_up"
    EXPLORE = "explore"


GESTURE_VOCABULARY: Mapping[Emotion, Tuple[Gesture, ...]] = MappingProxyType({
    Emotion.FEAR: (Gesture.RECOIL, Gesture.DEFENSIVE, Gesture.RETREAT),
    Emotion.JOY: (Gesture.WAVE, Gesture.CELEBRATE, Gesture.CLAP),
    Emotion.CALM: (Gesture.MEDITATE, Gesture.BREATHE, Gesture.RELAX),
    Emotion.SADNESS: (Gesture.SLUMP, Gesture.SIGH, Gesture.LOOK_DOWN),
    Emotion.ANGER: (Gesture.POINT, Gesture.FIST, Gesture.AGGRESSIVE),
    Emotion.SURPRISE: (Gesture.GASP, Gesture.STEP_BACK, Gesture.WIDE_EYES),
    Emotion.WONDER: (Gesture.REACH, Gesture.LOOK_UP, Gesture.EXPLORE),
})

GESTURE_COUNTS: Mapping[Energy, int] = MappingProxyType({
    Energy.HIGH: 3,
    Energy.MEDIUM: 2,
    Energy.LOW: 1,
})


@dataclass(frozen=True)
class EmotionTimelineCue:
    """Facial/body expression to apply from `time` onward."""
    time: float
    emotion: str
    intensity: float

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "emotion": self.emotion, "intensity": self.intensity}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmotionTimelineCue":
        return cls(
            time=float(data["time"]),
            emotion=str(data["emotion"]),
            intensity=float(data["intensity"]),
        )


@dataclass(frozen=True)
class GestureCue:
    """Gesture trigger point."""
    time: float
    gesture: str

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "gesture": self.gesture}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GestureCue":
        return cls(time=float(data["time"]), gesture=str(data["gesture"]))


def generate_emotion_timeline(
    analysis: EmotionAnalysis,
    duration: float = DEFAULT_DURATION
) -> List[EmotionTimelineCue]:
    """
    Build the expression timeline for a clip.

    - Always a cue at 0 with the analysis intensity
    - duration > 5: midpoint cue, intensity x1.2 (max 1.0)
    - duration > 2: cue 0.5s before the end, intensity x0.8 (min 0.2)

    Cues are appended in chronological order.

    Args:
        analysis: Scene classification
        duration: Adjusted clip duration in seconds

    Returns:
        Non-empty list of EmotionTimelineCue
    """
    label = getattr(analysis.emotion, "value", analysis.emotion)
    timeline = [EmotionTimelineCue(time=0.0, emotion=label, intensity=analysis.intensity)]

    if duration > MIDPOINT_MIN_DURATION:
        timeline.append(EmotionTimelineCue(
            time=duration / 2,
            emotion=label,
            intensity=min(analysis.intensity * MIDPOINT_BOOST, 1.0),
        ))

    if duration > END_CUE_MIN_DURATION:
        timeline.append(EmotionTimelineCue(
            time=duration - END_CUE_OFFSET,
            emotion=label,
            intensity=max(analysis.intensity * END_DECAY, END_MIN_INTENSITY),
        ))

    return timeline


def generate_gesture_cues(
    analysis: EmotionAnalysis,
    duration: float = DEFAULT_DURATION
) -> List[GestureCue]:
    """
    Place gestures evenly across the clip.

    Energy picks how many (high 3, medium 2, low 1); the i-th cue sits at
    duration / (count + 1) * (i + 1) and uses the i-th gesture of the
    emotion's vocabulary. An emotion with no vocabulary, or a clip with no
    length, gets no gestures.

    Args:
        analysis: Scene classification
        duration: Adjusted clip duration in seconds

    Returns:
        List of GestureCue (possibly empty)
    """
    available = GESTURE_VOCABULARY.get(analysis.emotion, ())
    if not available:
        logger.debug(f"No gesture vocabulary for emotion '{analysis.emotion}'")
        return []
    if duration <= 0:
        return []

    count = GESTURE_COUNTS.get(analysis.energy, GESTURE_COUNTS[Energy.MEDIUM])
    interval = duration / (count + 1)

    return [
        GestureCue(time=interval * (i + 1), gesture=available[i].value)
        for i in range(min(count, len(available)))
    ]


# =============================================================================
# PLAYBACK LOOKUP
# =============================================================================

def active_emotion_at(
    timeline: Sequence[EmotionTimelineCue],
    current_time: float
) -> Optional[EmotionTimelineCue]:
    """Latest cue at or before current_time, or None before the first cue."""
    active = None
    for cue in timeline:
        if cue.time <= current_time and (active is None or cue.time > active.time):
            active = cue
    return active


def gesture_at(
    cues: Sequence[GestureCue],
    current_time: float,
    tolerance: float = GESTURE_MATCH_TOLERANCE
) -> Optional[GestureCue]:
    """First gesture cue within tolerance of current_time, or None."""
    for cue in cues:
        if abs(cue.time - current_time) < tolerance:
            return cue
    return None
