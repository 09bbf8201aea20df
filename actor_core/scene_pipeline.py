# actor_core/scene_pipeline.py
"""
Scene analysis pipeline.

Runs the deterministic stages that happen before rendering:
1. Emotion analysis (local classifier; cloud providers are stubs)
2. Emotion-adjusted duration
3. Gesture timeline
4. Emotion timeline
5. Visual and music modifiers

The renderer, audio stage and storage layer consume the SceneAnalysis;
SceneConfigRecord is the JSON form stored next to the video.
"""

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np

from .config import ActorConfig, GenerationSettings
from .emotion_modifiers import (
    MusicParameters,
    VisualModifiers,
    duration_multiplier,
    music_parameters,
    visual_modifiers,
)
from .emotion_timeline import (
    EmotionTimelineCue,
    GestureCue,
    generate_emotion_timeline,
    generate_gesture_cues,
)
from .generation_errors import ProviderUnavailableError
from .logger import LogContext, log_warn
from .music_synth import render_music_bed, write_wav
from .providers import EmotionProvider, ProviderSettings
from .scene_emotion import EmotionAnalysis, classify

logger = logging.getLogger(__name__)

MAX_BASE_DURATION = 10.0
MIN_BASE_DURATION = 0.5
CHARS_PER_SECOND = 10


def base_duration_for_text(text: str) -> float:
    """
    Clip length before emotion adjustment: one second per 10 characters,
    capped at 10s and never below MIN_BASE_DURATION.
    """
    return max(min(len(text or "") / CHARS_PER_SECOND, MAX_BASE_DURATION), MIN_BASE_DURATION)


# =============================================================================
# ANALYZERS
# =============================================================================

class LocalEmotionAnalyzer:
    """Rule-based classifier, no network."""

    provider = EmotionProvider.LOCAL

    def analyze(self, text: str) -> EmotionAnalysis:
        return classify(text)


class CloudEmotionAnalyzer:
    """Placeholder for a hosted sentiment model. Not implemented."""

    def __init__(self, provider: EmotionProvider):
        self.provider = provider

    def analyze(self, text: str) -> EmotionAnalysis:
        raise ProviderUnavailableError(self.provider.value)


def get_analyzer(provider: EmotionProvider):
    """Analyzer for a provider selection."""
    if provider is EmotionProvider.LOCAL:
        return LocalEmotionAnalyzer()
    return CloudEmotionAnalyzer(provider)


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class SceneAnalysis:
    """Everything the renderer and audio stage need for one clip."""
    text: str
    analysis: EmotionAnalysis
    base_duration: float
    duration: float  # emotion-adjusted
    visual: VisualModifiers
    music: MusicParameters
    emotion_timeline: Tuple[EmotionTimelineCue, ...] = ()
    gesture_cues: Tuple[GestureCue, ...] = ()
    provider: EmotionProvider = EmotionProvider.LOCAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "emotionAnalysis": self.analysis.to_dict(),
            "baseDuration": self.base_duration,
            "duration": self.duration,
            "visual": self.visual.to_dict(),
            "music": self.music.to_dict(),
            "emotions": [cue.to_dict() for cue in self.emotion_timeline],
            "gestures": [cue.to_dict() for cue in self.gesture_cues],
            "provider": self.provider.value,
        }


@dataclass
class SceneConfigRecord:
    """
    Scene configuration stored alongside a generated video.

    Serialized keys match the stored records exactly: text, timestamp,
    gestures, emotions, emotionAnalysis, avatarId.
    """
    text: str
    timestamp: int  # milliseconds since epoch
    gestures: List[GestureCue]
    emotions: List[EmotionTimelineCue]
    emotion_analysis: EmotionAnalysis
    avatar_id: Optional[str] = None

    @classmethod
    def from_scene(
        cls,
        scene: SceneAnalysis,
        avatar_id: Optional[str] = None,
        timestamp: Optional[int] = None
    ) -> "SceneConfigRecord":
        return cls(
            text=scene.text,
            timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
            gestures=list(scene.gesture_cues),
            emotions=list(scene.emotion_timeline),
            emotion_analysis=scene.analysis,
            avatar_id=avatar_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "text": self.text,
            "timestamp": self.timestamp,
            "gestures": [cue.to_dict() for cue in self.gestures],
            "emotions": [cue.to_dict() for cue in self.emotions],
            "emotionAnalysis": self.emotion_analysis.to_dict(),
        }
        if self.avatar_id is not None:
            data["avatarId"] = self.avatar_id
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SceneConfigRecord":
        return cls(
            text=data["text"],
            timestamp=int(data["timestamp"]),
            gestures=[GestureCue.from_dict(g) for g in data.get("gestures", [])],
            emotions=[EmotionTimelineCue.from_dict(e) for e in data.get("emotions", [])],
            emotion_analysis=EmotionAnalysis.from_dict(data["emotionAnalysis"]),
            avatar_id=data.get("avatarId"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "SceneConfigRecord":
        return cls.from_dict(json.loads(raw))


# =============================================================================
# PIPELINE
# =============================================================================

class ScenePipeline:
    """
    Deterministic pre-render pipeline.

    Usage:
        pipeline = ScenePipeline(ProviderSettings.load(config.settings_path))
        scene = pipeline.analyze("A calm peaceful sunrise with golden light")
        record = SceneConfigRecord.from_scene(scene, avatar_id="avatar-1")
    """

    def __init__(
        self,
        settings: Optional[ProviderSettings] = None,
        generation: Optional[GenerationSettings] = None,
        config: Optional[ActorConfig] = None
    ):
        """
        Args:
            settings: Provider selections (default: the config's providers)
            generation: User generation settings; its duration is used as the
                base duration when analyze() is not given one
            config: Engine config for providers and audio rendering
        """
        self.config = config or ActorConfig()
        self.settings = settings or ProviderSettings(
            emotion_provider=self.config.emotion_provider,
            generation_provider=self.config.generation_provider,
        )
        self.generation = generation

    def _analyze_emotion(self, text: str):
        provider = self.settings.emotion_provider
        analyzer = get_analyzer(provider)
        try:
            return analyzer.analyze(text), provider
        except ProviderUnavailableError as e:
            log_warn(f"{e}, using local analysis")
            return LocalEmotionAnalyzer().analyze(text), EmotionProvider.LOCAL

    def analyze(self, text: str, base_duration: Optional[float] = None) -> SceneAnalysis:
        """
        Analyze narration text for rendering.

        Args:
            text: Narration text
            base_duration: Clip length in seconds before emotion adjustment
                (default: generation settings duration, else derived from text)

        Returns:
            SceneAnalysis
        """
        with LogContext("Analyzing scene emotion and mood", log_user=True):
            analysis, provider = self._analyze_emotion(text)

        if base_duration is None:
            if self.generation is not None:
                base_duration = self.generation.duration
            else:
                base_duration = base_duration_for_text(text)
        duration = base_duration * duration_multiplier(analysis.emotion)

        with LogContext("Generating gesture timeline"):
            gestures = generate_gesture_cues(analysis, duration)

        with LogContext("Generating emotion timeline"):
            emotions = generate_emotion_timeline(analysis, duration)

        scene = SceneAnalysis(
            text=text,
            analysis=analysis,
            base_duration=base_duration,
            duration=duration,
            visual=visual_modifiers(analysis.emotion, analysis.mood),
            music=music_parameters(analysis.emotion, analysis.energy),
            emotion_timeline=tuple(emotions),
            gesture_cues=tuple(gestures),
            provider=provider,
        )

        logger.info(
            f"Scene: {analysis.emotion.value} ({analysis.intensity}) "
            f"{analysis.energy.value}/{analysis.mood.value}, "
            f"{duration:.2f}s, {len(emotions)} emotion cues, {len(gestures)} gestures"
        )
        return scene

    def render_music(
        self,
        scene: SceneAnalysis,
        output_path: Optional[Union[str, Path]] = None
    ) -> np.ndarray:
        """
        Render the scene's music bed, optionally writing it as WAV.

        Returns:
            float32 samples of shape (num_samples, 2)
        """
        with LogContext(f"Composing {scene.analysis.emotion.value} background music", log_user=True):
            samples = render_music_bed(
                scene.music,
                duration=self.config.music_duration,
                sample_rate=self.config.sample_rate,
            )
            if output_path is not None:
                write_wav(samples, output_path, self.config.sample_rate)
        return samples
