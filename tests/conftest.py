"""
Pytest fixtures for Actor Scene Engine tests.

No network or external services are used anywhere in the suite.
"""

import sys
import pytest
import tempfile
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# CLEAN ENVIRONMENT
# =============================================================================

@pytest.fixture(autouse=True)
def clean_actor_env(monkeypatch):
    """Strip ACTOR_* variables so tests see defaults."""
    for name in (
        "ACTOR_DEBUG",
        "ACTOR_OUTPUT_DIR",
        "ACTOR_SETTINGS_PATH",
        "ACTOR_EMOTION_PROVIDER",
        "ACTOR_GENERATION_PROVIDER",
        "ACTOR_SAMPLE_RATE",
        "ACTOR_MUSIC_DURATION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_global_config():
    """Reset the global config between tests."""
    from actor_core.config import reset_config

    reset_config()
    yield
    reset_config()


# =============================================================================
# TEMP DIRECTORIES
# =============================================================================

@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings_path(temp_output_dir):
    """Path for a provider settings file (not created)."""
    return temp_output_dir / "settings.json"


# =============================================================================
# SAMPLE ANALYSES
# =============================================================================

@pytest.fixture
def joy_high():
    from actor_core.scene_emotion import EmotionAnalysis, Emotion, Energy, Mood

    return EmotionAnalysis(
        emotion=Emotion.JOY,
        intensity=0.9,
        energy=Energy.HIGH,
        mood=Mood.BRIGHT,
    )


@pytest.fixture
def fear_low():
    from actor_core.scene_emotion import EmotionAnalysis, Emotion, Energy, Mood

    return EmotionAnalysis(
        emotion=Emotion.FEAR,
        intensity=0.3,
        energy=Energy.LOW,
        mood=Mood.DARK,
    )


@pytest.fixture
def fast_config(temp_output_dir):
    """Config with a tiny sample rate so music rendering stays cheap."""
    from actor_core.config import ActorConfig

    return ActorConfig(
        output_dir=temp_output_dir,
        settings_path=temp_output_dir / "settings.json",
        sample_rate=8000,
        music_duration=1.0,
    )
