# tests/test_config.py
"""
Tests for generation settings and engine configuration.
"""

import logging
from pathlib import Path

import pytest


class TestValidateSettings:

    def test_defaults(self):
        from actor_core.config import validate_settings, DEFAULT_SETTINGS

        assert validate_settings() == DEFAULT_SETTINGS
        assert validate_settings({}) == DEFAULT_SETTINGS

    @pytest.mark.parametrize("duration, expected", [
        (1, 3.0), (3, 3.0), (8, 8.0), (30, 30.0), (45, 30.0), (0, 5.0), (None, 5.0),
    ])
    def test_duration_clamped(self, duration, expected):
        from actor_core.config import validate_settings

        assert validate_settings({"duration": duration}).duration == expected

    def test_keeps_valid_choices(self):
        from actor_core.config import validate_settings

        settings = validate_settings({"aspect_ratio": "9:16", "style_preset": "dramatic"})

        assert settings.aspect_ratio == "9:16"
        assert settings.style_preset == "dramatic"

    def test_unknown_choices_fall_back(self):
        from actor_core.config import validate_settings

        settings = validate_settings({"aspect_ratio": "21:9", "style_preset": "noir"})

        assert settings.aspect_ratio == "16:9"
        assert settings.style_preset == "natural"

    def test_resolution(self):
        from actor_core.config import validate_settings, get_resolution_for_aspect_ratio

        assert validate_settings({"aspect_ratio": "4:3"}).resolution == (1440, 1080)
        assert get_resolution_for_aspect_ratio("9:16") == (1080, 1920)

    def test_unknown_resolution_raises(self):
        from actor_core.config import get_resolution_for_aspect_ratio

        with pytest.raises(ValueError):
            get_resolution_for_aspect_ratio("2:1")

    def test_to_dict_keys(self):
        from actor_core.config import DEFAULT_SETTINGS

        assert DEFAULT_SETTINGS.to_dict() == {
            "duration": 5.0,
            "aspectRatio": "16:9",
            "stylePreset": "natural",
        }


class TestActorConfig:

    def test_defaults(self):
        from actor_core.config import ActorConfig
        from actor_core.providers import EmotionProvider, GenerationProvider

        config = ActorConfig()

        assert config.output_dir == Path("./actor_output")
        assert config.emotion_provider is EmotionProvider.LOCAL
        assert config.generation_provider is GenerationProvider.KLING26
        assert config.sample_rate == 44100
        assert config.debug is False

    def test_reads_environment(self, monkeypatch, temp_output_dir):
        from actor_core.config import ActorConfig
        from actor_core.providers import EmotionProvider, GenerationProvider

        monkeypatch.setenv("ACTOR_OUTPUT_DIR", str(temp_output_dir))
        monkeypatch.setenv("ACTOR_EMOTION_PROVIDER", "gemini")
        monkeypatch.setenv("ACTOR_GENERATION_PROVIDER", "local")
        monkeypatch.setenv("ACTOR_SAMPLE_RATE", "22050")
        monkeypatch.setenv("ACTOR_DEBUG", "true")

        config = ActorConfig()

        assert config.output_dir == temp_output_dir
        assert config.emotion_provider is EmotionProvider.GEMINI
        assert config.generation_provider is GenerationProvider.LOCAL
        assert config.sample_rate == 22050
        assert config.debug is True

    def test_from_env_loads_dotenv(self, monkeypatch, temp_output_dir):
        from actor_core.config import ActorConfig

        env_file = temp_output_dir / ".env"
        env_file.write_text("ACTOR_MUSIC_DURATION=4.5\n")
        # register the variable so monkeypatch removes what load_dotenv sets
        monkeypatch.setenv("ACTOR_MUSIC_DURATION", "placeholder")
        monkeypatch.delenv("ACTOR_MUSIC_DURATION")

        config = ActorConfig.from_env(env_file)

        assert config.music_duration == 4.5

    def test_environment_wins_over_dotenv(self, monkeypatch, temp_output_dir):
        from actor_core.config import ActorConfig

        env_file = temp_output_dir / ".env"
        env_file.write_text("ACTOR_SAMPLE_RATE=16000\n")
        monkeypatch.setenv("ACTOR_SAMPLE_RATE", "48000")

        assert ActorConfig.from_env(env_file).sample_rate == 48000

    def test_validate_warns(self):
        from actor_core.config import ActorConfig
        from actor_core.providers import EmotionProvider

        config = ActorConfig(sample_rate=100, music_duration=0, emotion_provider=EmotionProvider.GEMINI)

        with pytest.warns(UserWarning):
            problems = config.validate()

        assert len(problems) == 3

    def test_validate_clean(self, fast_config):
        assert fast_config.validate() == []

    def test_save_and_load(self, fast_config, temp_output_dir):
        from actor_core.config import ActorConfig

        path = temp_output_dir / "config.json"
        fast_config.save(path)
        loaded = ActorConfig.load(path)

        assert loaded == fast_config

    def test_ensure_dirs(self, temp_output_dir):
        from actor_core.config import ActorConfig

        config = ActorConfig(
            output_dir=temp_output_dir / "out",
            settings_path=temp_output_dir / "state" / "settings.json",
        )
        config.ensure_dirs()

        assert (temp_output_dir / "out").is_dir()
        assert (temp_output_dir / "state").is_dir()

    def test_configure_logging_uses_debug_flag(self, temp_output_dir):
        from actor_core.config import ActorConfig
        from actor_core.logger import reset_logging, setup_logging

        log_file = temp_output_dir / "debug.log"
        config = ActorConfig(output_dir=temp_output_dir, debug=True)
        try:
            config.configure_logging(str(log_file))

            assert logging.getLogger("actor.debug").isEnabledFor(logging.DEBUG)
            assert log_file.exists()
        finally:
            reset_logging()
            setup_logging()

        assert not logging.getLogger("actor.debug").isEnabledFor(logging.DEBUG)

    def test_summary(self, fast_config):
        summary = fast_config.summary()

        assert summary["providers"]["emotion_provider"] == "local"
        assert summary["audio"]["sample_rate"] == 8000


class TestGlobalConfig:

    def test_get_config_cached(self):
        from actor_core.config import get_config

        assert get_config() is get_config()

    def test_set_and_reset(self, fast_config):
        from actor_core.config import get_config, set_config, reset_config

        set_config(fast_config)
        assert get_config() is fast_config

        reset_config()
        assert get_config() is not fast_config

    def test_list_presets(self):
        from actor_core.config import list_presets

        assert "cinematic" in list_presets()
        assert len(list_presets()) == 5
