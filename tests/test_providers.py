# tests/test_providers.py
"""
Tests for provider registries and persisted selections.
"""

import json

import pytest


class TestRegistries:

    def test_only_local_emotion_provider_available(self):
        from actor_core.providers import EmotionProvider, is_provider_available

        assert is_provider_available(EmotionProvider.LOCAL) is True
        assert is_provider_available(EmotionProvider.GEMINI) is False

    def test_only_local_generation_provider_available(self):
        from actor_core.providers import GenerationProvider, is_provider_available

        available = [p for p in GenerationProvider if is_provider_available(p)]

        assert available == [GenerationProvider.LOCAL]

    def test_registries_cover_every_provider(self):
        from actor_core.providers import (
            EMOTION_PROVIDERS, GENERATION_PROVIDERS, EmotionProvider, GenerationProvider,
        )

        assert set(EMOTION_PROVIDERS) == set(EmotionProvider)
        assert set(GENERATION_PROVIDERS) == set(GenerationProvider)
        for provider, info in GENERATION_PROVIDERS.items():
            assert info.id == provider.value

    def test_kling_badge(self):
        from actor_core.providers import GENERATION_PROVIDERS, GenerationProvider

        assert GENERATION_PROVIDERS[GenerationProvider.KLING26].badge == "Best value"

    def test_unknown_value_not_available(self):
        from actor_core.providers import is_provider_available

        assert is_provider_available("local") is False


class TestParseProvider:

    def test_valid_value(self):
        from actor_core.providers import parse_provider, EmotionProvider

        assert parse_provider("gemini", EmotionProvider, EmotionProvider.LOCAL) is EmotionProvider.GEMINI

    def test_missing_value(self):
        from actor_core.providers import parse_provider, GenerationProvider

        result = parse_provider(None, GenerationProvider, GenerationProvider.KLING26)

        assert result is GenerationProvider.KLING26

    def test_unknown_value_logs_and_falls_back(self, caplog):
        from actor_core.providers import parse_provider, EmotionProvider

        with caplog.at_level("WARNING", logger="actor_core.providers"):
            result = parse_provider("openai", EmotionProvider, EmotionProvider.LOCAL)

        assert result is EmotionProvider.LOCAL
        assert "openai" in caplog.text


class TestProviderSettings:

    def test_defaults(self):
        from actor_core.providers import ProviderSettings, EmotionProvider, GenerationProvider

        settings = ProviderSettings()

        assert settings.emotion_provider is EmotionProvider.LOCAL
        assert settings.generation_provider is GenerationProvider.KLING26

    def test_missing_file_gives_defaults(self, settings_path):
        from actor_core.providers import ProviderSettings

        settings = ProviderSettings.load(settings_path)

        assert settings == ProviderSettings()
        assert settings.path == settings_path

    def test_save_and_load(self, settings_path):
        from actor_core.providers import ProviderSettings, EmotionProvider, GenerationProvider

        settings = ProviderSettings()
        settings.set_emotion_provider("gemini")
        settings.set_generation_provider(GenerationProvider.LOCAL)
        settings.save(settings_path)

        loaded = ProviderSettings.load(settings_path)

        assert loaded.emotion_provider is EmotionProvider.GEMINI
        assert loaded.generation_provider is GenerationProvider.LOCAL

    def test_stored_keys(self, settings_path):
        from actor_core.providers import ProviderSettings

        ProviderSettings().save(settings_path)
        data = json.loads(settings_path.read_text())

        assert data == {
            "emotion-analysis-provider": "local",
            "generation-provider": "kling26",
        }

    def test_unknown_stored_values_fall_back(self, settings_path):
        from actor_core.providers import ProviderSettings

        settings_path.write_text(json.dumps({
            "emotion-analysis-provider": "watson",
            "generation-provider": "sora",
        }))

        assert ProviderSettings.load(settings_path) == ProviderSettings()

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", ""])
    def test_malformed_file_falls_back(self, settings_path, content):
        from actor_core.providers import ProviderSettings

        settings_path.write_text(content)

        assert ProviderSettings.load(settings_path) == ProviderSettings()

    def test_undecodable_file_falls_back(self, settings_path, caplog):
        from actor_core.providers import ProviderSettings

        settings_path.write_bytes(b'\xff\xfe{"emotion-analysis-provider": "gemini"}')

        with caplog.at_level("WARNING", logger="actor_core.providers"):
            settings = ProviderSettings.load(settings_path)

        assert settings == ProviderSettings()
        assert "Failed to read provider settings" in caplog.text

    def test_save_without_path_raises(self):
        from actor_core.providers import ProviderSettings
        from actor_core.generation_errors import SettingsError

        with pytest.raises(SettingsError):
            ProviderSettings().save()

    def test_save_reuses_loaded_path(self, settings_path):
        from actor_core.providers import ProviderSettings, EmotionProvider

        settings = ProviderSettings.load(settings_path)
        settings.set_emotion_provider(EmotionProvider.GEMINI)
        written = settings.save()

        assert written == settings_path
        assert ProviderSettings.load(settings_path).emotion_provider is EmotionProvider.GEMINI

    def test_invalid_selection_rejected(self):
        from actor_core.providers import ProviderSettings

        with pytest.raises(ValueError):
            ProviderSettings().set_emotion_provider("watson")
