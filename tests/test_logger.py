# tests/test_logger.py
"""
Tests for the logging helpers.
"""

import logging

import pytest


class TestLogContext:

    def test_records_duration(self):
        from actor_core.logger import LogContext

        with LogContext("unit of work") as ctx:
            pass

        assert ctx.duration >= 0.0

    def test_does_not_swallow_exceptions(self):
        from actor_core.logger import LogContext

        with pytest.raises(RuntimeError):
            with LogContext("failing stage", log_user=True):
                raise RuntimeError("boom")


class TestDebugData:

    def test_silent_when_debug_disabled(self, caplog):
        from actor_core.logger import log_debug_data

        debug_logger = logging.getLogger("actor.debug")
        debug_logger.addHandler(caplog.handler)
        try:
            log_debug_data("classify", {"score_fear": 2})
        finally:
            debug_logger.removeHandler(caplog.handler)

        assert "score_fear" not in caplog.text

    def test_formats_values_in_debug_mode(self, caplog):
        from actor_core.logger import log_debug_data

        debug_logger = logging.getLogger("actor.debug")
        previous = debug_logger.level
        debug_logger.setLevel(logging.DEBUG)
        debug_logger.addHandler(caplog.handler)
        try:
            log_debug_data("classify", {"score_fear": 2, "intensity": 0.5})
        finally:
            debug_logger.removeHandler(caplog.handler)
            debug_logger.setLevel(previous)

        assert "[classify]" in caplog.text
        assert "score_fear: 2" in caplog.text
        assert "intensity: 0.5000" in caplog.text


class TestDebugEnabled:

    def test_follows_debug_channel_level(self):
        from actor_core.logger import debug_enabled

        debug_logger = logging.getLogger("actor.debug")
        previous = debug_logger.level
        try:
            debug_logger.setLevel(logging.WARNING)
            assert debug_enabled() is False
            debug_logger.setLevel(logging.DEBUG)
            assert debug_enabled() is True
        finally:
            debug_logger.setLevel(previous)


class TestUserChannel:

    def test_failed_stage_reported(self, caplog):
        from actor_core.logger import LogContext

        user_logger = logging.getLogger("actor.user")
        user_logger.addHandler(caplog.handler)
        try:
            with pytest.raises(ValueError):
                with LogContext("Rendering music", log_user=True):
                    raise ValueError("no samples")
        finally:
            user_logger.removeHandler(caplog.handler)

        assert "Rendering music failed: no samples" in caplog.text

    def test_prefixes(self, caplog):
        from actor_core.logger import log_warn, log_step

        user_logger = logging.getLogger("actor.user")
        user_logger.addHandler(caplog.handler)
        try:
            log_step("Analyzing")
            log_warn("Provider missing")
        finally:
            user_logger.removeHandler(caplog.handler)

        assert "🔄 Analyzing" in caplog.text
        assert "⚠️ Provider missing" in caplog.text
