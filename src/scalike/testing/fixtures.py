"""Testing fixtures – settings isolation for scalike tests.

Enable in your ``conftest.py``::

    pytest_plugins = ["scalike.testing.fixtures"]
"""
from __future__ import annotations

try:
    import pytest

    @pytest.fixture
    def scalike_settings():
        """Pytest fixture: default ScalikeSettings, restored after the test."""
        from scalike.config import ScalikeSettings, reset_settings, set_settings

        settings = ScalikeSettings()
        set_settings(settings)
        yield settings
        reset_settings()

    @pytest.fixture
    def trace_evaluation():
        """Pytest fixture: enables lazy-evaluation trace events for one test."""
        from scalike.config import ScalikeSettings, reset_settings, set_settings

        settings = ScalikeSettings(trace_evaluation=True, log_level="DEBUG")
        set_settings(settings)
        yield settings
        reset_settings()

except ImportError:
    pass

__all__ = ["scalike_settings", "trace_evaluation"]
