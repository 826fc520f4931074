"""Tests for application settings."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from ice_popsicles.config import Settings, get_settings
from ice_popsicles.reference.state_grid import ALL_STATES


class TestDefaults:
    """Defaults reproduce the fixed winter run."""

    def test_window(self) -> None:
        settings = Settings()
        assert settings.start_date == date(2020, 11, 1)
        assert settings.end_date == date(2021, 3, 31)

    def test_all_grid_states(self) -> None:
        assert Settings().states == ALL_STATES

    def test_output(self) -> None:
        settings = Settings()
        assert settings.output_path == Path("ice_popsicles.png")
        assert settings.dpi == 300
        assert settings.skip_failed_states is False


class TestEnvironment:
    """Values can be overridden from the environment."""

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ICE_POPSICLES_START_DATE", "2021-11-01")
        monkeypatch.setenv("ICE_POPSICLES_END_DATE", "2022-03-31")
        monkeypatch.setenv("ICE_POPSICLES_SKIP_FAILED_STATES", "true")
        settings = Settings()
        assert settings.start_date == date(2021, 11, 1)
        assert settings.skip_failed_states is True

    def test_states_from_json_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ICE_POPSICLES_STATES", '["wi", " mn "]')
        assert Settings().states == ["WI", "MN"]


class TestValidation:
    """Invalid settings are rejected."""

    def test_inverted_window(self) -> None:
        with pytest.raises(ValidationError, match="after end_date"):
            Settings(start_date=date(2021, 4, 1), end_date=date(2021, 3, 1))

    def test_non_positive_dpi(self) -> None:
        with pytest.raises(ValidationError):
            Settings(dpi=0)


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()
