"""Unit tests for layered application settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from meal_planner.core.config import LLMProvider, Settings
from meal_planner.core.config.yaml_source import deep_merge, load_yaml_dir


if TYPE_CHECKING:
    from pathlib import Path


pytestmark = pytest.mark.unit


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A config directory with base and test overrides."""
    base = tmp_path / "base"
    base.mkdir()
    (base / "app.yaml").write_text(
        "app:\n  name: From YAML\nlogging:\n  level: INFO\n  format: json\n"
    )
    (base / "llm.yaml").write_text("llm:\n  provider: openai\n  openai:\n    model: gpt-4o\n")

    env_dir = tmp_path / "environments" / "test"
    env_dir.mkdir(parents=True)
    (env_dir / "app.yaml").write_text("logging:\n  level: DEBUG\n")

    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("APP_ENV", "test")
    return tmp_path


class TestYamlHelpers:
    """Tests for YAML merging helpers."""

    def test_deep_merge_nested(self) -> None:
        """Should merge nested dicts and let the override win."""
        merged = deep_merge(
            {"llm": {"provider": "openai", "openai": {"model": "a"}}},
            {"llm": {"openai": {"model": "b"}}},
        )

        assert merged == {"llm": {"provider": "openai", "openai": {"model": "b"}}}

    def test_load_missing_dir_is_empty(self, tmp_path: Path) -> None:
        """Should treat a missing directory as no configuration."""
        assert load_yaml_dir(tmp_path / "nope") == {}


class TestSettingsSources:
    """Tests for source precedence."""

    @pytest.mark.usefixtures("config_dir")
    def test_environment_yaml_overrides_base(self) -> None:
        """Should deep-merge the environment files over the base files."""
        settings = Settings()

        assert settings.app.name == "From YAML"
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "json"
        assert settings.is_testing

    @pytest.mark.usefixtures("config_dir")
    def test_env_var_overrides_yaml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should let nested environment variables win over YAML."""
        monkeypatch.setenv("LLM__PROVIDER", "gemini")

        settings = Settings()

        assert settings.llm.provider == LLMProvider.GEMINI

    @pytest.mark.usefixtures("config_dir")
    def test_init_overrides_everything(self) -> None:
        """Should prefer explicit constructor values."""
        settings = Settings(app={"name": "Explicit"})

        assert settings.app.name == "Explicit"

    def test_api_key_for_provider(self) -> None:
        """Should select the credential of the given provider."""
        settings = Settings(OPENAI_API_KEY="sk-test", GEMINI_API_KEY="gm-test")

        assert settings.api_key_for(LLMProvider.OPENAI) == "sk-test"
        assert settings.api_key_for(LLMProvider.GEMINI) == "gm-test"
