from __future__ import annotations

import pytest

from termedit.config import MODE_CONFIGS, EditorConfig, EditorMode


def test_from_env_reads_prefixed_variables(monkeypatch) -> None:
    monkeypatch.setenv("TERMEDIT_TAB_WIDTH", "8")
    monkeypatch.setenv("TERMEDIT_LOG_PRESET", "development")

    config = EditorConfig.from_env()

    assert config.tab_width == 8
    assert config.log_preset == "development"
    assert config.chrome_rows == 2


def test_from_env_ignores_malformed_integers(monkeypatch) -> None:
    monkeypatch.setenv("TERMEDIT_TAB_WIDTH", "wide")

    assert EditorConfig.from_env().tab_width == 4


def test_invalid_tab_width_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(tab_width=0)


def test_viewport_size_reserves_chrome_rows() -> None:
    config = EditorConfig(chrome_rows=2)

    assert config.viewport_size(80, 24) == (80, 22)
    assert config.viewport_size(0, 1) == (1, 1)


def test_every_mode_has_presentation_config() -> None:
    assert set(MODE_CONFIGS) == set(EditorMode)
