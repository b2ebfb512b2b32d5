from __future__ import annotations

import pytest

from termedit import __version__
from termedit.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_width == 4
    assert config.empty_row_marker == "~"
    assert __version__ in config.welcome_message


def test_from_env_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "TERMEDIT_TAB_WIDTH": "2",
            "TERMEDIT_WELCOME": "hi there",
            "TERMEDIT_MARKER_COLOR": "blue",
            "TERMEDIT_WIDTH": "120",
            "TERMEDIT_HEIGHT": "40",
        }
    )

    assert config.tab_width == 2
    assert config.welcome_message == "hi there"
    assert config.marker_color == "blue"
    assert (config.fallback_width, config.fallback_height) == (120, 40)


def test_from_env_ignores_bad_values() -> None:
    config = EditorConfig.from_env(
        {"TERMEDIT_TAB_WIDTH": "wide", "TERMEDIT_HEIGHT": "-3"}
    )

    assert config.tab_width == 4
    assert config.fallback_height == 0


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(tab_width=-1)
    with pytest.raises(ValueError):
        EditorConfig(empty_row_marker="")
