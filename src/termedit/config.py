"""Editor settings resolved from defaults and ``TERMEDIT_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from termedit import __version__

ENV_PREFIX = "TERMEDIT_"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    tab_width: int = 4
    welcome_message: str = f"termedit -- version {__version__}"
    empty_row_marker: str = "~"
    marker_color: str = "green"
    # Used until the host reports a real terminal size.
    fallback_width: int = 80
    fallback_height: int = 24

    def __post_init__(self) -> None:
        if self.tab_width < 0:
            raise ValueError("tab_width cannot be negative")
        if not self.empty_row_marker:
            raise ValueError("empty_row_marker cannot be empty")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        defaults = cls()
        return cls(
            tab_width=max(_env_int(source, "TAB_WIDTH", defaults.tab_width), 0),
            welcome_message=source.get(
                f"{ENV_PREFIX}WELCOME", defaults.welcome_message
            ),
            marker_color=source.get(
                f"{ENV_PREFIX}MARKER_COLOR", defaults.marker_color
            ),
            fallback_width=max(_env_int(source, "WIDTH", defaults.fallback_width), 0),
            fallback_height=max(
                _env_int(source, "HEIGHT", defaults.fallback_height), 0
            ),
        )


__all__ = ["EditorConfig"]
