"""Report theme definitions and selection helpers.

Themes are ANSI palettes for the emphasized tokens of report lines.
Paths and the surrounding wording are never coloured.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportTheme:
    """Semantic ANSI palette used by the report formatter."""

    name: str
    reset: str
    differ: str
    only_in: str
    kind: str


DEFAULT_THEME = ReportTheme(
    name="default",
    reset="\033[0m",
    differ="\033[91m",
    only_in="\033[93m",
    kind="\033[95m",
)

SOFT_THEME = ReportTheme(
    name="soft",
    reset="\033[0m",
    differ="\033[38;5;210m",
    only_in="\033[38;5;222m",
    kind="\033[38;5;183m",
)

PLAIN_THEME = ReportTheme(
    name="plain",
    reset="",
    differ="",
    only_in="",
    kind="",
)

_THEMES: dict[str, ReportTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    SOFT_THEME.name: SOFT_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ReportTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def paint(text: str, color: str, theme: ReportTheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, or return it unchanged."""
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


__all__ = [
    "ReportTheme",
    "DEFAULT_THEME",
    "SOFT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "paint",
    "resolve_theme",
]
