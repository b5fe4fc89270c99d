"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, the cursor cell and the status
bar. The plain theme carries no escape sequences and is used for
``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame painter."""

    name: str
    reset: str
    border: str
    title: str
    cursor: str
    gauge_filled: str
    gauge_empty: str
    gauge_fill_char: str
    counter: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    title="\033[1m",
    cursor="\033[7m",
    gauge_filled="\033[3;37;41m",
    gauge_empty="\033[3;31;40m",
    gauge_fill_char=" ",
    counter="\033[1m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[38;5;31m",
    title="\033[1;38;5;45m",
    cursor="\033[1;38;5;16;48;5;45m",
    gauge_filled="\033[38;5;16;48;5;39m",
    gauge_empty="\033[38;5;153;48;5;24m",
    gauge_fill_char=" ",
    counter="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    cursor="",
    gauge_filled="",
    gauge_empty="",
    gauge_fill_char="#",
    counter="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
