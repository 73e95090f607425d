"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the treemap frame: title bar, tiles, status
bar, and modal dialogs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    title: str
    title_flash: str
    path_error: str
    tile_border: str
    tile_dir: str
    tile_file: str
    tile_dim: str
    tile_selected: str
    status: str
    status_flash: str
    loading: str
    modal_border: str
    modal_title: str
    modal_text: str
    modal_key: str
    error_text: str


DEFAULT_THEME = UITheme(
    name="default",
    title="\033[1;38;5;252m",
    title_flash="\033[1;7;38;5;81m",
    path_error="\033[1;38;5;203m",
    tile_border="\033[38;5;244m",
    tile_dir="\033[1;34m",
    tile_file="\033[38;5;252m",
    tile_dim="\033[2;38;5;244m",
    tile_selected="\033[1;38;5;16;48;5;229m",
    status="\033[38;5;250m",
    status_flash="\033[1;7;38;5;42m",
    loading="\033[38;5;214m",
    modal_border="\033[38;5;45m",
    modal_title="\033[1;38;5;45m",
    modal_text="\033[38;5;252m",
    modal_key="\033[38;5;229m",
    error_text="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    title="\033[1;38;5;153m",
    title_flash="\033[1;7;38;5;45m",
    path_error="\033[1;38;5;209m",
    tile_border="\033[2;38;5;31m",
    tile_dir="\033[1;38;5;45m",
    tile_file="\033[38;5;117m",
    tile_dim="\033[2;38;5;110m",
    tile_selected="\033[1;38;5;16;48;5;45m",
    status="\033[38;5;110m",
    status_flash="\033[1;7;38;5;84m",
    loading="\033[38;5;215m",
    modal_border="\033[38;5;39m",
    modal_title="\033[1;38;5;39m",
    modal_text="\033[38;5;153m",
    modal_key="\033[38;5;229m",
    error_text="\033[1;38;5;209m",
)

PLAIN_THEME = UITheme(
    name="plain",
    title="",
    title_flash="\033[7m",
    path_error="",
    tile_border="",
    tile_dir="",
    tile_file="",
    tile_dim="",
    tile_selected="\033[7m",
    status="",
    status_flash="\033[7m",
    loading="",
    modal_border="",
    modal_title="",
    modal_text="",
    modal_key="",
    error_text="",
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
    """Return concrete theme for requested name and color mode.

    The plain theme keeps reverse video for the selected tile and flashes so
    the selection stays visible without colors.
    """
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
