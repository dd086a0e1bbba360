"""Light and dark color palettes and their Textual theme builders."""

from __future__ import annotations

from textual.theme import Theme as TextualTheme

LIGHT_THEME_NAME = "deck-light"
DARK_THEME_NAME = "deck-dark"

LIGHT_THEME: dict[str, str] = {
    "background": "#f5f5f0",
    "panel": "#ffffff",
    "panel_alt": "#e8e8e3",
    "border": "#c8c8c0",
    "text": "#272822",
    "muted": "#75715e",
    "accent": "#1f6fb2",
    "accent_alt": "#b3590a",
    "green": "#4e8a07",
    "orange": "#c7650d",
    "pink": "#c2185b",
    "highlight": "#e0e0da",
}

# Monokai-inspired
DARK_THEME: dict[str, str] = {
    "background": "#272822",
    "panel": "#1e1e1e",
    "panel_alt": "#3e3d32",
    "border": "#75715e",
    "text": "#f8f8f2",
    "muted": "#75715e",
    "accent": "#66d9ef",
    "accent_alt": "#e6db74",
    "green": "#a6e22e",
    "orange": "#fd971f",
    "pink": "#f92672",
    "highlight": "#49483e",
}

THEMES: dict[str, dict[str, str]] = {
    LIGHT_THEME_NAME: LIGHT_THEME,
    DARK_THEME_NAME: DARK_THEME,
}


def theme_name_for(dark_mode: bool) -> str:
    return DARK_THEME_NAME if dark_mode else LIGHT_THEME_NAME


def _build_textual_theme(name: str, colors: dict[str, str], dark: bool) -> TextualTheme:
    """Convert a palette dict to a Textual Theme with $th-* CSS variables.

    Also sets primary/background/foreground for Textual's built-in widget styling.
    """
    variables = {
        "th-background": colors["background"],
        "th-panel": colors["panel"],
        "th-panel-alt": colors["panel_alt"],
        "th-border": colors["border"],
        "th-highlight": colors["highlight"],
        "th-accent": colors["accent"],
        "th-accent-alt": colors["accent_alt"],
        "th-muted": colors["muted"],
        "th-text": colors["text"],
        "th-green": colors["green"],
        "th-orange": colors["orange"],
    }
    return TextualTheme(
        name=name,
        primary=colors["accent"],
        secondary=colors["accent_alt"],
        accent=colors["green"],
        foreground=colors["text"],
        background=colors["background"],
        surface=colors["panel"],
        panel=colors["panel_alt"],
        warning=colors["orange"],
        error=colors["pink"],
        success=colors["green"],
        dark=dark,
        variables=variables,
    )


TEXTUAL_THEMES: dict[str, TextualTheme] = {
    LIGHT_THEME_NAME: _build_textual_theme(LIGHT_THEME_NAME, LIGHT_THEME, dark=False),
    DARK_THEME_NAME: _build_textual_theme(DARK_THEME_NAME, DARK_THEME, dark=True),
}


def palette_for(dark_mode: bool) -> dict[str, str]:
    """Color dict used for Rich markup in widgets."""
    return THEMES[theme_name_for(dark_mode)]


__all__ = [
    "DARK_THEME",
    "DARK_THEME_NAME",
    "LIGHT_THEME",
    "LIGHT_THEME_NAME",
    "TEXTUAL_THEMES",
    "THEMES",
    "palette_for",
    "theme_name_for",
]
