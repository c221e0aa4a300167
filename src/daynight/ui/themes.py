"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Day/night mode configuration

To add a new theme, define it here and add it to THEMES.
"""

from textual.theme import Theme

# Daylight: white chat surface, blue title bar, yellow contact list
DAY_THEME = Theme(
    name="daynight-day",
    primary="#1e6fdc",      # Blue - title bar, sent bubbles
    secondary="#8e8e93",    # Grey - received bubbles, timestamps
    accent="#f5c400",       # Yellow - sun, contact list backdrop
    foreground="#1c1c1e",   # Near-black text
    background="#ffffff",   # White chat background
    success="#34c759",
    warning="#ff9500",
    error="#ff3b30",
    surface="#f2f2f7",
    panel="#e5e5ea",        # Light grey - input bar
    dark=False,
    variables={
        "text-muted": "#8e8e93",
        "border": "#c7c7cc",
        "border-blurred": "#d1d1d6",
        "input-cursor-background": "#1c1c1e",
        "input-cursor-foreground": "#ffffff",
        "input-selection-background": "#1e6fdc 30%",
        "footer-background": "#e5e5ea",
        "footer-key-foreground": "#1e6fdc",
    },
)

# Night: same layout, dark surfaces, dimmed sun
NIGHT_THEME = Theme(
    name="daynight-night",
    primary="#89b4fa",
    secondary="#6c7086",
    accent="#f9e2af",
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",
    warning="#fab387",
    error="#f38ba8",
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "text-muted": "#6c7086",
        "border": "#45475a",
        "border-blurred": "#313244",
        "input-cursor-background": "#cdd6f4",
        "input-cursor-foreground": "#11111b",
        "input-selection-background": "#89b4fa 30%",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",
    },
)

THEMES = {
    "day": DAY_THEME,
    "night": NIGHT_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by its short name ("day" or "night").

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown theme: {name}. Supported themes: {', '.join(THEMES)}"
        ) from None
