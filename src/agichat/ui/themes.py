"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Deep navy background with blue/cyan accents
AGI_MIDNIGHT = Theme(
    name="agi-midnight",
    primary="#3b82f6",      # Blue - main accent, active navigation
    secondary="#6366f1",    # Indigo - secondary accent
    accent="#22d3ee",       # Cyan - highlights, thinking indicator
    foreground="#e2e8f0",   # Slate 200 - body text
    background="#020617",   # Slate 950 - deepest background
    success="#4ade80",
    warning="#fbbf24",
    error="#f87171",
    surface="#0f172a",      # Slate 900 - main surface
    panel="#1e293b",        # Slate 800 - panels and cards
    dark=True,
    variables={
        "block-cursor-foreground": "#020617",
        "block-cursor-background": "#93c5fd",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#e2e8f0",
        "input-selection-background": "#3b82f6 30%",
        "border": "#334155",
        "border-blurred": "#1e293b",
        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#3b82f6",
        "footer-key-foreground": "#22d3ee",
        "text-muted": "#64748b",
    },
)
