"""Color palette for Classroom Tutor supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#000000", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#666666", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BORDER_PRIMARY = ThemeColors(light="#CCCCCC", dark="#444444")

    BUTTON_PRIMARY_BG = ThemeColors(light="#1F9AA5", dark="#16808A")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F0F0F0", dark="#2D2D2D")
    BUTTON_HOVER_BG = ThemeColors(light="#E0E0E0", dark="#3A3A3A")

    # Answer feedback
    CORRECT = ThemeColors(light="#15803D", dark="#4ADE80")
    INCORRECT = ThemeColors(light="#B91C1C", dark="#F87171")
    TIMER_WARNING = ThemeColors(light="#EF4444", dark="#B91C1C")
