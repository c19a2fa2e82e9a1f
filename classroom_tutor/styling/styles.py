"""Centralized stylesheets for the student window."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QSpinBox, QComboBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
        """

    @staticmethod
    def get_option_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)}; "
            f"color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)}; padding: 12px; font-size: 12pt; }}"
        )

    @staticmethod
    def get_feedback_style(correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.CORRECT if correct else ColorPalette.INCORRECT
        return f"color: {color.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        base = "padding: 2px 6px; border-radius: 4px;"
        if not warning:
            return base
        return base + f" color: #fff; background-color: {ColorPalette.TIMER_WARNING.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
