"""
Design tokens and QSS generator for the update status screen (light/dark).
"""

from __future__ import annotations

from typing import Literal

SPACING = {
    "xs": "4px",
    "sm": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
}

TYPOGRAPHY = {
    "font_family": "Segoe UI, -apple-system, BlinkMacSystemFont, sans-serif",
    "font_size_sm": "13px",
    "font_size_base": "15px",
    "font_size_lg": "17px",
    "font_size_xl": "22px",
    "font_size_display": "40px",
    "font_weight_normal": "400",
    "font_weight_medium": "500",
    "font_weight_semibold": "600",
    "font_weight_bold": "700",
}

COLOR_ACCENTS = {
    "blue": "#007AFF",
    "green": "#34C759",
    "orange": "#FF9500",
    "gray": "#8E8E93",
}

LIGHT_COLORS = {
    "background": "#F5F5F7",
    "surface": "#FFFFFF",
    "surface_secondary": "#F2F2F7",
    "text_primary": "#000000",
    "text_secondary": "#6E6E73",
    "border": "#E5E5EA",
}

DARK_COLORS = {
    "background": "#000000",
    "surface": "#1C1C1E",
    "surface_secondary": "#2C2C2E",
    "text_primary": "#FFFFFF",
    "text_secondary": "#98989D",
    "border": "#38383A",
}

ThemeMode = Literal["light", "dark"]


class Theme:
    """Theme manager providing QSS stylesheets for light and dark modes."""

    def __init__(self, mode: ThemeMode = "light"):
        self.mode = mode
        self.colors = LIGHT_COLORS if mode == "light" else DARK_COLORS

    def get_stylesheet(self) -> str:
        colors = self.colors
        font_family = TYPOGRAPHY["font_family"]
        accent = COLOR_ACCENTS["blue"]

        return f"""
        QMainWindow {{
            background-color: {colors["background"]};
            color: {colors["text_primary"]};
        }}

        QLabel#TitleLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_xl"]};
            font-weight: {TYPOGRAPHY["font_weight_bold"]};
            color: {colors["text_primary"]};
        }}

        /* Status: high-level state */
        QLabel#StatusLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_lg"]};
            font-weight: {TYPOGRAPHY["font_weight_semibold"]};
            color: {colors["text_primary"]};
        }}

        /* Step: current action */
        QLabel#StepLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_base"]};
            font-weight: {TYPOGRAPHY["font_weight_normal"]};
            color: {colors["text_secondary"]};
        }}

        QLabel#ProgressLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_display"]};
            font-weight: {TYPOGRAPHY["font_weight_bold"]};
            color: {accent};
        }}

        QLabel#SectionLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_lg"]};
            font-weight: {TYPOGRAPHY["font_weight_semibold"]};
            color: {colors["text_primary"]};
        }}

        QLabel#BodyLabel, QLabel#HintLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_sm"]};
            color: {colors["text_secondary"]};
        }}

        QFrame#Card {{
            background-color: {colors["surface"]};
            border-radius: 16px;
            border: 1px solid {colors["border"]};
        }}

        QProgressBar#LoadingBar {{
            background-color: {colors["surface_secondary"]};
            border: none;
            border-radius: 6px;
            min-height: 12px;
            max-height: 12px;
        }}

        QProgressBar#LoadingBar::chunk {{
            background-color: {accent};
            border-radius: 6px;
        }}

        QPushButton#SecondaryButton {{
            background-color: {colors["surface_secondary"]};
            color: {accent};
            border: 1px solid {colors["border"]};
            border-radius: 20px;
            padding: {SPACING["sm"]} {SPACING["xl"]};
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_base"]};
            font-weight: {TYPOGRAPHY["font_weight_medium"]};
            min-height: 32px;
        }}

        QPushButton#SecondaryButton:hover {{
            background-color: {self._rgba(accent, 0.1)};
        }}

        QCheckBox {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_base"]};
            color: {colors["text_primary"]};
            spacing: {SPACING["sm"]};
        }}

        QSpinBox {{
            background-color: {colors["surface"]};
            color: {colors["text_primary"]};
            border: 1px solid {colors["border"]};
            border-radius: 8px;
            padding: {SPACING["xs"]} {SPACING["sm"]};
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_base"]};
            min-height: 32px;
        }}

        QSpinBox:focus {{
            border-color: {accent};
        }}
        """

    def _rgba(self, hex_color: str, alpha: float) -> str:
        """Convert hex color to rgba string."""
        hex_color = hex_color.lstrip("#")
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
        return f"rgba({r}, {g}, {b}, {alpha})"

    def set_mode(self, mode: ThemeMode) -> None:
        self.mode = mode
        self.colors = LIGHT_COLORS if mode == "light" else DARK_COLORS
