# -------------------- config/theme.py (start)
# File: config/theme.py
# Stocks theme: typography, placeholder text and price-change color roles

from __future__ import annotations

from PyQt6 import QtGui


# Typography Layer
_BASE_TYPOGRAPHY: dict[str, int | str] = {
    "font_family": "Inter, Segoe UI, Arial, Helvetica, sans-serif",
    "ui_font_size": 14,
    "ui_font_weight": 400,
    "value_font_size": 18,
    "title_font_size": 12,
    "title_font_weight": 500,
}

# Color Layer
_BASE_COLORS: dict[str, str] = {
    "bg_primary": "#FFFFFF",
    "text_primary": "#000000",
    "text_dim": "#5B6C7A",
    # Price change roles
    "alert": "#FF3B30",  # Negative change
    "neutral": "#000000",  # Unchanged
    "positive": "#34C759",  # Positive change
}

# Layout Layer
_BASE_LAYOUT: dict[str, int | str] = {
    "placeholder": "-",
    "logo_size": 96,
    "window_min_width": 360,
    "window_min_height": 520,
}

THEME: dict[str, int | str] = {**_BASE_TYPOGRAPHY, **_BASE_COLORS, **_BASE_LAYOUT}


class ColorTheme:
    """Font helpers bound to THEME."""

    @staticmethod
    def qfont(weight: int, size_px: int) -> QtGui.QFont:
        """Get QFont for body/UI text."""
        f = QtGui.QFont()
        font_families = [fam.strip() for fam in str(THEME.get("font_family")).split(",")]
        f.setFamilies(font_families)
        f.setPixelSize(int(size_px))
        f.setWeight(QtGui.QFont.Weight(int(weight)))
        return f


__all__ = ["THEME", "ColorTheme"]
# -------------------- config/theme.py (end)
