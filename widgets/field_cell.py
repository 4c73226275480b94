# File: widgets/field_cell.py
"""
Two-line display cell used by the quote panel: title (top), value (bottom).
Supports value color and bold/normal weight.
"""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from config.theme import THEME, ColorTheme


class FieldCell(QtWidgets.QFrame):
    """Two-line field cell: title (top), value (bottom)."""

    def __init__(self, title: str, initial_value: Optional[str] = None, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self._title = title
        self._initial_value = initial_value if initial_value is not None else str(THEME["placeholder"])
        self._value_color = str(THEME["text_primary"])
        self._bold = False

        self.setObjectName("FieldCell")
        self._build()

    def _build(self):
        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(8, 4, 8, 4)
        lay.setSpacing(2)

        self.lbl_title = QtWidgets.QLabel(self._title, self)
        self.lbl_title.setAlignment(QtCore.Qt.AlignmentFlag.AlignLeft)
        self.lbl_title.setStyleSheet(f"color: {THEME['text_dim']};")
        self.lbl_title.setFont(ColorTheme.qfont(int(THEME["title_font_weight"]), int(THEME["title_font_size"])))

        self.lbl_val = QtWidgets.QLabel(self._initial_value, self)
        self.lbl_val.setAlignment(QtCore.Qt.AlignmentFlag.AlignLeft)
        self.lbl_val.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)
        self.lbl_val.setFont(ColorTheme.qfont(int(THEME["ui_font_weight"]), int(THEME["value_font_size"])))
        self.set_value_color(self._value_color)

        lay.addWidget(self.lbl_title)
        lay.addWidget(self.lbl_val, 1)

    # Value/text/color API
    def set_value_text(self, text: str):
        """Update the displayed value text."""
        self.lbl_val.setText(text)

    def value_text(self) -> str:
        return self.lbl_val.text()

    def set_value_color(self, color_css: str):
        """Update the value text color."""
        self._value_color = color_css
        self.lbl_val.setStyleSheet(f"color: {color_css};")

    def value_color(self) -> str:
        return self._value_color

    def set_value_bold(self, bold: bool):
        font = self.lbl_val.font()
        font.setBold(bold)
        self.lbl_val.setFont(font)
        self._bold = bold

    def is_value_bold(self) -> bool:
        return self._bold


__all__ = ["FieldCell"]
