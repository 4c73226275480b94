# File: widgets/company_picker.py
"""
CompanyPicker - drop-down of tracked company names.

Titles come from a SelectionSource (the quote controller); the picker itself
holds no company data. `rowSelected` fires only on user activation, never
on reload.
"""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from config.theme import THEME, ColorTheme
from core.interfaces import SelectionSource


class CompanyPicker(QtWidgets.QComboBox):
    """Single-column company selector."""

    rowSelected = QtCore.pyqtSignal(int)  # row index

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.setObjectName("CompanyPicker")
        self.setFont(ColorTheme.qfont(int(THEME["ui_font_weight"]), int(THEME["ui_font_size"])))
        self.setSizeAdjustPolicy(QtWidgets.QComboBox.SizeAdjustPolicy.AdjustToContents)
        self.activated.connect(self.rowSelected.emit)

    def reload(self, source: SelectionSource) -> None:
        """Repopulate titles from source and select the first row."""
        self.blockSignals(True)
        try:
            self.clear()
            self.addItems([source.title(row) for row in range(source.count())])
            if self.count():
                self.setCurrentIndex(0)
        finally:
            self.blockSignals(False)

    def selected_row(self) -> int:
        return self.currentIndex()


__all__ = ["CompanyPicker"]
