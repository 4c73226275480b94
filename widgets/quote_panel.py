# File: widgets/quote_panel.py
"""
QuotePanel - passive display for one company quote.

Fields: logo, company name, symbol, price, price change, busy indicator.
All methods must run on the Qt main thread.
"""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from config.theme import THEME
from domain.quote import PriceChangeRole, Quote, format_decimal
from utils.logger import get_logger
from widgets.field_cell import FieldCell

log = get_logger(__name__)


ROLE_COLOR_KEYS = {
    PriceChangeRole.ALERT: "alert",
    PriceChangeRole.NEUTRAL: "neutral",
    PriceChangeRole.POSITIVE: "positive",
}


def role_color(role: PriceChangeRole) -> str:
    return str(THEME[ROLE_COLOR_KEYS[role]])


class QuotePanel(QtWidgets.QWidget):
    """Name / symbol / price / change fields with a logo and busy indicator."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self._busy = False
        self._change_role = PriceChangeRole.NEUTRAL
        self._build()

    def _build(self) -> None:
        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(12, 12, 12, 12)
        lay.setSpacing(6)

        logo_size = int(THEME["logo_size"])
        self.logo_label = QtWidgets.QLabel(self)
        self.logo_label.setFixedSize(logo_size, logo_size)
        self.logo_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)

        self.name_cell = FieldCell("Company", parent=self)
        self.symbol_cell = FieldCell("Symbol", parent=self)
        self.price_cell = FieldCell("Price", parent=self)
        self.change_cell = FieldCell("Change", parent=self)

        # Indeterminate progress bar acts as the activity indicator
        self.busy_indicator = QtWidgets.QProgressBar(self)
        self.busy_indicator.setRange(0, 0)
        self.busy_indicator.setTextVisible(False)
        self.busy_indicator.setMaximumHeight(4)
        self.busy_indicator.setVisible(False)

        lay.addWidget(self.logo_label, 0, QtCore.Qt.AlignmentFlag.AlignHCenter)
        for cell in (self.name_cell, self.symbol_cell, self.price_cell, self.change_cell):
            lay.addWidget(cell)
        lay.addWidget(self.busy_indicator)
        lay.addStretch(1)

    # ---- Presenter API --------------------------------------------------
    def show_loading(self) -> None:
        """Reset every field to the placeholder and start the busy indicator."""
        placeholder = str(THEME["placeholder"])
        self.set_busy(True)
        self.name_cell.set_value_text(placeholder)
        self.name_cell.set_value_bold(False)
        self.symbol_cell.set_value_text(placeholder)
        self.price_cell.set_value_text(placeholder)
        self.change_cell.set_value_text(placeholder)
        self._apply_change_role(PriceChangeRole.NEUTRAL)
        self.logo_label.clear()

    def show_quote(self, quote: Quote) -> None:
        self.set_busy(False)
        self.name_cell.set_value_text(quote.company_name)
        self.name_cell.set_value_bold(True)
        self.symbol_cell.set_value_text(quote.symbol)
        self.price_cell.set_value_text(format_decimal(quote.price))
        self.change_cell.set_value_text(format_decimal(quote.price_change))
        self._apply_change_role(quote.change_role)

    def show_logo(self, data: bytes) -> None:
        pixmap = QtGui.QPixmap()
        if not pixmap.loadFromData(data):
            # Corrupt image bytes display as a blank logo
            log.debug("[QuotePanel] Logo bytes could not be decoded")
            self.logo_label.clear()
            return
        self.logo_label.setPixmap(
            pixmap.scaled(
                self.logo_label.size(),
                QtCore.Qt.AspectRatioMode.KeepAspectRatio,
                QtCore.Qt.TransformationMode.SmoothTransformation,
            )
        )

    def set_busy(self, active: bool) -> None:
        self._busy = active
        self.busy_indicator.setVisible(active)

    # ---- State accessors ------------------------------------------------
    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def change_role(self) -> PriceChangeRole:
        return self._change_role

    def has_logo(self) -> bool:
        pixmap = self.logo_label.pixmap()
        return pixmap is not None and not pixmap.isNull()

    def _apply_change_role(self, role: PriceChangeRole) -> None:
        self._change_role = role
        self.change_cell.set_value_color(role_color(role))


__all__ = ["QuotePanel", "role_color"]
