# widgets/__init__.py
"""
Expose the custom widgets used by the Stocks window.
"""
from .company_picker import CompanyPicker
from .field_cell import FieldCell
from .quote_panel import QuotePanel
