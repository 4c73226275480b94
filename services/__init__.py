"""
services/__init__.py

Package export surface for the services layer.
Exposes the IEX client and payload decoders for import convenience.
"""

from .iex_client import IexClient
from .iex_schemas import CompanyListing, parse_company_list, parse_quote
