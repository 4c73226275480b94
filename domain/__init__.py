"""
domain/__init__.py

Domain models for the Stocks quote client.

This package contains plain data models that are independent
of UI, transport, or external services.
"""
