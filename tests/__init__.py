# File: tests/__init__.py
"""
Test suite for the Stocks quote client.
Each test file follows standard pytest discovery naming.
"""
