"""
Tests for read-only inventories.
"""
