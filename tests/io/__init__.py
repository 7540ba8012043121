"""
Tests for file handling.
"""
