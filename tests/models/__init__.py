"""
Tests for checkout models.
"""
