"""
Tests for checkout receipt calculation module.
"""
