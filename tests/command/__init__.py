"""
Tests for checkout subcommands.
"""
