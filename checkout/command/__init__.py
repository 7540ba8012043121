"""
Subcommand collection package.
"""

from .base import Base
from .check import Check

__all__ = ["Base", "Check"]
