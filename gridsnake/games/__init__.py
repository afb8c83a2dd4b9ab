"""
Games module for gridsnake.
"""

from . import snake

__all__ = [
    'snake',
]
