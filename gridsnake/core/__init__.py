"""
Core abstractions for gridsnake.

Provides the game interface and per-instance event channels. The renderer
contract lives in core.renderer_interface and is imported by view code only,
so the engine loads without a display stack.
"""

from .game_interface import GameInterface, GameMetadata
from .events import EventChannel

__all__ = [
    'GameInterface',
    'GameMetadata',
    'EventChannel',
]
