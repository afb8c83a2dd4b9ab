"""
Snake game module for gridsnake.
"""

from .game import SnakeGame, Direction, Point, GameMode, BonusType, Bonus
from .progress import ProgressStore, MemoryProgressStore, ProgressRecord, LevelData
from .config import SnakeConfig

__all__ = [
    'SnakeGame',
    'SnakeConfig',
    'Direction',
    'Point',
    'GameMode',
    'BonusType',
    'Bonus',
    'ProgressStore',
    'MemoryProgressStore',
    'ProgressRecord',
    'LevelData',
]
