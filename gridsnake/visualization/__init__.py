"""
Visualization module for gridsnake.

Terminal views only; the pygame renderer lives with the game.
"""

from .progress_display import build_progress_panel, build_checkpoint_table, show_progress

__all__ = [
    'build_progress_panel',
    'build_checkpoint_table',
    'show_progress',
]
