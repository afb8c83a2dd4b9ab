"""
Renderer contract for gridsnake views.

A renderer draws the dict returned by get_state() and never touches the
engine. The field grows on every level-up, so a renderer also has to refit
itself to a new grid while keeping to the area it was given.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Tuple

if TYPE_CHECKING:
    import pygame


class RendererInterface(ABC):
    """View over a game state, fitted to a fixed pixel area."""

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: "pygame.Surface") -> None:
        """
        Draw one frame.

        Args:
            game_state: Snapshot from get_state()
            surface: Pygame surface to draw on
        """

    @abstractmethod
    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Place the view at (x, y) and fit the grid inside width x height."""

    @abstractmethod
    def set_grid_size(self, grid_width: int, grid_height: int) -> None:
        """Refit to a field of grid_width x grid_height cells."""

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """Pixel size of the whole grid at the current cell size."""
