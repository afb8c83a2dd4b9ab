"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from ...core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
FOOD_COLOR = (220, 50, 50)
WALL_COLOR = (120, 120, 130)
TEXT_COLOR = (220, 220, 220)

# Keyed by BonusType value
BONUS_COLORS = {
    1: (60, 120, 255),   # SpeedUp
    2: (160, 60, 200),   # SlowDown
    3: (255, 200, 0),    # ExtraPoints
}


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame, implementing RendererInterface.

    The field grows on level-up, so the grid size is read from each state
    and the cell size is refit to the render area when it changes.
    """

    def __init__(
        self,
        cell_size: int = 25,
        grid_width: int = 20,
        grid_height: int = 20
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
        """
        self._cell_size = cell_size
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._offset_x = 0
        self._offset_y = 0
        self._area: Optional[Tuple[int, int]] = None
        self._render_width = grid_width * cell_size
        self._render_height = grid_height * cell_size

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._render_width, self._render_height)

    def get_cell_size(self) -> int:
        """Get the current cell size."""
        return self._cell_size

    def set_cell_size(self, cell_size: int) -> None:
        """Set the cell size."""
        self._cell_size = cell_size
        self._render_width = self._grid_width * cell_size
        self._render_height = self._grid_height * cell_size

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        self._area = (width, height)
        self._fit_cells()

    def set_grid_size(self, grid_width: int, grid_height: int) -> None:
        """Resynchronize with a resized field (after a level-up)."""
        self._grid_width = grid_width
        self._grid_height = grid_height
        if self._area is not None:
            self._fit_cells()
        else:
            self.set_cell_size(self._cell_size)

    def _fit_cells(self):
        width, height = self._area
        cell_w = width // self._grid_width
        cell_h = height // self._grid_height
        self._cell_size = max(1, min(cell_w, cell_h))
        self._render_width = self._grid_width * self._cell_size
        self._render_height = self._grid_height * self._cell_size

    def _cell_rect(self, cell: Dict[str, int], inset: int) -> "pygame.Rect":
        return pygame.Rect(
            self._offset_x + cell["x"] * self._cell_size + inset,
            self._offset_y + cell["y"] * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state
            surface: Pygame surface to draw on
        """
        width = game_state.get("width", self._grid_width)
        height = game_state.get("height", self._grid_height)
        if (width, height) != (self._grid_width, self._grid_height):
            self.set_grid_size(width, height)

        game_width = width * self._cell_size
        game_height = height * self._cell_size

        # Draw background
        game_rect = pygame.Rect(
            self._offset_x, self._offset_y,
            game_width, game_height
        )
        pygame.draw.rect(surface, DARK_GRAY, game_rect)

        # Draw grid lines (subtle)
        for x in range(width + 1):
            start = (self._offset_x + x * self._cell_size, self._offset_y)
            end = (self._offset_x + x * self._cell_size, self._offset_y + game_height)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for y in range(height + 1):
            start = (self._offset_x, self._offset_y + y * self._cell_size)
            end = (self._offset_x + game_width, self._offset_y + y * self._cell_size)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for wall in game_state.get("walls", []):
            pygame.draw.rect(surface, WALL_COLOR, self._cell_rect(wall, 0))

        for food in game_state["food"]:
            pygame.draw.rect(surface, FOOD_COLOR, self._cell_rect(food, 2), border_radius=4)

        bonus = game_state.get("bonus")
        if bonus:
            color = BONUS_COLORS.get(bonus["type"], WHITE)
            center = (
                self._offset_x + bonus["x"] * self._cell_size + self._cell_size // 2,
                self._offset_y + bonus["y"] * self._cell_size + self._cell_size // 2,
            )
            pygame.draw.circle(surface, color, center, max(2, self._cell_size // 2 - 2))

        # Draw snake
        snake = game_state["snake"]
        for i, segment in enumerate(snake):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(surface, color, self._cell_rect(segment, 1), border_radius=border_radius)

            # Draw eyes on head
            if i == 0:
                self._draw_eyes(surface, segment, game_state.get("direction", 0))

    def _draw_eyes(self, surface: pygame.Surface, head: Dict[str, int], direction: int):
        """Draw eyes on the snake's head."""
        cx = self._offset_x + head["x"] * self._cell_size + self._cell_size // 2
        cy = self._offset_y + head["y"] * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == 0:  # RIGHT
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == 1:  # DOWN
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == 2:  # LEFT
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)
