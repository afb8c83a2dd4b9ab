"""
Pytest configuration and fixtures for gridsnake tests.

This module sets up pygame mocking so the renderer can be tested without
a display, and provides engines wired to an in-memory progress store and a
seeded random source.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def create_mock_pygame():
    """Create a mock of the parts of pygame the renderer touches."""
    mock_pygame = MagicMock()

    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 900
    mock_surface.get_height.return_value = 980
    mock_pygame.display.set_mode.return_value = mock_surface

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_p = 112
    mock_pygame.K_r = 114

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    mock_pygame.Surface.return_value = mock_surface

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before any gridsnake modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_surface(mock_pygame_module):
    """Provide a mock pygame surface."""
    surface = MagicMock()
    surface.get_width.return_value = 900
    surface.get_height.return_value = 900
    return surface


@pytest.fixture
def memory_store(mock_pygame_module):
    """Provide an empty in-memory progress store."""
    from gridsnake.games.snake.progress import MemoryProgressStore

    return MemoryProgressStore()


@pytest.fixture
def seeded_rng():
    """Provide a deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def make_game(memory_store, seeded_rng):
    """
    Factory for engines using the in-memory store and seeded RNG.

    Bonus spawning is pushed far into the future so tests control
    exactly what is on the field.
    """
    from gridsnake.games.snake.game import SnakeGame

    def _make(quiet: bool = True, **kwargs):
        kwargs.setdefault("store", memory_store)
        kwargs.setdefault("rng", seeded_rng)
        game = SnakeGame(**kwargs)
        if quiet:
            game._bonus_cooldown = 10_000
        return game

    return _make


@pytest.fixture
def progress_path(tmp_path):
    """Path for a temporary progress file (not created)."""
    return tmp_path / "progress.json"
