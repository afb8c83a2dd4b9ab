"""
Abstract game interface for gridsnake.

Games are driven by an external fixed-interval ticker: the front-end calls
update() once per tick and relays input between ticks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, List


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    modes: List[str] = field(default_factory=list)


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    Games handle the core logic, rules, and state management.
    Rendering and input mapping live outside the game.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def update(self) -> None:
        """Advance the game by one tick."""
        pass

    @abstractmethod
    def toggle_pause(self) -> None:
        """Pause or resume the game."""
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @property
    @abstractmethod
    def tick_interval(self) -> int:
        """
        Milliseconds the front-end should wait between update() calls.

        Returns:
            Current tick interval
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
