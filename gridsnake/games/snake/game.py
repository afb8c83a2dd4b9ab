"""
Snake Game Core - tick-driven engine with levels, walls, bonuses and progress.

Pure game logic without rendering. A front-end calls update() on a fixed
interval (see tick_interval) and relays input through change_direction() and
toggle_pause() between ticks.
"""
from dataclasses import dataclass
from typing import List, Set, Optional, Dict, Any, Tuple, Union
from enum import Enum, IntEnum
import random

import numpy as np

from ...core.events import EventChannel
from ...core.game_interface import GameInterface, GameMetadata
from .config import SnakeConfig
from .progress import LevelData, ProgressRecord, ProgressStore


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]


DIRECTION_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}

OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameMode(Enum):
    """Play modes."""
    CLASSIC = "classic"
    SURVIVAL = "survival"
    HARDCORE = "hardcore"


class BonusType(IntEnum):
    """Timed pickups."""
    SPEED_UP = 1
    SLOW_DOWN = 2
    EXTRA_POINTS = 3


# Cell codes used by to_grid()
CELL_EMPTY = 0
CELL_BODY = 1
CELL_HEAD = 2
CELL_FOOD = 3
CELL_WALL = 4
CELL_BONUS = 5


@dataclass
class Point:
    """A point on the game grid."""
    x: int
    y: int

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def moved(self, direction: Direction) -> "Point":
        """Return the neighbouring point in the given direction."""
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


@dataclass
class Bonus:
    """The active bonus pickup."""
    bonus_type: BonusType
    position: Point
    lifetime: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": int(self.bonus_type),
            "x": self.position.x,
            "y": self.position.y,
            "lifetime": self.lifetime,
        }


class SnakeGame(GameInterface):
    """
    Snake engine for Classic, Survival and Hardcore play.

    The field is a square grid that grows with level. The snake moves one
    cell per tick and dies on leaving the field, hitting a wall or biting
    itself. Classic mode levels up every `points_per_level * level` points,
    saving a checkpoint so a later session can resume that level.

    Notifications are published on per-instance channels:
        on_update           after every non-terminal tick and pause toggle
        on_level_changed    after a level-up (field may have grown)
        on_game_over        once, when the snake collides
        on_bonus_activated  with the BonusType, when a bonus spawns
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about the Snake game."""
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat food, grow longer, and unlock bigger levels",
            version="1.0.0",
            modes=[mode.value for mode in GameMode],
        )

    def __init__(
        self,
        mode: Union[GameMode, str] = GameMode.CLASSIC,
        start_level: int = 1,
        with_walls: bool = False,
        is_hardcore: bool = False,
        store: Optional[ProgressStore] = None,
        config: Optional[SnakeConfig] = None,
        rng: Optional[random.Random] = None,
        verbose: bool = False,
    ):
        """
        Initialize the game.

        Args:
            mode: Play mode
            start_level: Requested Classic level (clamped to the unlocked max)
            with_walls: Generate random walls each level
            is_hardcore: Hardcore rules (forces walls, level 1, fresh score)
            store: Progress store (defaults to progress.json in the working dir)
            config: Rule constants
            rng: Random source; pass a seeded one for reproducible layouts
            verbose: Print game events to the console
        """
        self.config = config or SnakeConfig()
        self.store = store if store is not None else ProgressStore()
        self.rng = rng or random.Random()
        self.verbose = verbose

        self.on_update = EventChannel("update")
        self.on_level_changed = EventChannel("level_changed")
        self.on_game_over = EventChannel("game_over")
        self.on_bonus_activated = EventChannel("bonus_activated")

        # Game state (initialized in reset)
        self.mode: GameMode = GameMode.CLASSIC
        self.is_hardcore: bool = False
        self.with_walls: bool = False
        self.requested_level: int = 1
        self.progress: ProgressRecord = ProgressRecord()
        self.level: int = 1
        self.score: int = 0
        self.width: int = 0
        self.height: int = 0
        self.snake: List[Point] = []
        self.food: List[Point] = []
        self.walls: Set[Point] = set()
        self.bonus: Optional[Bonus] = None
        self.direction: Direction = Direction.RIGHT
        self.next_direction: Direction = Direction.RIGHT
        self.paused: bool = False
        self.game_over: bool = False
        self.frame_count: int = 0

        self.reset(mode, start_level, with_walls, is_hardcore)

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def reset(
        self,
        mode: Union[GameMode, str, None] = None,
        start_level: Optional[int] = None,
        with_walls: Optional[bool] = None,
        is_hardcore: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Discard the session and start a new one.

        Arguments left as None keep the values of the previous session.
        Subscribers stay attached.

        Returns:
            Dictionary containing the initial game state
        """
        mode = GameMode(mode) if mode is not None else self.mode
        start_level = start_level if start_level is not None else self.requested_level
        with_walls = with_walls if with_walls is not None else self.with_walls
        is_hardcore = is_hardcore if is_hardcore is not None else self.is_hardcore

        if start_level < 1:
            raise ValueError(f"start_level must be >= 1, got {start_level}")

        self.mode = mode
        self.is_hardcore = is_hardcore or mode == GameMode.HARDCORE
        self.with_walls = with_walls or self.is_hardcore
        self.requested_level = start_level
        self.progress = self.store.load()

        cfg = self.config
        if self.is_hardcore or mode == GameMode.SURVIVAL:
            self.level = 1
            self._initial_snake_length = cfg.initial_snake_length
            self.score = 0
        else:
            self.level = min(start_level, self.progress.max_unlocked_level)
            checkpoint = self.progress.level_data.get(self.level)
            if checkpoint is not None:
                self._initial_snake_length = checkpoint.snake_length
                self.score = checkpoint.score
            else:
                self._initial_snake_length = cfg.initial_snake_length + int(self.level * 0.5)
                self.score = 0

        self.width = self.height = self._field_size_for(self.level)

        self.snake = []
        self.food = []
        self.walls = set()
        self.bonus = None
        self._bonus_cooldown = self._roll(cfg.bonus_cooldown_range)
        self._tick_interval = (
            cfg.hardcore_tick_interval if self.is_hardcore else cfg.base_tick_interval
        )
        self._survival_ticks = 0
        self.paused = False
        self.game_over = False
        self.frame_count = 0

        self._init_snake()
        self._place_food()
        if self.with_walls:
            self._generate_walls()

        self._log(
            f"New {self.mode.value} session: level {self.level}, "
            f"field {self.width}x{self.height}, length {len(self.snake)}"
        )
        return self.get_state()

    def _field_size_for(self, level: int) -> int:
        base = self.config.base_field_size
        if self.is_hardcore:
            return base + ((level - 1) // 2) * 2
        if self.mode == GameMode.SURVIVAL:
            return base + (level - 1)
        return base + (level - 1) * 2

    def _grow_field(self) -> None:
        """Grow the field for the level just entered."""
        if self.is_hardcore:
            # +2 every two levels
            if self.level % 2 == 1:
                self.width += 2
                self.height += 2
        elif self.mode == GameMode.SURVIVAL:
            self.width += 1
            self.height += 1
        else:
            self.width += 2
            self.height += 2

    def _init_snake(self):
        """Lay the snake out horizontally from the centre, head rightmost."""
        x, y = self.width // 2, self.height // 2
        step = -1
        self.snake = []
        for _ in range(self._initial_snake_length):
            self.snake.append(Point(x, y))
            # Fold onto the next row when the body would leave the field
            if 0 <= x + step < self.width:
                x += step
            else:
                y += 1
                step = -step
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT

    def _roll(self, bounds: Tuple[int, int]) -> int:
        low, high = bounds
        return self.rng.randrange(low, high)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def _occupied_cells(self) -> Set[Point]:
        occupied = set(self.snake)
        occupied.update(self.walls)
        occupied.update(self.food)
        if self.bonus is not None:
            occupied.add(self.bonus.position)
        return occupied

    def _empty_cells(self) -> List[Point]:
        occupied = self._occupied_cells()
        return [
            Point(x, y)
            for x in range(self.width)
            for y in range(self.height)
            if Point(x, y) not in occupied
        ]

    @property
    def food_target(self) -> int:
        """Number of food items kept on the field at the current level."""
        return min(1 + self.level // 3, self.config.max_food)

    def _place_food(self):
        """Top food back up to the level's target; stop early on a full field."""
        while len(self.food) < self.food_target:
            empty_cells = self._empty_cells()
            if not empty_cells:
                break
            self.food.append(self.rng.choice(empty_cells))

    def _wall_target(self) -> int:
        cfg = self.config
        if self.is_hardcore:
            return cfg.hardcore_walls
        count = cfg.min_walls + int((cfg.max_walls - cfg.min_walls) * (self.level - 1) / 10.0)
        return min(count, cfg.max_walls)

    def _generate_walls(self):
        """
        Scatter walls over the field interior.

        Each wall gets a bounded number of draws; a draw is rejected when it
        lands in the safe zone around the head or on an occupied cell. Walls
        that never find a free cell are skipped.
        """
        self.walls = set()
        if self.width < 3 or self.height < 3:
            return

        cfg = self.config
        safe = cfg.hardcore_safe_zone if self.is_hardcore else cfg.safe_zone
        head = self.snake[0]
        start_x, end_x = max(0, head.x - safe), min(self.width - 1, head.x + safe)
        start_y, end_y = max(0, head.y - safe), min(self.height - 1, head.y + safe)

        occupied = self._occupied_cells()
        for _ in range(self._wall_target()):
            for _attempt in range(cfg.wall_attempts):
                wall = Point(
                    self.rng.randrange(1, self.width - 1),
                    self.rng.randrange(1, self.height - 1),
                )
                in_safe_zone = start_x <= wall.x <= end_x and start_y <= wall.y <= end_y
                if in_safe_zone or wall in occupied:
                    continue
                self.walls.add(wall)
                occupied.add(wall)
                break

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def change_direction(self, direction: Direction) -> bool:
        """
        Buffer a direction for the next tick.

        Reversals of the current direction are ignored. Later calls before
        the next tick overwrite earlier ones.

        Returns:
            True if the direction was accepted
        """
        direction = Direction(direction)
        if direction == self.direction.opposite:
            return False
        self.next_direction = direction
        return True

    def toggle_pause(self) -> None:
        """Pause or resume; direction changes are still buffered while paused."""
        self.paused = not self.paused
        self.on_update.publish()

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    @property
    def tick_interval(self) -> int:
        """Milliseconds between ticks, after speed bonuses and Survival ramp."""
        return self._tick_interval

    @property
    def points_to_next_level(self) -> int:
        """Classic score threshold for the next level-up."""
        return self.level * self.config.points_per_level

    @property
    def head(self) -> Point:
        return self.snake[0]

    def update(self) -> None:
        """Advance the game by one tick. No-op while paused or after game over."""
        if self.paused or self.game_over:
            return

        self.frame_count += 1
        self._update_bonus()

        if self.mode == GameMode.SURVIVAL:
            self._survival_speed_ramp()

        self.direction = self.next_direction
        self._move_snake()

        if self._is_collision():
            self._handle_game_over()
            return

        self.on_update.publish()

    def _update_bonus(self):
        if self.bonus is not None:
            self.bonus.lifetime -= 1
            if self.bonus.lifetime <= 0:
                self.bonus = None
                self._bonus_cooldown = self._roll(self.config.bonus_cooldown_range)
        else:
            self._bonus_cooldown -= 1
            if self._bonus_cooldown <= 0 and self.rng.random() < self.config.bonus_spawn_chance:
                self._spawn_bonus()

    def _spawn_bonus(self):
        empty_cells = self._empty_cells()
        if not empty_cells:
            return
        position = self.rng.choice(empty_cells)
        bonus_type = self.rng.choice(list(BonusType))
        lifetime = self._roll(self.config.bonus_lifetime_range)
        self.bonus = Bonus(bonus_type, position, lifetime)
        self._log(f"Bonus {bonus_type.name} at ({position.x}, {position.y})")
        self.on_bonus_activated.publish(bonus_type)

    def _survival_speed_ramp(self):
        cfg = self.config
        self._survival_ticks += 1
        if (self._survival_ticks % cfg.survival_ramp_every == 0
                and self._tick_interval > cfg.survival_min_interval):
            self._tick_interval = max(
                cfg.survival_min_interval,
                self._tick_interval - cfg.survival_ramp_step,
            )

    def _move_snake(self):
        new_head = self.head.moved(self.direction)
        self.snake.insert(0, new_head)

        # Bonuses never share a cell with food, so a bonus tick eats nothing
        if self.bonus is not None and new_head == self.bonus.position:
            self.snake.pop()
            self._consume_bonus()
            return

        if new_head not in self.food:
            self.snake.pop()
            return

        self.food.remove(new_head)
        self.score += self.config.hardcore_food_points if self.is_hardcore else self.config.food_points
        if not self._check_level_up():
            self._place_food()

    def _consume_bonus(self):
        bonus_type = self.bonus.bonus_type
        self.bonus = None
        self._bonus_cooldown = self._roll(self.config.bonus_cooldown_range)

        cfg = self.config
        delta = cfg.hardcore_speed_bonus_delta if self.is_hardcore else cfg.speed_bonus_delta
        if bonus_type == BonusType.SPEED_UP:
            self._tick_interval = max(cfg.min_speed_up_interval, self._tick_interval - delta)
        elif bonus_type == BonusType.SLOW_DOWN:
            self._tick_interval += delta
        elif bonus_type == BonusType.EXTRA_POINTS:
            self.score += cfg.hardcore_extra_points if self.is_hardcore else cfg.extra_points
            self._check_level_up()

    def _check_level_up(self) -> bool:
        if self.mode == GameMode.CLASSIC and self.score >= self.points_to_next_level:
            self._level_up()
            return True
        return False

    def _level_up(self):
        """Move to the next level: checkpoint, grow, respawn and refill."""
        if self.mode == GameMode.CLASSIC:
            self.progress.level_data[self.level] = LevelData(
                snake_length=len(self.snake),
                score=self.score,
            )

        self.level += 1
        self._grow_field()
        self._initial_snake_length = len(self.snake)

        if self.mode == GameMode.CLASSIC:
            # Save this engine's record; the store may hold another session's
            if self.level > self.progress.max_unlocked_level:
                self.progress.max_unlocked_level = self.level
            self.store.save(self.progress)

        self.bonus = None
        self._bonus_cooldown = self._roll(self.config.bonus_cooldown_range)

        self._init_snake()
        body = set(self.snake)
        self.food = [f for f in self.food if f not in body]
        if self.with_walls:
            self._generate_walls()
        self._place_food()

        self._log(f"Level {self.level}: field {self.width}x{self.height}")
        self.on_level_changed.publish()

    def _is_collision(self) -> bool:
        """Check if the head hit the border, a wall or the snake body."""
        point = self.head

        if point.x < 0 or point.x >= self.width:
            return True
        if point.y < 0 or point.y >= self.height:
            return True

        if self.with_walls and point in self.walls:
            return True

        # Self collision (skip head)
        if point in self.snake[1:]:
            return True

        return False

    def _handle_game_over(self):
        self.game_over = True

        if self.is_hardcore and self.score > self.progress.hardcore_high_score:
            self.progress.hardcore_high_score = self.score
            self.store.save(self.progress)
        elif self.mode == GameMode.SURVIVAL and self.score > self.progress.survival_high_score:
            self.progress.survival_high_score = self.score
            self.store.save(self.progress)

        self._log(f"Game over: level {self.level}, score {self.score}")
        self.on_game_over.publish()

    def _log(self, message: str):
        if self.verbose:
            print(f"[Game] {message}")

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def get_score(self) -> int:
        return self.score

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": [f.to_dict() for f in self.food],
            "walls": [w.to_dict() for w in sorted(self.walls, key=lambda p: (p.y, p.x))],
            "bonus": self.bonus.to_dict() if self.bonus else None,
            "direction": int(self.direction),
            "score": self.score,
            "level": self.level,
            "points_to_next_level": self.points_to_next_level,
            "width": self.width,
            "height": self.height,
            "paused": self.paused,
            "game_over": self.game_over,
            "tick_interval": self._tick_interval,
            "mode": self.mode.value,
            "is_hardcore": self.is_hardcore,
        }

    def to_grid(self) -> np.ndarray:
        """
        Get the field as a grid of cell codes.

        Returns:
            int8 array of shape (height, width); see the CELL_* constants
        """
        grid = np.full((self.height, self.width), CELL_EMPTY, dtype=np.int8)

        def mark(point: Point, code: int):
            if 0 <= point.x < self.width and 0 <= point.y < self.height:
                grid[point.y, point.x] = code

        for wall in self.walls:
            mark(wall, CELL_WALL)
        for food in self.food:
            mark(food, CELL_FOOD)
        if self.bonus is not None:
            mark(self.bonus.position, CELL_BONUS)
        for segment in self.snake[1:]:
            mark(segment, CELL_BODY)
        if self.snake:
            mark(self.head, CELL_HEAD)
        return grid
