"""
Snake game configuration.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any, Tuple


# rules.scoring keys and the fields they set
SCORING_KEYS = {
    "points_per_level": "points_per_level",
    "food": "food_points",
    "hardcore_food": "hardcore_food_points",
    "extra_points": "extra_points",
    "hardcore_extra_points": "hardcore_extra_points",
}
RANGE_FIELDS = ("bonus_cooldown_range", "bonus_lifetime_range")


@dataclass
class SnakeConfig:
    """Rule constants for the Snake engine."""

    # Field
    base_field_size: int = 20
    initial_snake_length: int = 3

    # Timing (milliseconds between ticks)
    base_tick_interval: int = 150
    hardcore_tick_interval: int = 130
    min_speed_up_interval: int = 30
    survival_min_interval: int = 50
    survival_ramp_every: int = 20
    survival_ramp_step: int = 2

    # Scoring
    points_per_level: int = 50
    food_points: int = 10
    hardcore_food_points: int = 20
    max_food: int = 5

    # Bonuses
    bonus_spawn_chance: float = 0.05
    bonus_cooldown_range: Tuple[int, int] = (50, 100)
    bonus_lifetime_range: Tuple[int, int] = (50, 100)
    speed_bonus_delta: int = 160
    hardcore_speed_bonus_delta: int = 200
    extra_points: int = 50
    hardcore_extra_points: int = 100

    # Walls
    min_walls: int = 4
    max_walls: int = 15
    hardcore_walls: int = 40
    safe_zone: int = 5
    hardcore_safe_zone: int = 2
    wall_attempts: int = 100

    def get_scoring_config(self) -> Dict[str, int]:
        """Get scoring configuration dictionary."""
        return {key: getattr(self, name) for key, name in SCORING_KEYS.items()}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert config to the rules: mapping of config.yaml.

        Scoring values go under a nested scoring block; ranges become lists.
        """
        scoring_fields = set(SCORING_KEYS.values())
        data: Dict[str, Any] = {}
        for f in fields(self):
            if f.name in scoring_fields:
                continue
            value = getattr(self, f.name)
            data[f.name] = list(value) if f.name in RANGE_FIELDS else value
        data["scoring"] = self.get_scoring_config()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from a rules: mapping; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}

        for key, name in SCORING_KEYS.items():
            if key in (data.get("scoring") or {}):
                kwargs[name] = data["scoring"][key]

        for name in RANGE_FIELDS:
            if name in kwargs:
                kwargs[name] = tuple(kwargs[name])

        return cls(**kwargs)
