"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory, then the project root.
Missing sections and unknown keys fall back to defaults.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict

from ..games.snake.config import SnakeConfig


@dataclass
class GameConfig:
    """Session defaults used by the front-end menu."""
    mode: str = "classic"
    start_level: int = 1
    with_walls: bool = False
    seed: Optional[int] = None


@dataclass
class ProgressConfig:
    """Progress persistence settings."""
    path: str = "progress.json"


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 25
    render_fps: int = 60
    window_width: int = 900
    window_height: int = 900


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose: bool = False


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    rules: SnakeConfig = field(default_factory=SnakeConfig)
    progress: ProgressConfig = field(default_factory=ProgressConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in common locations."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
        Path.cwd() / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def config_from_dict(data: Dict[str, Any]) -> Config:
    """
    Build a Config from a parsed YAML mapping.

    Args:
        data: Mapping with optional game/rules/progress/visualization/logging sections

    Returns:
        Config object with all settings
    """
    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig)

    if 'rules' in data:
        config.rules = SnakeConfig.from_dict(data['rules'] or {})

    if 'progress' in data:
        config.progress = _dict_to_dataclass(data['progress'], ProgressConfig)

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    return config_from_dict(data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)
    data['rules'] = config.rules.to_dict()

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
