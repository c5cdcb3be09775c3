"""
Configuration Loader - Load configuration from YAML.

Supports hierarchical configuration:
- config/default.yaml - Global settings
- config/games/{game_id}.yaml - Per-game settings

Game-specific settings override defaults.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from copy import deepcopy


@dataclass
class GameConfig:
    """Board and scoring."""
    grid_size: int = 20
    points_per_target: int = 10


@dataclass
class SpeedConfig:
    """Tick interval ramp, in milliseconds."""
    initial_ms: int = 300
    min_ms: int = 80
    decrement_ms: int = 10


@dataclass
class PreyConfig:
    """Random walk of the prey variant."""
    turn_probability: float = 0.3
    move_every: int = 2


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 25
    render_fps: int = 60
    window_title: str = "Snake"


@dataclass
class LeaderboardConfig:
    """Score submission settings."""
    player_name: str = "Player"
    fetch_limit: int = 10


@dataclass
class LoggingConfig:
    """Console output."""
    verbose: bool = True


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    speed: SpeedConfig = field(default_factory=SpeedConfig)
    prey: PreyConfig = field(default_factory=PreyConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    leaderboard: LeaderboardConfig = field(default_factory=LeaderboardConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'game': GameConfig,
    'speed': SpeedConfig,
    'prey': PreyConfig,
    'visualization': VisualizationConfig,
    'leaderboard': LeaderboardConfig,
    'logging': LoggingConfig,
}


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _build_config(data: Dict) -> Config:
    """Build a Config from a (possibly partial) nested dictionary."""
    config = Config()
    for section, cls in _SECTIONS.items():
        if section in data:
            setattr(config, section, _dict_to_dataclass(data[section], cls))
    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a single YAML file.

    Args:
        config_path: Path to config file (defaults to config/default.yaml)

    Returns:
        Config object with all settings
    """
    if config_path is None:
        config_path = str(_find_config_dir() / "default.yaml")

    if not Path(config_path).exists():
        print("[Config] No config file found, using defaults")
        return Config()

    data = _load_yaml_file(Path(config_path))
    return _build_config(data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_dir() -> Path:
    """Find the config directory."""
    possible_paths = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]

    for path in possible_paths:
        if path.exists() and path.is_dir():
            return path

    # Fallback to project root config folder
    return Path(__file__).parent.parent.parent / "config"


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def load_game_config(game_id: str, config_dir: Optional[Path] = None) -> Config:
    """
    Load configuration for a specific game.

    Merges default settings with game-specific settings.
    Game settings override defaults.

    Args:
        game_id: The game identifier (e.g., "snake")
        config_dir: Directory holding default.yaml and games/ (auto-detected if None)

    Returns:
        Config object with merged settings
    """
    config_dir = config_dir or _find_config_dir()

    default_data = _load_yaml_file(config_dir / "default.yaml")
    game_data = _load_yaml_file(config_dir / "games" / f"{game_id}.yaml")

    # Merge configs (game overrides default)
    merged_data = _deep_merge(default_data, game_data)

    if not merged_data:
        print(f"[Config] No config found for game '{game_id}', using defaults")
        return Config()

    return _build_config(merged_data)


def list_available_games(config_dir: Optional[Path] = None) -> list:
    """
    List all games that have configuration files.

    Returns:
        List of game IDs
    """
    games_dir = (config_dir or _find_config_dir()) / "games"

    if not games_dir.exists():
        return []

    return sorted(
        p.stem for p in games_dir.glob("*.yaml")
        if p.is_file()
    )
