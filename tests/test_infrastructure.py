"""
Tests for infrastructure components (GameRegistry, config loading).

These tests verify that core infrastructure works correctly.
"""

import pytest
from pathlib import Path


class TestGameRegistry:
    """Tests for the GameRegistry class."""

    def test_registry_lists_both_variants(self):
        """Test that registry lists the snake variants."""
        from src.games import GameRegistry

        game_ids = [g.id for g in GameRegistry.list_games()]

        assert 'snake' in game_ids
        assert 'snake_prey' in game_ids

    def test_registry_get_game(self):
        """Test getting a specific game by ID."""
        from src.games import GameRegistry

        game_data = GameRegistry.get_game('snake')

        assert game_data is not None
        assert 'game_class' in game_data
        assert 'renderer_class' in game_data
        assert 'metadata' in game_data

    def test_registry_get_game_unknown(self):
        """Test getting unknown game returns None."""
        from src.games import GameRegistry

        assert GameRegistry.get_game('nonexistent') is None
        assert GameRegistry.get_metadata('nonexistent') is None
        assert GameRegistry.get_config_class('nonexistent') is None

    def test_registry_is_available(self):
        """Test checking game availability."""
        from src.games import GameRegistry

        assert GameRegistry.is_available('snake_prey') is True
        assert GameRegistry.is_available('nonexistent') is False

    def test_registry_get_metadata(self):
        """Test getting game metadata."""
        from src.games import GameRegistry

        metadata = GameRegistry.get_metadata('snake')

        assert metadata.id == 'snake'
        assert metadata.name == 'Snake'
        assert metadata.supports_god_mode is True

    def test_registry_create_game(self):
        """Test creating each variant from the registry."""
        from src.games import GameRegistry
        from src.games.snake import SnakeGame, PreySnakeGame

        game = GameRegistry.create_game('snake', seed=1)
        prey = GameRegistry.create_game('snake_prey', seed=1)

        assert type(game) is SnakeGame
        assert type(prey) is PreySnakeGame

    def test_registry_create_renderer(self):
        """Test creating a renderer with keyword arguments."""
        from src.games import GameRegistry

        renderer = GameRegistry.create_renderer('snake', cell_size=10, grid_size=12)

        assert renderer.get_cell_size() == 10

    def test_registry_config_class(self):
        from src.games import GameRegistry
        from src.games.snake import SnakeConfig

        assert GameRegistry.get_config_class('snake_prey') is SnakeConfig

    def test_registry_create_unknown_raises(self):
        """Test creating unknown game raises."""
        from src.games import GameRegistry

        with pytest.raises(ValueError, match="Unknown game"):
            GameRegistry.create_game('nonexistent')
        with pytest.raises(ValueError, match="Unknown game"):
            GameRegistry.create_renderer('nonexistent')


class TestConfigLoading:
    """Tests for configuration loading."""

    def test_load_project_config(self):
        """Test loading the shipped config tree."""
        from src.utils.config_loader import load_game_config

        config = load_game_config('snake_prey')

        assert config.game.grid_size == 20
        assert config.speed.initial_ms == 300
        assert config.prey.move_every == 2
        assert config.visualization.window_title == "Snake: Prey"

    def test_game_overrides_default(self, config_dir):
        from src.utils.config_loader import load_game_config

        config = load_game_config('snake_prey', config_dir=config_dir)

        assert config.game.grid_size == 15
        assert config.game.points_per_target == 10
        assert config.prey.turn_probability == 0.5
        assert config.prey.move_every == 2
        assert config.logging.verbose is False

    def test_game_without_override_uses_default(self, config_dir):
        from src.utils.config_loader import load_game_config

        config = load_game_config('snake', config_dir=config_dir)

        assert config.game.grid_size == 20

    def test_empty_config_dir_uses_defaults(self, tmp_path, capsys):
        from src.utils.config_loader import load_game_config, Config

        config = load_game_config('snake', config_dir=tmp_path)

        assert config == Config()
        assert "[Config]" in capsys.readouterr().out

    def test_load_config_missing_file(self, tmp_path):
        from src.utils.config_loader import load_config, Config

        assert load_config(str(tmp_path / "missing.yaml")) == Config()

    def test_save_and_load(self, tmp_path):
        from src.utils.config_loader import load_config, save_config, Config

        config = Config()
        config.game.grid_size = 30
        config.speed.min_ms = 50
        path = tmp_path / "saved.yaml"

        save_config(config, str(path))

        assert load_config(str(path)) == config

    def test_list_available_games(self, config_dir):
        from src.utils.config_loader import list_available_games

        assert list_available_games(config_dir) == ['snake_prey']

    def test_project_lists_both_games(self):
        from src.utils.config_loader import list_available_games

        games = list_available_games(Path(__file__).parent.parent / "config")

        assert games == ['snake', 'snake_prey']


class TestSnakeConfig:
    """Tests for the engine config."""

    def test_from_config(self, config_dir):
        from src.utils.config_loader import load_game_config
        from src.games.snake import SnakeConfig

        snake_config = SnakeConfig.from_config(load_game_config('snake_prey', config_dir=config_dir))

        assert snake_config.grid_size == 15
        assert snake_config.initial_interval_ms == 300
        assert snake_config.min_interval_ms == 80
        assert snake_config.speed_decrement_ms == 10
        assert snake_config.prey_turn_probability == 0.5

    def test_dict_round_trip(self):
        from src.games.snake import SnakeConfig

        config = SnakeConfig(grid_size=12, prey_move_every=3)

        assert SnakeConfig.from_dict(config.to_dict()) == config

    def test_defaults_are_valid(self):
        from src.games.snake import SnakeConfig

        assert SnakeConfig().validate() == []

    def test_validate_reports_every_problem(self):
        from src.games.snake import SnakeConfig

        errors = SnakeConfig(
            grid_size=2,
            speed_decrement_ms=0,
            points_per_target=0,
            prey_turn_probability=1.5,
            prey_move_every=0,
        ).validate()

        assert len(errors) == 5
