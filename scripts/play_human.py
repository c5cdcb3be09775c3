#!/usr/bin/env python3
"""
Human Play Mode - Play Snake yourself.

Usage:
    python scripts/play_human.py                       # Classic snake
    python scripts/play_human.py --game snake_prey     # Hunt the prey
    python scripts/play_human.py --name Alice --seed 7

Controls:
    Arrow Keys or WASD: Turn
    SPACE: Start / pause / resume
    G: Toggle god mode (walls wrap)
    L: Print leaderboard
    R: Restart game
    ESC: Quit
"""
import sys
import os
import argparse
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

import pygame

from src.games import GameRegistry
from src.games.snake import Direction, GameState, SnakeConfig, TickEvent, TickScheduler
from src.core.leaderboard_interface import LeaderboardError
from src.leaderboard import InMemoryLeaderboard
from src.utils.config_loader import load_config, load_game_config


KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Snake - Human play mode",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-g", "--game",
        type=str,
        default="snake",
        metavar="GAME_ID",
        help="Variant to play: 'snake' or 'snake_prey'"
    )
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Player name for the leaderboard (default: from config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible food placement"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a single YAML config file (default: config/ tree)"
    )
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()

    if not GameRegistry.is_available(args.game):
        ids = ", ".join(m.id for m in GameRegistry.list_games())
        print(f"[Game] Unknown game '{args.game}'. Available: {ids}")
        return 1

    config = load_config(args.config) if args.config else load_game_config(args.game)
    verbose = config.logging.verbose
    player_name = args.name or config.leaderboard.player_name

    def log(tag: str, message: str):
        if verbose:
            print(f"[{tag}] {message}")

    game = GameRegistry.create_game(
        args.game, config=SnakeConfig.from_config(config), seed=args.seed
    )
    renderer = GameRegistry.create_renderer(
        args.game,
        cell_size=config.visualization.cell_size,
        grid_size=config.game.grid_size,
    )
    scheduler = TickScheduler(game)
    leaderboard = InMemoryLeaderboard()

    pygame.init()
    screen = pygame.display.set_mode(renderer.get_preferred_size())
    pygame.display.set_caption(config.visualization.window_title)
    clock = pygame.time.Clock()

    log("Game", f"Playing '{game.get_metadata().name}' as {player_name}")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if game.state == GameState.READY:
                        game.start()
                    elif game.state == GameState.PLAYING:
                        game.pause()
                    elif game.state == GameState.PAUSED:
                        game.resume()
                elif event.key == pygame.K_r:
                    game.reset()
                    scheduler.cancel()
                elif event.key == pygame.K_g:
                    game.toggle_god_mode()
                    log("Game", f"God mode {'on' if game.god_mode else 'off'}")
                elif event.key == pygame.K_l:
                    print_leaderboard(leaderboard, config.leaderboard.fetch_limit)
                elif event.key in KEY_DIRECTIONS:
                    game.queue_direction(KEY_DIRECTIONS[event.key])

        was_playing = game.is_running()
        if scheduler.update(pygame.time.get_ticks()) and was_playing and not game.is_running():
            reason = "wall" if game.game_over_reason == TickEvent.HIT_WALL else "self"
            log("Game", f"Game over ({reason}). Score: {game.score}")
            submit_score(leaderboard, player_name, game.score, log)

        renderer.render(game.get_state(), screen)
        pygame.display.flip()
        clock.tick(config.visualization.render_fps)

    pygame.quit()
    log("Leaderboard", f"Session best: {leaderboard.best_score()}")
    return 0


def submit_score(leaderboard, player_name: str, score: int, log) -> None:
    """Submit a finished run and report the outcome."""
    try:
        entry = leaderboard.submit_score(player_name, score)
    except LeaderboardError as e:
        log("Leaderboard", e.message)
        return
    log("Leaderboard", f"Saved #{entry.id}: {entry.player_name} - {entry.score}")


def print_leaderboard(leaderboard, limit: int) -> None:
    try:
        entries = leaderboard.fetch_entries(limit)
    except LeaderboardError as e:
        print(f"[Leaderboard] {e.message}")
        return

    if not entries:
        print("[Leaderboard] No scores yet")
        return

    print("\n" + "=" * 40)
    for rank, entry in enumerate(entries, start=1):
        stamp = entry.timestamp.strftime("%Y-%m-%d %H:%M")
        print(f"{rank:>3}. {entry.player_name:<20} {entry.score:>6}  {stamp}")
    print("=" * 40 + "\n")


if __name__ == "__main__":
    sys.exit(main())
