# Snake Arena Source Package
"""
Snake Arena - Grid snake game with a score leaderboard.

Modules:
- core: Abstract interfaces for games, renderers and leaderboards
- games: Game implementations (Snake with food, Snake with prey)
- leaderboard: Leaderboard implementations
- utils: Configuration and utilities
"""
