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
GOD_MODE_HEAD_COLOR = (255, 215, 0)
FOOD_COLOR = (220, 50, 50)
PREY_COLOR = (170, 170, 180)
TEXT_COLOR = (220, 220, 220)
OVERLAY_COLOR = (0, 0, 0, 160)

HUD_HEIGHT = 60

_OVERLAY_TEXT = {
    "ready": ("SNAKE", "Press SPACE to start"),
    "paused": ("PAUSED", "Press SPACE to resume"),
    "game_over": ("GAME OVER", "Press R to restart"),
}


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame, implementing RendererInterface.

    The board is drawn at the top of the surface with a HUD strip below it.
    """

    def __init__(self, cell_size: int = 25, grid_size: int = 20):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_size: Grid side in cells
        """
        self._cell_size = cell_size
        self._grid_size = grid_size
        self._font: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Board plus HUD strip."""
        board = self._grid_size * self._cell_size
        return (board, board + HUD_HEIGHT)

    def get_cell_size(self) -> int:
        return self._cell_size

    def cell_rect(self, x: int, y: int, inset: int = 0) -> pygame.Rect:
        """Pixel rectangle of a grid cell, shrunk by `inset` on each side."""
        return pygame.Rect(
            x * self._cell_size + inset,
            y * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset,
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from SnakeGame.get_state()
            surface: Pygame surface to draw on
        """
        size = game_state.get("width", self._grid_size)
        board = size * self._cell_size

        surface.fill(BLACK)
        pygame.draw.rect(surface, DARK_GRAY, pygame.Rect(0, 0, board, board))

        # Grid lines (subtle)
        for i in range(size + 1):
            offset = i * self._cell_size
            pygame.draw.line(surface, GRID_COLOR, (offset, 0), (offset, board))
            pygame.draw.line(surface, GRID_COLOR, (0, offset), (board, offset))

        self._draw_target(surface, game_state)
        self._draw_snake(surface, game_state)
        self._draw_hud(surface, game_state, board)

        overlay = _OVERLAY_TEXT.get(game_state.get("state", ""))
        if overlay:
            self._draw_overlay(surface, board, *overlay)

    def _draw_target(self, surface: pygame.Surface, game_state: Dict[str, Any]) -> None:
        food = game_state["food"]
        if game_state.get("facing") is None:
            pygame.draw.rect(surface, FOOD_COLOR, self.cell_rect(food["x"], food["y"], 2), border_radius=4)
            return

        # Prey: round body with a nose pointing where it is heading
        rect = self.cell_rect(food["x"], food["y"], 3)
        pygame.draw.ellipse(surface, PREY_COLOR, rect)
        nose = self._edge_point(rect, game_state["facing"])
        pygame.draw.circle(surface, FOOD_COLOR, nose, max(2, self._cell_size // 10))

    def _draw_snake(self, surface: pygame.Surface, game_state: Dict[str, Any]) -> None:
        head_color = GOD_MODE_HEAD_COLOR if game_state.get("god_mode") else SNAKE_HEAD_COLOR
        for i, segment in enumerate(game_state["snake"]):
            color = head_color if i == 0 else SNAKE_BODY_COLOR
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(surface, color, self.cell_rect(segment["x"], segment["y"], 1),
                             border_radius=border_radius)
            if i == 0:
                self._draw_eyes(surface, segment, game_state.get("visual_direction", 0))

    def _draw_eyes(self, surface: pygame.Surface, head: Dict[str, int], direction: int):
        """Draw eyes on the snake's head."""
        cx = head["x"] * self._cell_size + self._cell_size // 2
        cy = head["y"] * self._cell_size + self._cell_size // 2

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

    @staticmethod
    def _edge_point(rect: pygame.Rect, direction: int) -> Tuple[int, int]:
        if direction == 0:
            return rect.midright
        if direction == 1:
            return rect.midbottom
        if direction == 2:
            return rect.midleft
        return rect.midtop

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 28)
            self._font_large = pygame.font.Font(None, 64)
        return self._font, self._font_large

    def _draw_hud(self, surface: pygame.Surface, game_state: Dict[str, Any], top: int) -> None:
        font, _ = self._fonts()
        parts = [
            f"Score: {game_state['score']}",
            f"Speed: {game_state['tick_interval_ms']} ms",
        ]
        if game_state.get("god_mode"):
            parts.append("GOD MODE")
        text = font.render("   ".join(parts), True, TEXT_COLOR)
        surface.blit(text, (10, top + (HUD_HEIGHT - text.get_height()) // 2))

    def _draw_overlay(self, surface: pygame.Surface, board: int, title: str, hint: str) -> None:
        font, font_large = self._fonts()
        shade = pygame.Surface((board, board), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        surface.blit(shade, (0, 0))

        title_text = font_large.render(title, True, WHITE)
        hint_text = font.render(hint, True, TEXT_COLOR)
        surface.blit(title_text, (board // 2 - title_text.get_width() // 2, board // 2 - 50))
        surface.blit(hint_text, (board // 2 - hint_text.get_width() // 2, board // 2 + 10))
