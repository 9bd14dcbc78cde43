"""
Main entry point for Text Invaders.

Initializes pygame, measures the glyph cell of a monospace font, opens a
window snapped to the character grid and runs the frame loop.  The game
core never touches pygame: this module translates key events into the
game's numeric key codes and blits the text the game hands to its
render sink.

Usage:
    python text-invaders.py [OPTIONS]

Options:
    --width PX           Render area width in pixels (default: 800)
    --height PX          Render area height in pixels (default: 600)
    --font-size N        Font size (8-48, default: 20)
    --lives N            Starting lives
    --difficulty F       Per-level difficulty multiplier
    --columns N          Invader columns
    --rows N             Invader rows
    --seed N             Seed the bomb dice
    --fps N              Frames per second (default: 60)
    --fullscreen         Launch in fullscreen mode
    --debug              Verbose logging
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys
from dataclasses import dataclass, field
from typing import Any, Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from text_invaders.config import (
    FONT_SIZE,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    RENDER_HEIGHT,
    RENDER_WIDTH,
    UPDATE_RATE,
    GameConfig,
    Glyphs,
)
from text_invaders.game import Game
from text_invaders.utils.functions import bounds_from_cell_size

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

BACKGROUND: tuple[int, int, int] = (0, 0, 0)
FOREGROUND: tuple[int, int, int] = (0, 255, 0)
FONT_NAME: str = "monospace"

# pygame key constant name → game key code
_KEY_NAMES: dict[str, int] = {
    "K_SPACE": KEY_SPACE,
    "K_LEFT": KEY_LEFT,
    "K_RIGHT": KEY_RIGHT,
    "K_ESCAPE": KEY_ESCAPE,
}

if pygame is not None:
    KEY_CODES: dict[int, int] = {
        getattr(pygame, name): code for name, code in _KEY_NAMES.items()
    }
else:
    KEY_CODES = {}


# ── Argument parsing ───────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Text Invaders – a Space Invaders clone in text glyphs",
    )
    parser.add_argument(
        "--width", type=int, default=RENDER_WIDTH, metavar="PX",
        help=f"Render area width in pixels (default: {RENDER_WIDTH})",
    )
    parser.add_argument(
        "--height", type=int, default=RENDER_HEIGHT, metavar="PX",
        help=f"Render area height in pixels (default: {RENDER_HEIGHT})",
    )
    parser.add_argument(
        "--font-size", type=int, default=FONT_SIZE,
        choices=range(MIN_FONT_SIZE, MAX_FONT_SIZE + 1),
        metavar="N",
        help=f"Font size ({MIN_FONT_SIZE}-{MAX_FONT_SIZE}, default: {FONT_SIZE})",
    )
    parser.add_argument(
        "--lives", type=int, default=None, metavar="N",
        help="Starting lives",
    )
    parser.add_argument(
        "--difficulty", type=float, default=None, metavar="F",
        help="Per-level difficulty multiplier",
    )
    parser.add_argument(
        "--columns", type=int, default=None, metavar="N",
        help="Invader columns",
    )
    parser.add_argument(
        "--rows", type=int, default=None, metavar="N",
        help="Invader rows",
    )
    parser.add_argument(
        "--seed", type=int, default=None, metavar="N",
        help="Seed for the bomb dice (for testing)",
    )
    parser.add_argument(
        "--fps", type=int, default=UPDATE_RATE, metavar="N",
        help=f"Frames per second (default: {UPDATE_RATE})",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Apply command-line overrides on top of the default config."""
    overrides: dict[str, Any] = {}
    if args.lives is not None:
        overrides["initial_lives"] = args.lives
    if args.difficulty is not None:
        overrides["difficulty_multiplier"] = args.difficulty
    if args.columns is not None:
        overrides["invader_columns"] = args.columns
    if args.rows is not None:
        overrides["invader_rows"] = args.rows
    return dataclasses.replace(GameConfig(), **overrides)


# ── Display probe ──────────────────────────────────────────────────────────


def measure_cell(font: Any, glyph: str) -> tuple[int, int]:
    """Return (glyph width, line height) in pixels for *font*."""
    width, _ = font.size(glyph)
    return width, font.get_linesize()


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class TextInvadersApp:
    """Top-level application wrapper.

    Owns the pygame display and the main loop; the game itself lives in
    :attr:`game`.
    """

    width: int = RENDER_WIDTH
    height: int = RENDER_HEIGHT
    font_size: int = FONT_SIZE
    fps: int = UPDATE_RATE
    fullscreen: bool = False
    config: GameConfig = field(default_factory=GameConfig)
    seed: Optional[int] = None

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    font: object = field(default=None, repr=False)
    cell: tuple[int, int] = (0, 0)
    game: Optional[Game] = None
    running: bool = False

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame, probe the font and build the game.

        Returns True on success, False on failure.
        """
        if pygame is None:
            print("Error: pygame is required. Install with: pip install pygame",
                  file=sys.stderr)
            return False

        try:
            pygame.init()
        except Exception as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        glyphs = Glyphs()
        self.font = pygame.font.SysFont(FONT_NAME, self.font_size)
        self.cell = measure_cell(self.font, glyphs.block)
        bounds = bounds_from_cell_size(
            self.width, self.height, *self.cell,
        )
        logger.debug("Cell %s -> bounds %s", self.cell, bounds)

        # Snap the window to the grid so every row is visible
        cell_width, line_height = self.cell
        size = (bounds.columns * cell_width, bounds.rows * line_height)
        flags = pygame.FULLSCREEN if self.fullscreen else 0

        try:
            self.screen = pygame.display.set_mode(size, flags)
        except Exception as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption("Text Invaders")
        self.clock = pygame.time.Clock()

        self.game = Game(
            config=self.config,
            glyphs=glyphs,
            bounds=bounds,
            sink=self._blit,
            rng=random.Random(self.seed),
        )
        self.game.start()

        self.running = True
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main game loop."""
        if not self.running:
            return

        try:
            while self.running:
                self._handle_events()
                self.game.step(pygame.time.get_ticks())
                self.clock.tick(self.fps)
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Forward pygame key events to the game.

        Keyboard controls:
            Space       – start / fire
            Left/Right  – move the ship
            Escape      – restart after game over
        Closing the window quits.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self._forward_key(event.type == pygame.KEYDOWN, event.key)

    def _forward_key(self, pressed: bool, key: int) -> None:
        code = KEY_CODES.get(key)
        if code is None or self.game is None:
            return
        if pressed:
            self.game.key_down(code)
        else:
            self.game.key_up(code)

    # ── Rendering ───────────────────────────────────────────────────────

    def _blit(self, content: str) -> None:
        """Render sink: draw each grid row and flip the display."""
        if self.screen is None:
            return

        self.screen.fill(BACKGROUND)
        line_height = self.cell[1]
        for row, line in enumerate(content.split("\n")):
            surface = self.font.render(line, True, FOREGROUND)
            self.screen.blit(surface, (0, row * line_height))
        pygame.display.flip()

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        if pygame is not None:
            pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = TextInvadersApp(
        width=args.width,
        height=args.height,
        font_size=args.font_size,
        fps=args.fps,
        fullscreen=args.fullscreen,
        config=build_config(args),
        seed=args.seed,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
