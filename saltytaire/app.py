"""Window, sprite loading and drawing of the game."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

import pygame

from saltytaire.card import Card, sprite_rect
from saltytaire.game import Game
from saltytaire.layout import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    VIRTUAL_RATIO,
    VIRTUAL_SCREEN_HEIGHT,
    VIRTUAL_SCREEN_WIDTH,
    Point,
    to_virtual,
)


@dataclass
class Sprites:
    """The card sprite sheet and the table background."""

    cards: pygame.Surface
    background: pygame.Surface

    @classmethod
    def load(cls, assets_dir: str | Path = "assets") -> Sprites:
        """Load ``cards.png`` and ``background.png`` from a directory."""
        directory = Path(assets_dir)
        return cls(
            cards=pygame.image.load(str(directory / "cards.png")),
            background=pygame.image.load(str(directory / "background.png")),
        )


def render_card(
    surface: pygame.Surface, sprites: Sprites, card: Card, pos: Point
) -> None:
    """Draw one card at ``pos``."""
    x, y = pos
    surface.blit(sprites.cards, (int(x), int(y)), area=pygame.Rect(*sprite_rect(card)))


def render_game(
    surface: pygame.Surface, sprites: Sprites, game: Game, mouse_pos: Point
) -> None:
    """Draw the background and every card of the game."""
    surface.blit(sprites.background, (0, 0))
    for card, pos in game.draw_commands(mouse_pos):
        render_card(surface, sprites, card, pos)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="saltytaire", description="Klondike solitaire.")
    parser.add_argument(
        "--assets", default="assets", help="directory holding cards.png and background.png"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("saltytaire")

        sprites = Sprites.load(args.assets)
        game = Game()
        target = pygame.Surface((VIRTUAL_SCREEN_WIDTH, VIRTUAL_SCREEN_HEIGHT))

        margin = int(VIRTUAL_RATIO)
        scaled_size = (SCREEN_WIDTH + margin * 2, SCREEN_HEIGHT + margin * 2)
        clock = pygame.time.Clock()

        running = True
        while running:
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True
            if not running:
                break

            button_up = not pygame.mouse.get_pressed()[0]
            mouse_pos = to_virtual(pygame.mouse.get_pos())

            game.tick(mouse_pos, pressed, button_up)
            render_game(target, sprites, game, mouse_pos)

            screen.blit(pygame.transform.scale(target, scaled_size), (-margin, -margin))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0