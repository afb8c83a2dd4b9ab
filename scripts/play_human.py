#!/usr/bin/env python3
"""
Human Play Mode - Play gridsnake yourself.

Controls:
    Arrow Keys or WASD: Move the snake
    Space / P: Pause
    R: Restart game
    ESC: Quit
"""
import sys
import argparse
import random
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame
from gridsnake.games.snake.game import SnakeGame, Direction, GameMode, BonusType
from gridsnake.games.snake.progress import ProgressStore
from gridsnake.games.snake.renderer import SnakeRenderer
from gridsnake.utils.config_loader import load_config


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

BONUS_MESSAGES = {
    BonusType.SPEED_UP: "Bonus: Speed up!",
    BonusType.SLOW_DOWN: "Bonus: Slow down!",
    BonusType.EXTRA_POINTS: "Bonus: Extra points!",
}

HUD_HEIGHT = 80


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="gridsnake - Classic, Survival and Hardcore snake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play_human.py
  python scripts/play_human.py --mode classic --level 3 --walls
  python scripts/play_human.py --mode hardcore
        """
    )
    parser.add_argument(
        "-m", "--mode",
        type=str,
        choices=[mode.value for mode in GameMode],
        default=None,
        help="Play mode (default: from config)"
    )
    parser.add_argument(
        "-l", "--level",
        type=int,
        default=None,
        help="Classic start level, capped at the highest unlocked level"
    )
    parser.add_argument(
        "--walls",
        action="store_true",
        help="Generate random walls"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config.yaml"
    )
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()
    config = load_config(args.config)

    mode = GameMode(args.mode or config.game.mode)
    start_level = args.level or config.game.start_level
    with_walls = args.walls or config.game.with_walls

    game = SnakeGame(
        mode=mode,
        start_level=start_level,
        with_walls=with_walls,
        is_hardcore=mode == GameMode.HARDCORE,
        store=ProgressStore(config.progress.path),
        config=config.rules,
        rng=random.Random(config.game.seed),
        verbose=config.logging.verbose,
    )

    vis = config.visualization
    pygame.init()
    surface = pygame.display.set_mode((vis.window_width, vis.window_height + HUD_HEIGHT))
    pygame.display.set_caption(f"gridsnake - {mode.value}")
    font = pygame.font.Font(None, 32)

    renderer = SnakeRenderer(cell_size=vis.cell_size, grid_width=game.width, grid_height=game.height)
    renderer.set_render_area(0, HUD_HEIGHT, vis.window_width, vis.window_height)

    message = {"text": "", "until": 0}

    def on_level_changed():
        renderer.set_grid_size(game.width, game.height)

    def on_bonus(bonus_type):
        message["text"] = BONUS_MESSAGES[bonus_type]
        message["until"] = pygame.time.get_ticks() + 2000

    def on_game_over():
        print(f"Game Over! Level {game.level} | Score: {game.score}")

    game.on_level_changed.subscribe(on_level_changed)
    game.on_bonus_activated.subscribe(on_bonus)
    game.on_game_over.subscribe(on_game_over)

    print("\n" + "=" * 50)
    print(f"gridsnake - {mode.value.title()} Mode")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  Space / P: Pause")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    running = True
    clock = pygame.time.Clock()
    last_tick = 0

    while running:
        now = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.reset()
                    renderer.set_grid_size(game.width, game.height)
                elif event.key in (pygame.K_SPACE, pygame.K_p):
                    game.toggle_pause()
                elif event.key in KEY_DIRECTIONS:
                    game.change_direction(KEY_DIRECTIONS[event.key])

        # Fixed-interval ticker; the interval follows bonuses and the Survival ramp
        if now - last_tick >= game.tick_interval:
            game.update()
            last_tick = now

        surface.fill((0, 0, 0))
        renderer.render(game.get_state(), surface)

        hud = f"Level {game.level}   Score {game.score}"
        if mode == GameMode.CLASSIC:
            hud += f" / {game.points_to_next_level}"
        surface.blit(font.render(hud, True, (220, 220, 220)), (10, 10))

        if message["text"] and now < message["until"]:
            surface.blit(font.render(message["text"], True, (255, 200, 0)), (10, 44))

        if game.paused:
            surface.blit(font.render("PAUSED", True, (200, 200, 200)), (vis.window_width - 120, 10))
        elif game.game_over:
            surface.blit(font.render("GAME OVER - R to restart", True, (255, 100, 100)), (vis.window_width - 320, 44))

        pygame.display.flip()
        clock.tick(vis.render_fps)

    pygame.quit()
    print(f"\nFinal Score: {game.score}")


if __name__ == "__main__":
    main()
