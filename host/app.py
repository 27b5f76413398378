"""
Desktop entry point for Snake.

Opens a single fixed-size window and runs the Session at a fixed frame
rate until the window is closed.

Controls: W/A/S/D steer, P pauses, ENTER plays again after a game over.
"""
import logging
import traceback

import pygame

from games.config import GameConfig
from games.rng import NumpyRandom
from games.snake import SnakeGame
from host.inputs import KeyboardInput
from host.render import PygameRenderer
from host.session import Session

# ========== LOGGING SETUP ==========
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%H:%M:%S'
)

logger = logging.getLogger('snake')
logger.setLevel(logging.INFO)

# ========== WINDOW SETTINGS ==========
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
TARGET_FPS = 60
WINDOW_TITLE = "snake"


def create_session(surface: pygame.Surface, config: GameConfig = None,
                   seed: int = None) -> Session:
    """
    Factory function wiring the game to the window.

    Args:
        surface: Display surface to draw on
        config: Static game constants (defaults if None)
        seed: Seed for the process-wide random source (None = OS entropy)

    Returns:
        Session ready to tick
    """
    width, height = surface.get_size()
    game = SnakeGame(width, height, config)
    return Session(
        game=game,
        input_source=KeyboardInput(),
        rng=NumpyRandom(seed),
        renderer=PygameRenderer(surface),
    )


def run(session: Session, clock: pygame.time.Clock, fps: int = TARGET_FPS) -> None:
    """Tick the session once per frame until the window is closed."""
    while not session.should_close:
        session.tick()
        pygame.display.flip()
        clock.tick(fps)


def main():
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        session = create_session(screen)
        logger.info(f"Starting {WINDOW_TITLE} at {SCREEN_WIDTH}x{SCREEN_HEIGHT}, {TARGET_FPS} fps")
        run(session, clock)

        summary = session.metrics.get_summary()
        logger.info(
            f"Window closed after {summary['rounds']} rounds - "
            f"highscore: {session.highscore}, best length: {summary['max_length']}"
        )
    except Exception as e:
        logger.error(f"Error in game loop: {e}")
        logger.error(traceback.format_exc())
        raise
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
