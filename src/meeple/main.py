"""
Main entry point for MEEPLE CATCHER.

Reads settings from the environment (and ``.env``), opens the high-score
file and launches the pygame window.
"""

import asyncio
import logging
import random
import sys

from meeple.config.settings import Settings, get_settings
from meeple.core.events import Event, EventBus, EventType
from meeple.game.engine import MeepleCatcher
from meeple.storage.highscore import JsonHighScoreStore


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def trace_event(event: Event) -> None:
    """Debug log of every game event except frame ticks."""
    if event.type is not EventType.TICK:
        logging.getLogger(__name__).debug(f"{event.type}: {event.data}")


def build_engine(settings: Settings) -> MeepleCatcher:
    """Wire the engine to its store and random source."""
    store = JsonHighScoreStore(
        settings.storage.highscore_path,
        key=settings.storage.highscore_key,
    )
    bus = EventBus()
    if settings.debug:
        bus.subscribe_all(trace_event)
    return MeepleCatcher(
        settings.playfield.width,
        settings.playfield.height,
        rng=random.Random(settings.seed),
        store=store,
        event_bus=bus,
    )


async def run_simulator(settings: Settings) -> None:
    """Run the desktop version."""
    from meeple.simulator.window import SimulatorWindow, WindowConfig

    engine = build_engine(settings)
    config = WindowConfig(
        title=settings.title,
        fps=settings.playfield.fps,
        scale=settings.playfield.scale,
    )
    window = SimulatorWindow(engine, config=config)
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Meeple Catcher starting...")

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Meeple Catcher stopped")


if __name__ == "__main__":
    main()
