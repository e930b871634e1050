#!/usr/bin/env python3
"""EnhancedPong - Standalone Entry Point.

Play against the adaptive AI with the keyboard.

Usage:
    python main.py
    python main.py --seed 42
    python main.py --clock tick --debug
"""

import argparse
import os
import sys

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from games.EnhancedPong.config import (
    FIELD_WIDTH, FIELD_HEIGHT, TICK_MS, RANDOM_SEED, CLOCK_MODE, WINDOW_TITLE,
)
from games.EnhancedPong.engine import PongEngine
from games.EnhancedPong.input import KeyboardInputSource
from games.EnhancedPong.renderer import PongRenderer
from pong_platform.clock import create_clock
from pong_platform.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)

log = get_logger('main')


def main():
    """Run EnhancedPong standalone."""
    parser = argparse.ArgumentParser(description="EnhancedPong - Standalone")
    parser.add_argument('--seed', type=int, default=RANDOM_SEED,
                        help='Random seed for a reproducible match')
    parser.add_argument('--clock', type=str, default=CLOCK_MODE,
                        choices=['wall', 'tick'],
                        help='Effect timer clock (tick pauses timers with the game)')
    parser.add_argument('--tick-ms', type=int, default=TICK_MS,
                        help='Fixed tick period in milliseconds')
    parser.add_argument('--debug', action='store_true', help='Enable DEBUG logging')
    args = parser.parse_args()

    if args.debug:
        configure_logging(level='DEBUG')

    if args.tick_ms <= 0:
        log.warning(f"Ignoring tick period {args.tick_ms}ms, using {TICK_MS}ms")
        args.tick_ms = TICK_MS

    register_sink('match', create_sink_for_environment('match', metadata={
        'seed': args.seed,
        'clock': args.clock,
        'tick_ms': args.tick_ms,
    }))

    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)

    clock = create_clock(args.clock, args.tick_ms)
    engine = PongEngine(clock=clock, seed=args.seed)
    renderer = PongRenderer(seed=args.seed)
    keyboard = KeyboardInputSource()

    log.info(f"Starting EnhancedPong (seed={args.seed}, clock={args.clock}, "
             f"tick={args.tick_ms}ms)")

    frame_clock = pygame.time.Clock()
    fps = max(1, round(1000 / args.tick_ms))

    try:
        while not keyboard.quit_requested:
            dt = frame_clock.tick(fps) / 1000.0

            keyboard.update(dt)
            engine.handle_input(keyboard.poll_frame())
            engine.update()

            renderer.render(engine.snapshot(), screen)
            pygame.display.flip()
    finally:
        engine.stop()
        close_all_sinks()
        pygame.quit()


if __name__ == '__main__':
    main()
