"""Command line entry point: `termchip ROM`."""

import argparse
import signal
import sys
from typing import Optional, Sequence

from termchip.audio import SilentAudio, TerminalBell
from termchip.constants import DEFAULT_RATE, DEFAULT_SPEED, STACK_SIZE
from termchip.display import PixelBuffer, TerminalDisplay
from termchip.errors import TermchipError
from termchip.logging import ConsoleLogger
from termchip.machine import Chip8
from termchip.rendering import save_snapshot
from termchip.runner import Runner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termchip",
        description="Run a CHIP-8 program in the terminal.",
    )
    parser.add_argument("rom", help="Path to the CHIP-8 program image")
    parser.add_argument(
        "--speed", type=int, default=DEFAULT_SPEED,
        help=f"Instructions executed per cycle (default: {DEFAULT_SPEED})",
    )
    parser.add_argument(
        "--rate", type=float, default=DEFAULT_RATE,
        help=f"Cycles per second, 0 for unthrottled (default: {DEFAULT_RATE})",
    )
    parser.add_argument(
        "--cycles", type=int, default=None,
        help="Stop after this many cycles (default: run until interrupted)",
    )
    parser.add_argument("--seed", type=int, default=0, help="Random number seed (default: 0)")
    parser.add_argument(
        "--max-stack-depth", type=int, default=STACK_SIZE,
        help=f"Maximum subroutine nesting (default: {STACK_SIZE})",
    )
    parser.add_argument(
        "--headless", action="store_true",
        help="Do not draw to the terminal or ring the bell",
    )
    parser.add_argument("--snapshot", metavar="PNG", help="Save the final screen as a PNG image")
    parser.add_argument(
        "--log-level", default="INFO", choices=list(ConsoleLogger.level_order),
        help="Minimum level of diagnostics written to stderr (default: INFO)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = ConsoleLogger(log_level=args.log_level)

    if args.headless:
        display, audio = PixelBuffer(), SilentAudio()
    else:
        display, audio = TerminalDisplay(), TerminalBell()

    try:
        machine = Chip8(
            display, audio,
            speed=args.speed,
            seed=args.seed,
            max_stack_depth=args.max_stack_depth,
        )
        runner = Runner(machine, rate=args.rate, logger=logger)
    except ValueError as e:
        logger.error(str(e))
        return 2

    try:
        machine.load_rom(args.rom)
    except (OSError, TermchipError) as e:
        logger.error(f"Cannot load {args.rom}: {e}")
        return 1
    logger.info(f"Loaded {args.rom} ({len(machine.program)} bytes)")

    previous_handler = signal.signal(signal.SIGTERM, lambda signum, frame: runner.stop())
    status = 0
    try:
        runner.run(max_cycles=args.cycles, progress=args.headless)
    except TermchipError:
        status = 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        status = 130
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    if args.snapshot:
        save_snapshot(display.grid, args.snapshot)
        logger.info(f"Saved screen to {args.snapshot}")
    return status


if __name__ == "__main__":
    sys.exit(main())
