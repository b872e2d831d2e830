"""Fixed-rate driver loop for a CHIP-8 machine."""

import threading
import time
from typing import Callable, Optional

from tqdm import tqdm

from termchip.constants import DEFAULT_RATE
from termchip.errors import TermchipError
from termchip.logging import ConsoleLogger, log_registers
from termchip.machine import Chip8


class Runner:
    """Calls `machine.cycle()` at a fixed rate until stopped.

    `stop()` may be called from another thread or a signal handler; the loop
    observes it between cycles. The stop is sticky: a stop requested before
    `run` starts ends that run before its first cycle. The first error raised
    by a cycle is logged and re-raised, ending the run. Cycles that overrun
    their slot are counted in `late_cycles`, and the first one is logged as a
    warning.
    """

    def __init__(
        self,
        machine: Chip8,
        rate: float = DEFAULT_RATE,
        logger: Optional[ConsoleLogger] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Create a runner.

        Args:
            machine: Machine to drive
            rate: Cycles per second; 0 runs cycles back to back
            logger: Logger for lifecycle and error messages
            clock: Monotonic clock in seconds
            sleep: Function used to wait for the next tick
        """
        if rate < 0:
            raise ValueError(f"rate must be non-negative, got {rate}")
        self.machine = machine
        self.rate = rate
        self.logger = logger or ConsoleLogger()
        self.clock = clock
        self.sleep = sleep
        self.cycles = 0
        self.late_cycles = 0
        self._stop_event = threading.Event()

    @property
    def interval(self) -> float:
        """Seconds between the start of two cycles."""
        return 1.0 / self.rate if self.rate else 0.0

    def stop(self) -> None:
        """Ask the loop to finish after the current cycle."""
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self, max_cycles: Optional[int] = None, progress: bool = False) -> int:
        """Run cycles until stopped, `max_cycles` is reached or a cycle fails.

        Args:
            max_cycles: Number of cycles after which to stop; None runs forever
            progress: Show a progress bar (only with a finite `max_cycles`)

        Returns:
            Number of cycles completed during this call
        """
        completed = 0
        progress_bar = None
        if progress and max_cycles is not None:
            progress_bar = tqdm(total=max_cycles, desc="Emulating", unit="cycle")

        self.logger.info(
            f"Running at {self.rate:g} cycles/s, {self.machine.speed} instructions per cycle"
        )
        deadline = self.clock()
        try:
            while not self.stopped and (max_cycles is None or completed < max_cycles):
                try:
                    self.machine.cycle()
                except TermchipError as e:
                    self.logger.error(f"Cycle {self.cycles} failed: {e}")
                    log_registers(self.logger, self.machine.state)
                    raise
                completed += 1
                self.cycles += 1
                if progress_bar is not None:
                    progress_bar.update(1)

                deadline += self.interval
                delay = deadline - self.clock()
                if delay > 0:
                    self.sleep(delay)
                else:
                    # Running behind: do not try to catch up with a burst
                    if self.interval and delay < 0:
                        self._report_lag(-delay)
                    deadline = self.clock()
        finally:
            if progress_bar is not None:
                progress_bar.close()

        self.logger.debug(f"Stopped after {completed} cycles")
        return completed

    def _report_lag(self, overrun: float) -> None:
        cycle = self.cycles - 1
        self.late_cycles += 1
        if self.late_cycles == 1:
            self.logger.warning(
                f"Cycle {cycle} overran its {self.interval * 1000:.0f} ms slot "
                f"by {overrun * 1000:.0f} ms; emulation is running slower than {self.rate:g} cycles/s"
            )
        else:
            self.logger.debug(f"Cycle {cycle} late by {overrun * 1000:.0f} ms")
