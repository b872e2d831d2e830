"""Console logging utilities for the emulator.

Messages go to stderr by default, so they never interleave with the frame the
terminal display paints on stdout.
"""

import sys
import time
from typing import TextIO

from termchip.state import EmulatorState


class ConsoleLogger:
    """Console logger with levels, optional colors and elapsed-time stamps."""

    level_order = {
        "DEBUG": 0,
        "INFO": 1,
        "WARNING": 2,
        "ERROR": 3,
        "CRITICAL": 4,
    }

    def __init__(
        self,
        name: str = "termchip",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream: TextIO = None,
    ):
        self.name = name
        self.stream = stream or sys.stderr
        self.log_level = log_level.upper()
        if self.log_level not in self.level_order:
            raise ValueError(
                f"Unknown log level '{log_level}'. Available: {list(self.level_order)}"
            )
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {
                k: ""
                for k in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "RESET"]
            }
        )

    def _should_log(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.level_order.get(level.upper(), 1) >= self.level_order.get(
            self.log_level, 1
        )

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self._should_log(level):
            formatted = self._format_message(level, message)
            print(formatted, file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


def format_registers(state: EmulatorState) -> list[str]:
    """Describe the CPU registers as a few short lines."""
    lines = [
        f"PC=0x{int(state.pc):03X} I=0x{int(state.I):03X} "
        f"SP={state.stack.pointer} DT={int(state.delay_timer)} ST={int(state.sound_timer)}"
    ]
    for i in range(0, 16, 8):
        lines.append(" ".join(f"V{j:X}={int(state.V[j]):02X}" for j in range(i, i + 8)))
    return lines


def log_registers(logger: ConsoleLogger, state: EmulatorState, level: str = "DEBUG"):
    """Log a register dump at the given level."""
    for line in format_registers(state):
        logger.log(level, line)
