"""CHIP-8 interpreter package."""

from termchip.state import EmulatorState, StackState, create_state
from termchip.emulator import execute, fetch, load_program, update_timers
from termchip.decode import DecodedInstruction, decode
from termchip.devices import Devices
from termchip.display import Display, PixelBuffer, TerminalDisplay
from termchip.audio import Audio, SilentAudio, TerminalBell
from termchip.machine import Chip8
from termchip.errors import (
    TermchipError, ExecutionError, UnknownOpcode, StackUnderflow, StackOverflow,
    MemoryAccessError, DimensionError, ProgramTooLarge,
)
from termchip.constants import *

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "load_program",
    "update_timers",
    "DecodedInstruction",
    "decode",
    "Devices",
    "Display",
    "PixelBuffer",
    "TerminalDisplay",
    "Audio",
    "SilentAudio",
    "TerminalBell",
    "Chip8",
    "TermchipError",
    "ExecutionError",
    "UnknownOpcode",
    "StackUnderflow",
    "StackOverflow",
    "MemoryAccessError",
    "DimensionError",
    "ProgramTooLarge",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
