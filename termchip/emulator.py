"""Main CHIP-8 emulator execution engine."""

from termchip.state import EmulatorState
from termchip.decode import decode
from termchip.devices import Devices
from termchip.constants import PROGRAM_START, PROGRAM_CAPACITY, INSTRUCTION_SIZE
from termchip.errors import UnknownOpcode, ProgramTooLarge
from termchip.memory import read_bytes, write_bytes
from termchip.instructions.system import execute_system_instruction
from termchip.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key
)
from termchip.instructions.alu import execute_alu_operation
from termchip.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from termchip.instructions.display import execute_display
from termchip.instructions.misc import execute_misc_instruction

# Indexed by the top nibble of the instruction
INSTRUCTION_FAMILIES = (
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
)


def execute(state: EmulatorState, instruction: int, devices: Devices) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    The program counter is advanced past the instruction before it runs, so
    jumps, calls and skips all work from the following address.

    Raises:
        UnknownOpcode: If the instruction is not a 16-bit word.
        ExecutionError: If the instruction itself fails.
        DimensionError: If a sprite is drawn too far off screen.
    """
    instruction = int(instruction)
    if not 0 <= instruction <= 0xFFFF:
        raise UnknownOpcode(instruction)

    decoded_instruction = decode(instruction)
    handler = INSTRUCTION_FAMILIES[decoded_instruction.opcode]
    state = state.replace(pc=state.pc + INSTRUCTION_SIZE)
    return handler(state, decoded_instruction, devices)


def _pack_u16(high: int, low: int) -> int:
    """Pack two bytes into a big-endian 16-bit word."""
    return (high << 8) | low


def fetch(state: EmulatorState) -> int:
    """Fetch the instruction at the program counter."""
    high, low = read_bytes(state.memory, state.pc, INSTRUCTION_SIZE).tolist()
    return _pack_u16(high, low)


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Copy program bytes into CHIP-8 memory starting at 0x200."""
    if len(program) > PROGRAM_CAPACITY:
        raise ProgramTooLarge(len(program), PROGRAM_CAPACITY)
    if not program:
        return state
    return state.replace(memory=write_bytes(state.memory, PROGRAM_START, list(program)))


def update_timers(state: EmulatorState) -> EmulatorState:
    """Decrement delay and sound timers by one, stopping at zero."""
    return state.replace(
        delay_timer=max(state.delay_timer - 1, 0),
        sound_timer=max(state.sound_timer - 1, 0),
    )
