"""CHIP-8 miscellaneous instructions (Fxxx)."""

from termchip.state import EmulatorState
from termchip.decode import DecodedInstruction
from termchip.devices import Devices
from termchip.constants import FONT_START, FONT_GLYPH_SIZE
from termchip.memory import read_bytes, write_bytes
from termchip.instructions.system import no_op


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX0A - Wait for key press. No keyboard is attached, so this does nothing."""
    return state


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=int(state.V[instruction.x]))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=int(state.V[instruction.x]))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX1E - Add VX to I register (16-bit, VF not affected)."""
    return state.replace(I=(state.I + int(state.V[instruction.x])) & 0xFFFF)


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    return state.replace(I=FONT_START + int(state.V[instruction.x]) * FONT_GLYPH_SIZE)


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = int(state.V[instruction.x])
    digits = [value // 100, (value // 10) % 10, value % 10]
    return state.replace(memory=write_bytes(state.memory, state.I, digits))


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I."""
    registers = state.V[:instruction.x + 1]
    return state.replace(memory=write_bytes(state.memory, state.I, registers))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I."""
    values = read_bytes(state.memory, state.I, instruction.x + 1)
    return state.replace(V=state.V.at[:instruction.x + 1].set(values))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """Dispatch misc instructions on the low byte. Unassigned values are ignored."""
    handler = MISC_INSTRUCTIONS.get(instruction.kk, no_op)
    return handler(state, instruction, devices)
