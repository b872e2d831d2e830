"""CHIP-8 system instructions (0x0xxx)."""

from termchip.state import EmulatorState
from termchip.decode import DecodedInstruction
from termchip.devices import Devices
from termchip.stack import pop


def no_op(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """No operation."""
    return state


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """00E0 - Clear display."""
    devices.display.clear()
    return state


def execute_return(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return state.replace(stack=stack, pc=address)


SYSTEM_INSTRUCTIONS = {
    0x00E0: execute_clear_screen,
    0x00EE: execute_return,
}


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """Dispatch system instructions. Other 0NNN machine routines are ignored."""
    handler = SYSTEM_INSTRUCTIONS.get(instruction.raw, no_op)
    return handler(state, instruction, devices)
