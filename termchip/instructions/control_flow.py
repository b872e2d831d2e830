"""CHIP-8 control flow instructions."""

from termchip.state import EmulatorState
from termchip.decode import DecodedInstruction
from termchip.devices import Devices
from termchip.constants import INSTRUCTION_SIZE
from termchip.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=instruction.nnn)


def execute_call(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, state.pc))
    return execute_jump(state, instruction, devices)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
        if condition_fn(state, instruction):
            return state.replace(pc=state.pc + INSTRUCTION_SIZE)
        return state
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) == inst.kk
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) != inst.kk
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) == int(state.V[inst.y])
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) != int(state.V[inst.y])
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = instruction.nnn + int(state.V[0])
    return state.replace(pc=jump_address)


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """EX9E/EXA1 - Skip if key pressed/not pressed.

    No keyboard is attached, so both forms are recognised and do nothing.
    """
    return state
