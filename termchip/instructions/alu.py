"""CHIP-8 ALU operations (8xxx).

Each operation maps (VX, VY) to (result, flag). A flag of None leaves VF
untouched. When a flag is produced it is written after the result, so an
operation targeting VF itself ends with the flag in VF.
"""

from typing import Callable, Optional

from termchip.state import EmulatorState
from termchip.decode import DecodedInstruction
from termchip.devices import Devices
from termchip.constants import FLAG_REGISTER

AluResult = tuple[int, Optional[int]]


def alu_set(vx: int, vy: int) -> AluResult:
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx: int, vy: int) -> AluResult:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx: int, vy: int) -> AluResult:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx: int, vy: int) -> AluResult:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx: int, vy: int) -> AluResult:
    """8XY4 - Add: VX += VY, VF = carry."""
    result = vx + vy
    return result & 0xFF, int(result > 255)


def alu_sub_xy(vx: int, vy: int) -> AluResult:
    """8XY5 - Subtract: VX -= VY, VF = 1 if VX > VY."""
    return (vx - vy) & 0xFF, int(vx > vy)


def alu_shift_right(vx: int, vy: int) -> AluResult:
    """8XY6 - Shift right: VX >>= 1, VF = bit shifted out."""
    return vx >> 1, vx & 1


def alu_sub_yx(vx: int, vy: int) -> AluResult:
    """8XY7 - Subtract: VX = VY - VX, VF = 1 if VY > VX."""
    return (vy - vx) & 0xFF, int(vy > vx)


def alu_shift_left(vx: int, vy: int) -> AluResult:
    """8XYE - Shift left: VX <<= 1, VF = bit shifted out."""
    return (vx << 1) & 0xFF, (vx & 0x80) >> 7


ALU_OPERATIONS: dict[int, Callable[[int, int], AluResult]] = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
    0x4: alu_add,
    0x5: alu_sub_xy,
    0x6: alu_shift_right,
    0x7: alu_sub_yx,
    0xE: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """8XYN - ALU operations dispatcher. Undefined N values have no effect."""
    operation = ALU_OPERATIONS.get(instruction.n)
    if operation is None:
        return state

    result, vf = operation(int(state.V[instruction.x]), int(state.V[instruction.y]))

    new_V = state.V.at[instruction.x].set(result)
    if vf is not None:
        new_V = new_V.at[FLAG_REGISTER].set(vf)
    return state.replace(V=new_V)
