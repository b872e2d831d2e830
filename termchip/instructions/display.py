"""CHIP-8 display operations."""

from termchip.state import EmulatorState
from termchip.decode import DecodedInstruction
from termchip.devices import Devices
from termchip.constants import FLAG_REGISTER, SPRITE_WIDTH
from termchip.memory import read_bytes


def execute_display(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N.

    Pixels are XOR-toggled through the display's single-wrap policy, so a
    sprite may run at most one screen width or height past the edge. VF is
    set to 1 if any lit pixel was erased.
    """
    origin_x = int(state.V[instruction.x])
    origin_y = int(state.V[instruction.y])
    sprite = read_bytes(state.memory, state.I, instruction.n).tolist()

    collision = False
    for row, sprite_byte in enumerate(sprite):
        for col in range(SPRITE_WIDTH):
            if sprite_byte & (0x80 >> col):
                erased = devices.display.toggle(origin_x + col, origin_y + row)
                collision = collision or erased

    return state.replace(V=state.V.at[FLAG_REGISTER].set(int(collision)))
