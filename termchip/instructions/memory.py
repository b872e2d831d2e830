"""CHIP-8 memory and register operations."""

import jax
import jax.numpy as jnp

from termchip.state import EmulatorState
from termchip.decode import DecodedInstruction
from termchip.devices import Devices


def execute_set(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """6XKK - Set VX = KK."""
    return state.replace(V=state.V.at[instruction.x].set(instruction.kk))


def execute_add(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """7XKK - Add KK to VX, wrapping at 8 bits. VF is not affected."""
    total = int(state.V[instruction.x]) + instruction.kk
    return state.replace(V=state.V.at[instruction.x].set(total & 0xFF))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return state.replace(I=instruction.nnn)


def execute_random(state: EmulatorState, instruction: DecodedInstruction, devices: Devices) -> EmulatorState:
    """CXKK - Set VX = random byte & KK."""
    key, subkey = jax.random.split(state.rng)
    random_value = jax.random.randint(subkey, shape=(), minval=0, maxval=256, dtype=jnp.int32)
    value = jnp.astype(random_value & instruction.kk, jnp.uint8)
    return state.replace(V=state.V.at[instruction.x].set(value), rng=key)
