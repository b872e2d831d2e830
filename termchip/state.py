"""CHIP-8 emulator state structures."""

import jax
import jax.numpy as jnp
from flax.struct import dataclass, field, PyTreeNode

from termchip.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, NUM_REGISTERS, STACK_SIZE
)


@dataclass(frozen=True)
class StackState:
    """Call stack of return addresses. `pointer` is the current depth."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0

    @property
    def max_depth(self) -> int:
        return self.data.shape[0]


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    Memory, registers and the stack are arrays; the program counter, index
    register and timers are plain ints.
    """
    rng: jax.random.PRNGKey
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: int = PROGRAM_START
    stack: StackState = StackState()
    delay_timer: int = 0
    sound_timer: int = 0
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: int = 0


def create_state(
    rng: jax.random.PRNGKey = jax.random.PRNGKey(0),
    max_stack_depth: int = STACK_SIZE,
) -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    state = EmulatorState(
        rng,
        stack=StackState(data=jnp.zeros(max_stack_depth, dtype=jnp.uint16)),
    )
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(FONT_DATA))
