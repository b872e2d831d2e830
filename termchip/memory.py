"""Bounds-checked access to CHIP-8 memory."""

import jax.numpy as jnp

from termchip.constants import MEMORY_SIZE
from termchip.errors import MemoryAccessError


def check_range(address: int, length: int) -> int:
    """Return `address` as an int if [address, address + length) is addressable."""
    address = int(address)
    if address < 0:
        raise MemoryAccessError(address)
    if address + length > MEMORY_SIZE:
        raise MemoryAccessError(max(address, MEMORY_SIZE))
    return address


def read_bytes(memory: jnp.ndarray, address: int, length: int) -> jnp.ndarray:
    """Read `length` bytes starting at `address`."""
    start = check_range(address, length)
    return memory[start:start + length]


def write_bytes(memory: jnp.ndarray, address: int, values) -> jnp.ndarray:
    """Write `values` starting at `address`, returning the new memory."""
    values = jnp.asarray(values, dtype=jnp.uint8)
    start = check_range(address, len(values))
    return memory.at[start:start + len(values)].set(values)
