"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp

from termchip import create_state, Devices, PixelBuffer, Audio, Chip8


class RecordingAudio(Audio):
    """Audio device that remembers every call."""

    def __init__(self):
        self.calls = []

    def play(self, frequency_hz):
        self.calls.append(("play", frequency_hz))

    def stop(self):
        self.calls.append(("stop",))


class RecordingDisplay(PixelBuffer):
    """Pixel buffer that counts renders."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.renders = 0

    def render(self):
        self.renders += 1


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def devices(display, audio):
    return Devices(display=display, audio=audio)


@pytest.fixture
def machine(display, audio):
    """Machine running one instruction per cycle."""
    return Chip8(display, audio, speed=1)


def set_registers(state, **registers):
    """Helper to assign registers by name, e.g. set_registers(state, V1=0x42)."""
    V = state.V
    for name, value in registers.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )
