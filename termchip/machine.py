"""Interpreter session: CHIP-8 state plus the devices it drives."""

from typing import Optional

import jax

from termchip.audio import Audio
from termchip.constants import DEFAULT_SPEED, STACK_SIZE, TONE_FREQUENCY
from termchip.devices import Devices
from termchip.display import Display
from termchip.emulator import execute, fetch, load_program, update_timers
from termchip.state import EmulatorState, create_state


class Chip8:
    """CHIP-8 virtual machine wired to a display and an audio device.

    The machine owns an immutable `EmulatorState` and replaces it after every
    instruction. When an instruction fails, the instructions that ran before
    it in the same cycle stay applied; the failing one leaves the state as it
    was, except for pixels it already toggled on the display.
    """

    def __init__(
        self,
        display: Display,
        audio: Audio,
        speed: int = DEFAULT_SPEED,
        seed: int = 0,
        max_stack_depth: int = STACK_SIZE,
        tone_frequency: int = TONE_FREQUENCY,
    ):
        """Create a machine with fonts loaded and the program counter at 0x200.

        Args:
            display: Display capability drawn on by the interpreter
            audio: Tone generator driven by the sound timer
            speed: Number of instructions executed per cycle
            seed: Seed for the random number instruction (CXKK)
            max_stack_depth: Maximum number of nested subroutine calls
            tone_frequency: Frequency requested from the audio device, in Hz
        """
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        if max_stack_depth <= 0:
            raise ValueError(f"max_stack_depth must be positive, got {max_stack_depth}")

        self.devices = Devices(display=display, audio=audio)
        self.speed = speed
        self.seed = seed
        self.max_stack_depth = max_stack_depth
        self.tone_frequency = tone_frequency
        self.paused = False
        self.program = b""
        self.state = self._fresh_state()

    def _fresh_state(self) -> EmulatorState:
        return create_state(jax.random.PRNGKey(self.seed), self.max_stack_depth)

    @property
    def display(self) -> Display:
        return self.devices.display

    @property
    def audio(self) -> Audio:
        return self.devices.audio

    def load_program(self, program: bytes) -> None:
        """Copy a program image into memory at 0x200."""
        program = bytes(program)
        self.state = load_program(self.state, program)
        self.program = program

    def load_rom(self, filename: str) -> None:
        """Read a ROM file and load it as the program."""
        with open(filename, 'rb') as f:
            self.load_program(f.read())

    def reset(self) -> None:
        """Restart the loaded program from a blank machine and screen."""
        self.state = load_program(self._fresh_state(), self.program)
        self.display.clear()
        self.paused = False

    def execute(self, instruction: int) -> None:
        """Execute one instruction word against the current state."""
        self.state = execute(self.state, instruction, self.devices)

    def step(self) -> int:
        """Fetch and execute the instruction at the program counter. Returns it."""
        instruction = fetch(self.state)
        self.execute(instruction)
        return instruction

    def update_timers(self) -> None:
        self.state = update_timers(self.state)

    def play_sounds(self) -> None:
        if int(self.state.sound_timer) > 0:
            self.audio.play(self.tone_frequency)
        else:
            self.audio.stop()

    def cycle(self) -> None:
        """Run one batch of `speed` instructions, then tick timers and render.

        An error aborts the rest of the batch and propagates before the
        timers tick.
        """
        if not self.paused:
            for _ in range(self.speed):
                self.step()
        self.update_timers()
        self.play_sounds()
        self.display.render()
