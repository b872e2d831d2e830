"""Audio capability: an on/off tone generator."""

import abc
import sys
from typing import TextIO


class Audio(abc.ABC):
    """Tone generator driven once per cycle by the sound timer."""

    @abc.abstractmethod
    def play(self, frequency_hz: int) -> None:
        """Start (or keep) sounding a tone."""

    @abc.abstractmethod
    def stop(self) -> None:
        """Silence the tone."""


class SilentAudio(Audio):
    """Audio device that ignores every request."""

    def play(self, frequency_hz: int) -> None:
        pass

    def stop(self) -> None:
        pass


class TerminalBell(Audio):
    """Rings the terminal bell when a tone starts.

    The bell cannot hold a pitch, so the frequency is only recorded.
    """

    BELL = "\a"

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout
        self.playing = False
        self.frequency_hz = None

    def play(self, frequency_hz: int) -> None:
        if not self.playing:
            self.stream.write(self.BELL)
            self.stream.flush()
        self.playing = True
        self.frequency_hz = frequency_hz

    def stop(self) -> None:
        self.playing = False
