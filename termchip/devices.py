"""Bundle of the capabilities an interpreter drives."""

from chex import dataclass

from termchip.audio import Audio
from termchip.display import Display


@dataclass(frozen=True)
class Devices:
    """Display and audio handles injected into the interpreter."""
    display: Display
    audio: Audio
