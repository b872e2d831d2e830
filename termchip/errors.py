"""Exceptions raised by the CHIP-8 interpreter and its devices."""


class TermchipError(Exception):
    """Base class for every error raised by termchip."""


class ExecutionError(TermchipError):
    """An instruction could not be executed."""


class UnknownOpcode(ExecutionError):
    """No decoding rule matches the instruction."""

    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"unknown opcode {opcode:#06x}")


class StackUnderflow(ExecutionError):
    """Return executed with an empty call stack."""

    def __init__(self):
        super().__init__("return with empty call stack")


class StackOverflow(ExecutionError):
    """Subroutine call past the maximum stack depth."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"call stack exceeded maximum depth of {depth}")


class MemoryAccessError(ExecutionError):
    """Memory access outside the 4 KiB address space."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"memory access out of range at {address:#06x}")


class DimensionError(TermchipError):
    """Coordinates or sizes rejected by a display buffer.

    Attributes:
        kind: Which value was rejected ("size", "x" or "y")
        details: Human readable description of the expected range
    """

    def __init__(self, kind: str, details: str):
        self.kind = kind
        self.details = details
        super().__init__(f"Invalid dimensions received: {details}")


class ProgramTooLarge(TermchipError):
    """Program image does not fit in memory above the program start."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"program is {size} bytes, but only {capacity} bytes are available")
