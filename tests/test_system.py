"""Tests for system instructions (0xxx) and the dispatcher."""

import pytest
from termchip import execute, decode, StackUnderflow, UnknownOpcode, PROGRAM_START


def test_decode_fields():
    """All operand fields are sliced from the instruction word."""
    decoded = decode(0xD12F)

    assert decoded.opcode == 0xD
    assert decoded.x == 0x1
    assert decoded.y == 0x2
    assert decoded.n == 0xF
    assert decoded.kk == 0x2F
    assert decoded.nnn == 0x12F


def test_execute_clear_screen(fresh_state, devices):
    """00E0 - Clear display."""
    devices.display.set(0, 0, True)
    devices.display.set(63, 31, True)

    execute(fresh_state, 0x00E0, devices)

    assert not devices.display.grid.any()


def test_execute_call_and_return(fresh_state, devices):
    """2NNN (call) and 00EE (return) together."""
    state = execute(fresh_state, 0x2300, devices)
    assert state.pc == 0x300

    state = execute(state, 0x00EE, devices)
    assert state.pc == PROGRAM_START + 2
    assert state.stack.pointer == 0


def test_nested_returns_unwind_in_order(fresh_state, devices):
    """Each return goes back to the address after its matching call."""
    state = execute(fresh_state, 0x2300, devices)  # from 0x200
    state = execute(state, 0x2400, devices)        # from 0x300
    state = execute(state, 0x2500, devices)        # from 0x400

    state = execute(state, 0x00EE, devices)
    assert state.pc == 0x402
    state = execute(state, 0x00EE, devices)
    assert state.pc == 0x302
    state = execute(state, 0x00EE, devices)
    assert state.pc == 0x202


def test_return_with_empty_stack(fresh_state, devices):
    """00EE - Returning without a call is an error."""
    with pytest.raises(StackUnderflow):
        execute(fresh_state, 0x00EE, devices)


def test_machine_routine_is_ignored(fresh_state, devices):
    """0NNN - Machine code routines only advance the program counter."""
    state = execute(fresh_state, 0x0123, devices)
    assert state.pc == PROGRAM_START + 2
    assert state.stack.pointer == 0


@pytest.mark.parametrize("instruction", [-1, 0x10000])
def test_instruction_out_of_range(fresh_state, devices, instruction):
    """Only 16-bit words can be decoded."""
    with pytest.raises(UnknownOpcode) as excinfo:
        execute(fresh_state, instruction, devices)
    assert excinfo.value.opcode == instruction
