"""Tests for register, index and memory instructions."""

import pytest
from termchip import execute, MemoryAccessError, create_state
from termchip.constants import FONT_DATA
from conftest import set_registers, setup_sprite_in_memory


class TestRegisters:
    """6XKK, 7XKK, ANNN, CXKK."""

    def test_set_register(self, fresh_state, devices):
        state = execute(fresh_state, 0x6A42, devices)
        assert state.V[0xA] == 0x42

    def test_add_immediate_wraps(self, fresh_state, devices):
        """7XKK - Wraps at 8 bits and leaves VF alone."""
        state = set_registers(fresh_state, V2=0xFE, VF=0x09)

        state = execute(state, 0x7205, devices)

        assert state.V[2] == 0x03
        assert state.V[15] == 0x09

    def test_set_index(self, fresh_state, devices):
        state = execute(fresh_state, 0xA123, devices)
        assert state.I == 0x123

    def test_random_is_masked(self, fresh_state, devices):
        """CXKK - Result never has bits outside KK."""
        state = fresh_state
        for _ in range(20):
            state = execute(state, 0xC30F, devices)
            assert int(state.V[3]) & 0xF0 == 0

    def test_random_is_reproducible(self, devices):
        """Same seed, same sequence; the key advances on every use."""
        first = execute(create_state(), 0xC0FF, devices)
        second = execute(create_state(), 0xC0FF, devices)

        assert first.V[0] == second.V[0]
        assert not (first.rng == create_state().rng).all()


class TestTimers:
    """FX07, FX15, FX18."""

    def test_set_and_get_delay_timer(self, fresh_state, devices):
        state = set_registers(fresh_state, V4=0x3C)

        state = execute(state, 0xF415, devices)
        state = execute(state, 0xF507, devices)

        assert state.delay_timer == 0x3C
        assert state.V[5] == 0x3C

    def test_set_sound_timer(self, fresh_state, devices):
        state = set_registers(fresh_state, V6=0x10)
        state = execute(state, 0xF618, devices)
        assert state.sound_timer == 0x10


class TestIndexOperations:
    """FX1E, FX29, FX33."""

    def test_add_to_index(self, fresh_state, devices):
        """FX1E - No flag is set, even past 0xFFF."""
        state = set_registers(fresh_state, V1=0x10, VF=0x05)
        state = state.replace(I=state.I + 0xFF8)

        state = execute(state, 0xF11E, devices)

        assert state.I == 0x1008
        assert state.V[15] == 0x05

    def test_add_to_index_wraps_at_16_bits(self, fresh_state, devices):
        state = set_registers(fresh_state, V1=0x02)
        state = state.replace(I=state.I + 0xFFFF)

        state = execute(state, 0xF11E, devices)

        assert state.I == 0x0001

    @pytest.mark.parametrize("digit", [0x0, 0x7, 0xF])
    def test_font_character(self, fresh_state, devices, digit):
        """FX29 - I points at the five-byte glyph for VX."""
        state = set_registers(fresh_state, V2=digit)

        state = execute(state, 0xF229, devices)

        assert state.I == digit * 5
        start = int(state.I)
        assert (state.memory[start:start + 5] == FONT_DATA[digit * 5:digit * 5 + 5]).all()

    @pytest.mark.parametrize("value, digits", [(157, [1, 5, 7]), (0, [0, 0, 0]), (255, [2, 5, 5]), (42, [0, 4, 2])])
    def test_bcd_conversion(self, fresh_state, devices, value, digits):
        """FX33 - Hundreds, tens and units at I, I+1, I+2."""
        state = set_registers(fresh_state, V3=value)
        state = execute(state, 0xA300, devices)

        state = execute(state, 0xF333, devices)

        assert state.memory[0x300:0x303].tolist() == digits
        assert state.I == 0x300

    def test_bcd_past_end_of_memory(self, fresh_state, devices):
        state = set_registers(fresh_state, V3=123)
        state = execute(state, 0xAFFE, devices)

        with pytest.raises(MemoryAccessError):
            execute(state, 0xF333, devices)


class TestBulkTransfers:
    """FX55, FX65."""

    def test_store_registers_inclusive(self, fresh_state, devices):
        state = set_registers(fresh_state, V0=1, V1=2, V2=3, V3=4)
        state = execute(state, 0xA400, devices)

        state = execute(state, 0xF255, devices)

        assert state.memory[0x400:0x404].tolist() == [1, 2, 3, 0]
        assert state.I == 0x400

    def test_load_registers_inclusive(self, fresh_state, devices):
        state = setup_sprite_in_memory(fresh_state, 0x400, [9, 8, 7, 6])
        state = execute(state, 0xA400, devices)

        state = execute(state, 0xF265, devices)

        assert state.V[:4].tolist() == [9, 8, 7, 0]
        assert state.I == 0x400

    def test_store_then_load_all_registers(self, fresh_state, devices):
        state = set_registers(fresh_state, **{f"V{i:X}": i * 3 for i in range(16)})
        state = execute(state, 0xA500, devices)
        state = execute(state, 0xFF55, devices)
        state = state.replace(V=state.V * 0)

        state = execute(state, 0xFF65, devices)

        assert state.V.tolist() == [i * 3 for i in range(16)]

    def test_load_past_end_of_memory(self, fresh_state, devices):
        state = execute(fresh_state, 0xAFFC, devices)

        with pytest.raises(MemoryAccessError):
            execute(state, 0xF565, devices)

    def test_unassigned_misc_instruction_is_ignored(self, fresh_state, devices):
        state = execute(fresh_state, 0xF1FF, devices)
        assert state.pc == fresh_state.pc + 2
        assert (state.V == fresh_state.V).all()
