"""Tests for the Lehmer32 generator."""

import pytest

from horizon.terrain.rng import MASK_32, Lehmer32


class TestNextU32:
    """Tests for raw 32-bit draws."""

    def test_reference_draws_seed_zero(self) -> None:
        """Seed 0 reproduces the reference sequence."""
        rng = Lehmer32(0)
        assert rng.next_u32() == 321050320
        assert rng.next_u32() == 2714922656

    def test_reference_draws_seed_42(self) -> None:
        """Seed 42 reproduces the reference sequence."""
        rng = Lehmer32(42)
        assert [rng.next_u32() for _ in range(3)] == [4177205028, 397355630, 2832440306]

    def test_state_advances_by_increment(self) -> None:
        """Each draw adds the fixed increment to the state, wrapping at 32 bits."""
        rng = Lehmer32(0xFFFFFFFF)
        rng.next_u32()
        assert rng.state == (0xFFFFFFFF + 0xE120FC15) & MASK_32

    def test_seed_reduced_to_32_bits(self) -> None:
        """Seeds beyond 32 bits alias their low 32 bits."""
        a = Lehmer32(2**32 + 5)
        b = Lehmer32(5)
        assert [a.next_u32() for _ in range(4)] == [b.next_u32() for _ in range(4)]

    def test_draws_fit_in_32_bits(self) -> None:
        """Every draw is an unsigned 32-bit value."""
        rng = Lehmer32(123)
        for _ in range(1000):
            assert 0 <= rng.next_u32() <= MASK_32

    def test_independent_instances_match(self) -> None:
        """Two generators with the same seed produce the same sequence."""
        a = Lehmer32(99)
        b = Lehmer32(99)
        assert [a.next_u32() for _ in range(50)] == [b.next_u32() for _ in range(50)]


class TestNextInt:
    """Tests for bounded integer draws."""

    def test_reference_values(self) -> None:
        """Ints are the raw draw modulo the span plus the minimum."""
        rng = Lehmer32(0)
        assert rng.next_int(0, 10) == 321050320 % 10
        assert rng.next_int(-45, 45) == -19

    def test_modulo_of_raw_draw(self) -> None:
        """next_int keeps the modulo bias of the raw draw."""
        raw = Lehmer32(17)
        bounded = Lehmer32(17)
        for _ in range(100):
            assert bounded.next_int(6, 14) == raw.next_u32() % 8 + 6

    def test_range_exclusive_upper(self) -> None:
        """Values fall in [min, max)."""
        rng = Lehmer32(5)
        values = {rng.next_int(0, 3) for _ in range(500)}
        assert values == {0, 1, 2}

    def test_empty_range_raises(self) -> None:
        """An empty range is rejected."""
        rng = Lehmer32(0)
        with pytest.raises(ValueError):
            rng.next_int(5, 5)


class TestNextFloat:
    """Tests for bounded float draws."""

    def test_reference_values(self) -> None:
        """Seed 0 reproduces the reference floats."""
        rng = Lehmer32(0)
        assert rng.next_float(0.0, 1.0) == 0.14950070537137833
        # raw / 0x7FFFFFFF exceeds 1 here, so one span is subtracted
        assert rng.next_float(0.0, 1.0) == 0.26423437952261164

    def test_wraparound_instead_of_clamp(self) -> None:
        """A scaled value past the maximum wraps by one span."""
        raw = Lehmer32(0)
        raw.next_u32()
        second = raw.next_u32()
        scaled = second / 0x7FFFFFFF * 2.0 + 200.0
        assert scaled > 202.0

        rng = Lehmer32(0)
        rng.next_u32()
        assert rng.next_float(200.0, 202.0) == scaled - 2.0

    def test_values_within_bounds(self) -> None:
        """Draws land within [min, max]."""
        rng = Lehmer32(2024)
        for _ in range(2000):
            value = rng.next_float(-3.0, 3.0)
            assert -3.0 <= value <= 3.0

    def test_degenerate_range(self) -> None:
        """A zero-width range returns the bound."""
        rng = Lehmer32(3)
        assert rng.next_float(4.0, 4.0) == 4.0


class TestNextBool:
    """Tests for boolean draws."""

    def test_low_bit(self) -> None:
        """Booleans are the low bit of each draw."""
        rng = Lehmer32(7)
        assert [rng.next_bool() for _ in range(8)] == [
            True, True, False, True, False, False, False, False
        ]

    def test_consumes_one_draw(self) -> None:
        """A boolean draw advances the state like any other draw."""
        a = Lehmer32(11)
        b = Lehmer32(11)
        a.next_bool()
        b.next_u32()
        assert a.state == b.state
