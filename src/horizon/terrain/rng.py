"""Deterministic 32-bit Lehmer-style random number generator.

Every draw in the generation pipeline goes through this generator so that a
seed reproduces the same world on any platform. All arithmetic wraps at 32
bits; ``next_int`` keeps the modulo bias of the raw draw.
"""

MASK_32 = 0xFFFFFFFF

_INCREMENT = 0xE120FC15
_MULTIPLIER_1 = 0x4A39B70D
_MULTIPLIER_2 = 0x12FAD5C9
_FLOAT_SCALE = 0x7FFFFFFF


class Lehmer32:
    """Bit generator with a single 32-bit state, advanced on every draw."""

    def __init__(self, seed: int = 0):
        self._state = seed & MASK_32

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def next_u32(self) -> int:
        """Advance the state and return the next raw 32-bit draw."""
        self._state = (self._state + _INCREMENT) & MASK_32
        product = self._state * _MULTIPLIER_1
        mixed = ((product >> 32) ^ product) & MASK_32
        product = mixed * _MULTIPLIER_2
        return ((product >> 32) ^ product) & MASK_32

    def next_int(self, minimum: int, maximum: int) -> int:
        """Return an int in [minimum, maximum) by reducing a raw draw modulo the span.

        Raises:
            ValueError: If maximum is not greater than minimum.
        """
        span = maximum - minimum
        if span <= 0:
            raise ValueError(f"Empty range [{minimum}, {maximum})")
        return self.next_u32() % span + minimum

    def next_float(self, minimum: float, maximum: float) -> float:
        """Return a float mapped into [minimum, maximum].

        The raw draw is scaled by 1/0x7FFFFFFF, so the scaled value can reach
        almost twice the span; a single wraparound by the span brings it back.
        """
        span = maximum - minimum
        value = (self.next_u32() / _FLOAT_SCALE) * span + minimum
        if value < minimum:
            value += span
        elif value > maximum:
            value -= span
        return value

    def next_bool(self) -> bool:
        """Return the low bit of a draw."""
        return bool(self.next_u32() & 1)
