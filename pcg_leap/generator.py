"""64-bit PCG-XSH-RR generator with O(log n) jump-ahead and restorable state."""

import logging
from typing import Iterable, Optional, Tuple, Union

from .models import DEFAULT_INCREMENT, DEFAULT_SEED, MULTIPLIER, RngState
from .wide import (
    MASK32,
    add64,
    join_u64,
    mul64,
    rotr32,
    split_u64,
    to_uint32,
    to_uint64,
)

logger = logging.getLogger(__name__)

U32_MAX = float(MASK32)


def jump_transform(multiplier: int, increment: int, distance: int) -> Tuple[int, int]:
    """Affine map ``(G, C)`` equivalent to ``distance`` LCG steps.

    ``state_after = G * state + C (mod 2**64)``. Built by right-to-left binary
    exponentiation, so the loop runs once per bit of the 64-bit distance.
    See Brown, "Random Number Generation with Arbitrary Strides" (1994).
    """
    distance = to_uint64(distance)
    acc_mult, acc_inc = 1, 0
    cur_mult, cur_inc = to_uint64(multiplier), to_uint64(increment)
    while distance:
        if distance & 1:
            acc_mult = mul64(cur_mult, acc_mult)
            acc_inc = add64(mul64(cur_mult, acc_inc), cur_inc)
        # cur_inc must see the multiplier before squaring.
        cur_inc = mul64(cur_inc, add64(cur_mult, 1))
        cur_mult = mul64(cur_mult, cur_mult)
        distance >>= 1
    return acc_mult, acc_inc


def xsh_rr(state: int) -> int:
    """PCG-XSH-RR output function: ``rotr32((s ^ (s >> 18)) >> 27, s >> 59)``."""
    shifted = ((state ^ (state >> 18)) >> 27) & MASK32
    return rotr32(shifted, state >> 59)


class Generator:
    """Deterministic PCG generator over a single 64-bit LCG stream.

    Every integer argument is reduced modulo 2**64 (or 2**32 for halves), so
    negative values are read as their two's-complement bit patterns. A
    generator mutates itself on every draw and does no locking: share one
    instance between threads only behind an external lock.
    """

    def __init__(self, seed: int = DEFAULT_SEED, increment: int = DEFAULT_INCREMENT) -> None:
        self._multiplier = MULTIPLIER
        self._increment = to_uint64(increment)
        self._seed = to_uint64(seed)
        self._state = self._seed
        self._step_count = 0

    def __repr__(self) -> str:
        return (
            f"Generator(seed={self._seed:#018x}, increment={self._increment:#018x}, "
            f"step_count={self._step_count})"
        )

    def __iter__(self) -> "Generator":
        return self

    def __next__(self) -> float:
        return self.next_number()

    # ------------------------------------------------------------------
    # Read-only views

    @property
    def state(self) -> int:
        return self._state

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def increment(self) -> int:
        return self._increment

    @property
    def step_count(self) -> int:
        return self._step_count

    # ------------------------------------------------------------------
    # Core engine

    def step(self) -> None:
        self._state = add64(mul64(self._state, self._multiplier), self._increment)
        self._step_count = add64(self._step_count, 1)

    def fast_forward(self, distance: int) -> None:
        """Advance by ``distance`` steps in at most 64 doublings.

        Distances are taken modulo 2**64; with the fixed multiplier the full
        period is 2**64, so a negative distance rewinds the generator.
        """
        distance = to_uint64(distance)
        if not distance:
            return
        g, c = jump_transform(self._multiplier, self._increment, distance)
        self._state = add64(mul64(g, self._state), c)
        self._step_count = add64(self._step_count, distance)
        logger.debug("jumped %d steps, step_count=%d", distance, self._step_count)

    def output_u32(self) -> int:
        """32-bit output for the current state, without stepping."""
        return xsh_rr(self._state)

    def extract_output(self) -> float:
        """Current output scaled onto the closed interval [0, 1]."""
        return self.output_u32() / U32_MAX

    # ------------------------------------------------------------------
    # Draws

    def next_number(self) -> float:
        self.step()
        return self.extract_output()

    random = next_number

    def next_u32(self) -> int:
        self.step()
        return self.output_u32()

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b; 1.0 is reachable so clamp the top bucket
        span = b - a + 1
        return a + min(int(self.next_number() * span), span - 1)

    def nth_skip(self, n: int = 1) -> float:
        """Jump ``n`` steps and return the output there; ``n=1`` matches ``next_number``."""
        self.fast_forward(n)
        return self.extract_output()

    def nth_number(self, n: int = 0) -> float:
        """Output after exactly ``n`` steps from the seed, independent of position."""
        self._reset()
        self.extract_output()  # discarded; the transform does not step
        return self.nth_skip(n)

    # ------------------------------------------------------------------
    # Session API

    def _reset(self) -> None:
        self._state, self._step_count = self._seed, 0

    def get_seed(self) -> int:
        return self._seed

    def set_seed(self, seed: Optional[int] = None) -> None:
        """Replace the seed (``None`` keeps it) and rewind to step 0."""
        if seed is not None:
            self._seed = to_uint64(seed)
        self._reset()
        logger.debug("reseeded to %#018x", self._seed)

    def get_seed_halves(self) -> Tuple[int, int]:
        return split_u64(self._seed)

    def set_seed_halves(self, low: Optional[int] = None, high: Optional[int] = None) -> None:
        """Replace either 32-bit half of the seed; ``None`` keeps that half."""
        cur_low, cur_high = split_u64(self._seed)
        self.set_seed(
            join_u64(
                cur_low if low is None else to_uint32(low),
                cur_high if high is None else to_uint32(high),
            )
        )

    def get_incrementer(self) -> int:
        return self._increment

    def set_incrementer(self, increment: Optional[int] = None) -> None:
        """Replace the increment for subsequent steps; state and counter are kept."""
        if increment is not None:
            self._increment = to_uint64(increment)

    def get_state_count(self) -> int:
        return self._step_count

    def set_state_count(self, count: int = 0) -> None:
        """Reposition to ``count`` steps after the seed."""
        self._reset()
        self.fast_forward(count)

    def save_state(self) -> RngState:
        return RngState(self._seed, self._step_count, self._increment)

    def load_state(self, bundle: Union[RngState, Iterable[int]]) -> None:
        if not isinstance(bundle, RngState):
            bundle = RngState.from_tuple(bundle)
        self._seed = bundle.seed
        self._increment = bundle.increment
        self.set_state_count(bundle.step_count)
        logger.debug("loaded state %s", bundle)

    @classmethod
    def from_state(cls, bundle: Union[RngState, Iterable[int]]) -> "Generator":
        gen = cls()
        gen.load_state(bundle)
        return gen

    def copy(self) -> "Generator":
        twin = Generator(self._seed, self._increment)
        twin._state = self._state
        twin._step_count = self._step_count
        return twin


__all__ = ["Generator", "jump_transform", "xsh_rr"]
