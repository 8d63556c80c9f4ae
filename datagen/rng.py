import math
from typing import Callable, Union

UINT32_MASK = 0xFFFFFFFF
UINT32_SCALE = 4294967296.0
MULBERRY_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply, result as an unsigned 32-bit value."""
    return (a * b) & UINT32_MASK


class Mulberry32:
    """
    Small seeded generator for reproducible datasets (Mulberry32).

    Not suitable for anything security related: the whole state is a single
    32-bit counter.
    """

    def __init__(self, seed: int):
        self.seed = int(seed) & UINT32_MASK
        self._state = self.seed

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        self._state = (self._state + MULBERRY_INCREMENT) & UINT32_MASK
        t = self._state
        r = _imul(t ^ (t >> 15), 1 | t)
        r ^= (r + _imul(r ^ (r >> 7), 61 | r)) & UINT32_MASK
        return ((r ^ (r >> 14)) & UINT32_MASK) / UINT32_SCALE

    __call__ = random


UniformSource = Union[Mulberry32, Callable[[], float]]


def randn(rng: UniformSource) -> float:
    """
    Draw one standard normal value with the Box-Muller transform.

    Both uniforms are redrawn while they are exactly zero so that log(0) is
    never taken.
    """
    u = 0.0
    v = 0.0
    while u == 0.0:
        u = rng()
    while v == 0.0:
        v = rng()
    mag = math.sqrt(-2.0 * math.log(u))
    return mag * math.cos(2.0 * math.pi * v)
