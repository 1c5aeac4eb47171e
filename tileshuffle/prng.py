"""Deterministic string-seeded random stream.

This is the ARC4 generator used by the JavaScript ``seedrandom`` library.
Scrambled images are produced in the browser with that library, so every
float drawn here has to match it exactly for a given seed.
"""

from __future__ import annotations

from typing import Callable, List

from .errors import ConfigurationError

WIDTH = 256
CHUNKS = 6
DIGITS = 52
MASK = WIDTH - 1
START_DENOM = WIDTH**CHUNKS
SIGNIFICANCE = 2**DIGITS
OVERFLOW = SIGNIFICANCE * 2


def _utf16_units(text: str) -> List[int]:
    """Return the UTF-16 code units of `text` (JavaScript charCodeAt values)."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def mix_key(seed: str) -> List[int]:
    """Fold the seed string into an ARC4 key of at most 256 bytes."""
    key: List[int] = []
    smear = 0
    for j, code in enumerate(_utf16_units(seed)):
        slot = j & MASK
        current = key[slot] if slot < len(key) else 0
        smear ^= current * 19
        value = MASK & (smear + code)
        if slot < len(key):
            key[slot] = value
        else:
            key.append(value)
    return key


class ARC4:
    """RC4 keystream with the first 256 bytes dropped."""

    def __init__(self, key: List[int]) -> None:
        if not key:
            key = [0]
        s = list(range(WIDTH))
        j = 0
        for i in range(WIDTH):
            t = s[i]
            j = MASK & (j + key[i % len(key)] + t)
            s[i] = s[j]
            s[j] = t
        self.i = 0
        self.j = 0
        self.state = s
        self.next_int(WIDTH)

    def next_int(self, count: int) -> int:
        """Consume `count` keystream bytes and return them as one big-endian integer."""
        r = 0
        i, j, s = self.i, self.j, self.state
        for _ in range(count):
            i = MASK & (i + 1)
            t = s[i]
            j = MASK & (j + t)
            s[i] = s[j]
            s[j] = t
            r = r * WIDTH + s[MASK & (s[i] + t)]
        self.i, self.j = i, j
        return r


class SeedRandom:
    """Callable producing uniform floats in ``[0, 1)`` from a string seed."""

    def __init__(self, seed: str) -> None:
        if not isinstance(seed, str):
            raise ConfigurationError(f"seed must be a string, got {type(seed).__name__}")
        self.seed = seed
        self._arc4 = ARC4(mix_key(seed))

    def __call__(self) -> float:
        n = self._arc4.next_int(CHUNKS)
        d = START_DENOM
        x = 0
        # Top up until there are 52 bits of significance.
        while n < SIGNIFICANCE:
            n = (n + x) * WIDTH
            d *= WIDTH
            x = self._arc4.next_int(1)
        # Shed bits so the result fits a double exactly.
        while n >= OVERFLOW:
            n //= 2
            d //= 2
            x >>= 1
        return (n + x) / d


def make_stream(seed: str) -> Callable[[], float]:
    """Return a fresh generator for `seed`."""
    return SeedRandom(seed)
