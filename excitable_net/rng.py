"""Pseudo-random number generators used by the network simulations."""

from __future__ import annotations

import math

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


class Crandom:
    """64-bit generator combining an LCG, a xorshift and a multiply-with-carry."""

    __slots__ = ("_u", "_v", "_w")

    def __init__(self, seed):
        self._v = 4101842887655102017
        self._w = 1
        self._u = (seed & _MASK64) ^ self._v
        self.int64()
        self._v = self._u
        self.int64()
        self._w = self._v
        self.int64()

    def int64(self):
        """Return the next unsigned 64-bit integer."""
        u = (self._u * 2862933555777941757 + 7046029254386353087) & _MASK64
        v = self._v
        v ^= v >> 17
        v ^= (v << 31) & _MASK64
        v ^= v >> 8
        w = (4294957665 * (self._w & _MASK32) + (self._w >> 32)) & _MASK64
        x = u ^ ((u << 21) & _MASK64)
        x ^= x >> 35
        x ^= (x << 4) & _MASK64
        self._u, self._v, self._w = u, v, w
        return ((x + v) & _MASK64) ^ w

    def r(self):
        """Return a uniform double in [0, 1]."""
        return 5.42101086242752217e-20 * self.int64()

    def int32(self):
        """Return the low 32 bits of the next 64-bit value."""
        return self.int64() & _MASK32

    def exponential(self, tau):
        """Draw from an exponential distribution with mean ``tau``."""
        return -tau * math.log(self.r())

    def gauss(self, mu, sigma):
        """Draw from a normal distribution using the Box-Muller transform."""
        radius = math.sqrt(-2.0 * math.log(self.r()))
        return sigma * radius * math.cos(2.0 * math.pi * self.r()) + mu


class MT19937:
    """The 32-bit Mersenne Twister with the standard integer seeding."""

    _N = 624
    _M = 397

    def __init__(self, seed=5489):
        state = [seed & _MASK32]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self):
        mt = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (mt[i] & 0x80000000) | (mt[(i + 1) % n] & 0x7FFFFFFF)
            value = mt[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            mt[i] = value
        self._index = 0

    def next_u32(self):
        """Return the next tempered 32-bit output."""
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


class UniformReal:
    """Uniform real distribution over [low, high) driven by an MT19937."""

    def __init__(self, low=0.0, high=1.0):
        if not low <= high:
            raise ValueError(f"invalid range: low={low} > high={high}")
        self.low = float(low)
        self.high = float(high)

    def __call__(self, gen):
        first = float(gen.next_u32())
        second = float(gen.next_u32())
        canonical = (first + second * 4294967296.0) / 18446744073709551616.0
        if canonical >= 1.0:
            canonical = math.nextafter(1.0, 0.0)
        return canonical * (self.high - self.low) + self.low


class UniformInt:
    """Uniform integer distribution over [low, high] driven by an MT19937."""

    def __init__(self, low=0, high=_MASK32):
        if low > high:
            raise ValueError(f"invalid range: low={low} > high={high}")
        if high - low > _MASK32:
            raise ValueError("range wider than 32 bits is not supported")
        self.low = low
        self.high = high

    def __call__(self, gen):
        span = self.high - self.low
        if span == _MASK32:
            return self.low + gen.next_u32()
        width = span + 1
        product = gen.next_u32() * width
        low_bits = product & _MASK32
        if low_bits < width:
            threshold = ((1 << 32) - width) % width
            while low_bits < threshold:
                product = gen.next_u32() * width
                low_bits = product & _MASK32
        return self.low + (product >> 32)