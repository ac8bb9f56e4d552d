"""Galois field arithmetic and a Reed-Solomon error correction encoder."""

from __future__ import annotations

from typing import Sequence


class GaloisField:
    """A field GF(2^n) given by its primitive polynomial and size."""

    def __init__(self, primitive: int, size: int, generator_base: int) -> None:
        if size < 2 or size & (size - 1):
            raise ValueError(f"field size must be a power of two, got {size}")
        self.primitive = primitive
        self.size = size
        self.generator_base = generator_base
        self._exp = [0] * size
        self._log = [0] * size
        x = 1
        for i in range(size):
            self._exp[i] = x
            x <<= 1
            if x >= size:
                x = (x ^ primitive) & (size - 1)
        for i in range(size - 1):
            self._log[self._exp[i]] = i

    def _power(self, exponent: int) -> int:
        return self._exp[exponent % (self.size - 1)]

    def multiply(self, a: int, b: int) -> int:
        """The product of two field elements."""
        if a == 0 or b == 0:
            return 0
        return self._exp[(self._log[a] + self._log[b]) % (self.size - 1)]

    def inverse(self, a: int) -> int:
        """The multiplicative inverse of a non-zero field element."""
        if a == 0:
            raise ZeroDivisionError("zero has no inverse in a Galois field")
        return self._exp[(self.size - 1 - self._log[a]) % (self.size - 1)]


class ReedSolomonEncoder:
    """Computes Reed-Solomon check words over a Galois field."""

    def __init__(self, field: GaloisField) -> None:
        self.field = field
        self._generators: dict[int, list[int]] = {0: [1]}

    def _generator(self, degree: int) -> list[int]:
        """The generator polynomial of the given degree, highest term first."""
        cached = self._generators.get(degree)
        if cached is not None:
            return cached
        known = max(d for d in self._generators if d < degree)
        poly = self._generators[known]
        for d in range(known + 1, degree + 1):
            root = self.field._power(d - 1 + self.field.generator_base)
            nxt = poly + [0]
            for j in range(1, len(nxt)):
                nxt[j] ^= self.field.multiply(poly[j - 1], root)
            poly = nxt
            self._generators[d] = poly
        return poly

    def encode(self, data: Sequence[int], ecc_count: int) -> list[int]:
        """The ``ecc_count`` check words for ``data``."""
        if ecc_count < 0:
            raise ValueError("the number of check words can not be negative")
        generator = self._generator(ecc_count)
        remainder = list(data) + [0] * ecc_count
        for i in range(len(data)):
            coefficient = remainder[i]
            if coefficient:
                for j, g in enumerate(generator[1:], start=i + 1):
                    remainder[j] ^= self.field.multiply(g, coefficient)
        return remainder[len(data):]