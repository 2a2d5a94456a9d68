"""Аффинные хеш-функции h(x) = (a*x + b) mod p и их генератор."""

import operator
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

PRIME = 2**61 - 1  # простое Мерсенна, больше ширины домена 2^32

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class LinearHash:
    """Хеш-функция из универсального семейства (a*x + b) mod p."""

    a: int  # коэффициент, 1 <= a < p
    b: int  # сдвиг, 0 <= b < p
    p: int = PRIME

    def __post_init__(self):
        if not 1 <= self.a < self.p:
            raise ValueError(f"coefficient must be in [1, {self.p - 1}], got {self.a}")
        if not 0 <= self.b < self.p:
            raise ValueError(f"bias must be in [0, {self.p - 1}], got {self.b}")

    def __call__(self, value: int) -> int:
        # int в Python без переполнения, % всегда неотрицателен
        return (self.a * operator.index(value) + self.b) % self.p

    def bucket(self, value: int, bucket_count: int) -> int:
        """Номер корзины: h(x) mod m."""
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        return self(value) % bucket_count

    def buckets(self, values: Iterable[int], bucket_count: int) -> np.ndarray:
        """Номера корзин для всей коллекции сразу."""
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        a, b, p = self.a, self.b, self.p
        return np.fromiter(
            ((a * int(v) + b) % p % bucket_count for v in values),
            dtype=np.int64,
        )


class HashGenerator:
    """Источник случайных LinearHash. seed=None — энтропия системы."""

    def __init__(self, seed: Optional[int] = None, p: int = PRIME):
        self.p = p
        self.rng = np.random.default_rng(seed)
        self.generated = 0

    def generate(self) -> LinearHash:
        a = int(self.rng.integers(1, self.p))
        b = int(self.rng.integers(0, self.p))
        self.generated += 1
        return LinearHash(a, b, self.p)
