"""Fixed Set — статическое множество целых с O(1) поиском (схема FKS)."""

import logging
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np

from construction import MAX_ATTEMPTS, find_hash_function, split, sum_of_squares_at_most
from hash_function import INT_MAX, INT_MIN, HashGenerator, LinearHash
from inner_set import InnerSet

logger = logging.getLogger(__name__)


@dataclass
class FixedSetConfig:
    max_attempts: int = MAX_ATTEMPTS  # попыток на каждый поиск хеш-функции
    seed: Optional[int] = None        # None — случайный seed из системной энтропии

    def __post_init__(self):
        if self.max_attempts <= 0:
            raise ValueError("max_attempts must be positive")


class FixedSet:
    """
    Двухуровневое совершенное хеширование.
    Верхний уровень: n корзин, sum(k_i^2) <= 2n.
    Второй уровень: InnerSet на k_i^2 ячеек без коллизий.
    Дубликаты схлопываются при initialize.
    """

    def __init__(self, config: Optional[FixedSetConfig] = None,
                 generator: Optional[HashGenerator] = None):
        self.config = config or FixedSetConfig()
        self.generator = generator or HashGenerator(self.config.seed)
        self._reset()

    def _reset(self) -> None:
        self.hash: Optional[LinearHash] = None
        self.bucket_count = 0
        self.buckets: List[InnerSet] = []
        self.n = 0

    def initialize(self, values: Iterable[int]) -> None:
        """Построение за ожидаемое O(n). Повторный вызов перестраивает множество."""
        self._reset()
        unique = np.unique(np.asarray(self._validate(values), dtype=np.int64))
        n = len(unique)
        if n == 0:
            logger.info("built empty FixedSet")
            return

        hash_fn = find_hash_function(n, unique, sum_of_squares_at_most(2 * n),
                                     self.generator, self.config.max_attempts)
        buckets = []
        for part in split(hash_fn, unique, n):
            inner = InnerSet(self.generator, self.config.max_attempts)
            inner.initialize(part)
            buckets.append(inner)

        self.hash, self.bucket_count, self.buckets, self.n = hash_fn, n, buckets, n
        logger.info("built FixedSet: %d elements, %d buckets, %d slots",
                    n, n, self.space)

    @staticmethod
    def _validate(values: Iterable[int]) -> List[int]:
        checked = []
        for v in values:
            v = operator.index(v)
            if not INT_MIN <= v <= INT_MAX:
                raise ValueError(f"{v} is outside the 32-bit signed range")
            checked.append(v)
        return checked

    def contains(self, value: int) -> bool:
        """O(1) в худшем случае: два хеша и одно сравнение."""
        value = operator.index(value)
        if self.hash is None or not INT_MIN <= value <= INT_MAX:
            return False
        return self.buckets[self.hash.bucket(value, self.bucket_count)].contains(value)

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[int]:
        for inner in self.buckets:
            yield from (int(v) for v in inner.slots[inner.occupied])

    def bucket_sizes(self) -> np.ndarray:
        """Заполненность корзин верхнего уровня."""
        return np.array([len(inner) for inner in self.buckets], dtype=np.int64)

    @property
    def space(self) -> int:
        """Суммарное число ячеек второго уровня: sum(k_i^2)."""
        return sum(inner.size for inner in self.buckets)

    @property
    def load_factor(self) -> float:
        if self.space == 0:
            return 0.0
        return self.n / self.space

    def __repr__(self) -> str:
        return f"FixedSet(n={self.n}, buckets={self.bucket_count}, slots={self.space})"
