"""Второй уровень FKS — совершенное хеширование одной корзины."""

from typing import Optional, Sequence

import numpy as np

from construction import MAX_ATTEMPTS, find_hash_function, no_collisions
from hash_function import HashGenerator, LinearHash


class InnerSet:
    """
    Таблица на k^2 ячеек без коллизий.
    slots[i] — значение, occupied[i] — занята ли ячейка (массив Optional[int]).
    """

    def __init__(self, generator: HashGenerator, max_attempts: int = MAX_ATTEMPTS):
        self.generator = generator
        self.max_attempts = max_attempts
        self.hash: Optional[LinearHash] = None
        self.bucket_count = 0
        self.slots = np.zeros(0, dtype=np.int64)
        self.occupied = np.zeros(0, dtype=bool)
        self.n = 0

    def initialize(self, values: Sequence[int]) -> None:
        values = np.asarray(values, dtype=np.int64)
        k = len(values)
        if k == 0:
            # пустая корзина: ни хеша, ни взятия по модулю 0
            self.hash, self.bucket_count, self.n = None, 0, 0
            self.slots = np.zeros(0, dtype=np.int64)
            self.occupied = np.zeros(0, dtype=bool)
            return

        bucket_count = k * k
        hash_fn = find_hash_function(bucket_count, values, no_collisions,
                                     self.generator, self.max_attempts)
        slots = np.zeros(bucket_count, dtype=np.int64)
        occupied = np.zeros(bucket_count, dtype=bool)
        indices = hash_fn.buckets(values, bucket_count)
        slots[indices] = values
        occupied[indices] = True

        self.hash, self.bucket_count, self.n = hash_fn, bucket_count, k
        self.slots, self.occupied = slots, occupied

    def slot(self, value: int) -> int:
        if self.hash is None:
            raise ValueError("empty InnerSet has no slots")
        return self.hash.bucket(value, self.bucket_count)

    def contains(self, value: int) -> bool:
        if self.hash is None:
            return False
        i = self.slot(value)
        return bool(self.occupied[i]) and int(self.slots[i]) == value

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.n

    @property
    def size(self) -> int:
        """Количество ячеек (k^2)."""
        return self.bucket_count
