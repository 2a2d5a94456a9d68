"""Рандомизированный поиск хеш-функции — общий для обоих уровней FKS."""

import logging
from typing import Callable, List, Sequence

import numpy as np

from hash_function import HashGenerator, LinearHash

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 1000

Criterion = Callable[[np.ndarray], bool]


class BadHashFunction(RuntimeError):
    """Ни одна из max_attempts хеш-функций не прошла критерий."""

    def __init__(self, bucket_count: int, attempts: int):
        super().__init__(
            f"Bad hash function: no candidate accepted for {bucket_count} buckets "
            f"after {attempts} attempts"
        )
        self.bucket_count = bucket_count
        self.attempts = attempts


def occupancy(hash_fn: LinearHash, values: Sequence[int], bucket_count: int) -> np.ndarray:
    """Заполненность корзин: сколько элементов попало в каждую."""
    return np.bincount(hash_fn.buckets(values, bucket_count), minlength=bucket_count)


def sum_of_squares_at_most(limit: int) -> Criterion:
    """Критерий верхнего уровня: sum(c^2) <= limit."""
    def criterion(counts: np.ndarray) -> bool:
        return int(np.sum(counts.astype(np.int64) ** 2)) <= limit
    return criterion


def no_collisions(counts: np.ndarray) -> bool:
    """Критерий второго уровня: в каждой ячейке не больше одного элемента."""
    return counts.size == 0 or int(counts.max()) <= 1


def find_hash_function(bucket_count: int,
                       values: Sequence[int],
                       criterion: Criterion,
                       generator: HashGenerator,
                       max_attempts: int = MAX_ATTEMPTS) -> LinearHash:
    """
    Перебирает случайные хеш-функции, пока заполненность корзин
    не удовлетворит criterion. Ожидаемое число попыток O(1).
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    for attempt in range(1, max_attempts + 1):
        candidate = generator.generate()
        if criterion(occupancy(candidate, values, bucket_count)):
            logger.debug("accepted %s for %d values in %d buckets after %d attempt(s)",
                         candidate, len(values), bucket_count, attempt)
            return candidate

    logger.warning("no hash function accepted for %d values in %d buckets (%d attempts)",
                   len(values), bucket_count, max_attempts)
    raise BadHashFunction(bucket_count, max_attempts)


def split(hash_fn: LinearHash, values: Sequence[int], bucket_count: int) -> List[np.ndarray]:
    """Раскладывает значения по корзинам, порядок внутри корзины сохраняется."""
    values = np.asarray(values, dtype=np.int64)
    indices = hash_fn.buckets(values, bucket_count)
    order = np.argsort(indices, kind="stable")
    bounds = np.cumsum(np.bincount(indices, minlength=bucket_count))[:-1]
    return np.split(values[order], bounds)
