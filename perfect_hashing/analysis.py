"""Эксперименты: число попыток построения, расход памяти, равномерность корзин."""

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from scipy import stats
from tqdm import tqdm

from construction import occupancy
from fixed_set import FixedSet
from hash_function import INT_MAX, INT_MIN, HashGenerator


def generate_dataset(size: int, seed: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    # members и non_members гарантированно не пересекаются
    rng = np.random.default_rng(seed)
    pool = np.unique(rng.integers(INT_MIN, INT_MAX, size=4 * size + 16, endpoint=True))
    while len(pool) < 2 * size:
        extra = rng.integers(INT_MIN, INT_MAX, size=2 * size, endpoint=True)
        pool = np.unique(np.concatenate([pool, extra]))
    pool = rng.permutation(pool)
    return pool[:size], pool[size:2 * size]


def measure_construction(sizes: List[int], trials: int = 20) -> np.ndarray:
    """
    Для каждого n: [среднее число сгенерированных хешей,
                    среднее число отклонённых кандидатов, sum(k^2) / n].
    """
    results = np.zeros((len(sizes), 3))
    for i, n in enumerate(sizes):
        generated, retries, ratios = [], [], []
        for trial in tqdm(range(trials), desc=f"n={n}", leave=False):
            members, _ = generate_dataset(n, seed=trial)
            generator = HashGenerator(seed=trial)
            fs = FixedSet(generator=generator)
            fs.initialize(members)
            nonempty = int(np.count_nonzero(fs.bucket_sizes()))
            generated.append(generator.generated)
            # минимум: один хеш сверху и по одному на непустую корзину
            retries.append(generator.generated - 1 - nonempty)
            ratios.append(fs.space / n)
        results[i] = [np.mean(generated), np.mean(retries), np.mean(ratios)]
    return results


def bucket_uniformity(n: int = 10000, seed: int = 0) -> Tuple[float, float]:
    """Хи-квадрат: равномерны ли корзины верхнего уровня для случайного хеша."""
    members, _ = generate_dataset(n, seed=seed)
    bucket_count = max(1, n // 10)
    counts = occupancy(HashGenerator(seed).generate(), members, bucket_count)
    chi2, p_value = stats.chisquare(counts)
    return float(chi2), float(p_value)


def plot_construction(sizes: List[int], results: np.ndarray, path: str = "fks_construction.png"):
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle("FKS Fixed Set: построение", fontsize=14)

    ax = axes[0]
    ax.plot(sizes, results[:, 0] / np.array(sizes), 'o-', color='steelblue',
            label='хешей на элемент')
    ax.set_xlabel("n")
    ax.set_ylabel("попыток / n")
    ax.set_xscale('log')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(sizes, results[:, 2], 's-', color='tomato', label='sum(k^2) / n')
    ax.axhline(2.0, color='gray', linestyle='--', alpha=0.7, label='граница 2n')
    ax.set_xlabel("n")
    ax.set_ylabel("ячеек / n")
    ax.set_xscale('log')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(path, dpi=300)
    print(f"Сохранено: {path}")


if __name__ == "__main__":
    sizes = [10, 100, 1000, 10000]

    print("Running construction analysis...")
    res = measure_construction(sizes, trials=10)
    for n, (gen, rej, ratio) in zip(sizes, res):
        print(f"n={n:6d} | hashes={gen:9.1f} | rejected={rej:8.1f} | space={ratio:.3f}n")
    plot_construction(sizes, res)

    chi2, p = bucket_uniformity()
    print(f"\nChi-square uniformity: chi2={chi2:.2f}, p={p:.4f}")
