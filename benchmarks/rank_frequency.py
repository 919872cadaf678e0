import random
from typing import Any

import matplotlib.pyplot as plt
import numpy as np

from zipfdist import ZipfDistribution, ZipfTableDistribution

plt.style.use("ggplot")

N = 1000
DRAWS = 200000
PARAMS = [(0.9999, 0.0), (1.0, 0.0), (1.5, 0.0), (1.5, 10.0), (2.0, 0.0)]


def frequencies(dist: Any, seed: int) -> np.ndarray:
    rng = random.Random(seed)
    counts = np.bincount(dist.sample(rng, DRAWS), minlength=N + 1)[1:]
    return counts / DRAWS


def plot(ax: Any, s: float, q: float) -> None:
    ranks = np.arange(1, N + 1)
    pmf = ZipfTableDistribution(N, s, q).probabilities()[1:]
    ax.loglog(ranks, pmf, "k-", label="exact")
    for name, dist, marker in [
        ("rejection-inversion", ZipfDistribution(N, s, q), "+"),
        ("table", ZipfTableDistribution(N, s, q), "."),
    ]:
        freq = frequencies(dist, 1)
        nonzero = freq > 0
        ax.loglog(ranks[nonzero], freq[nonzero], marker, alpha=0.6, label=name)
    ax.set_title(f"s={s} q={q}")
    ax.set_xlabel("rank")
    ax.set_ylabel("frequency")
    ax.legend()


def main() -> None:
    fig, axes = plt.subplots(1, len(PARAMS), figsize=(6 * len(PARAMS), 5))
    for ax, (s, q) in zip(axes, PARAMS):
        plot(ax, s, q)
    fig.tight_layout()
    fig.savefig("benchmarks/rank_frequency.png")
    print("saved benchmarks/rank_frequency.png")


main()
