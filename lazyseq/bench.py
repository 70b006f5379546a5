import time
import numpy as np
import pandas as pd
from .types import *


def random_array(size: int, seed: Optional[int] = None, high: int = 1_000_000) -> List[int]:
    """random integers in [0, high), as native python ints"""
    rng = np.random.default_rng(seed)
    return rng.integers(0, high, size=size).tolist()


def bench(prepare: Callable[[int], T], operation: Callable[[T], Any], iterations: int = 10) -> float:
    """
    runs operation `iterations` times and returns its mean duration in seconds.

    prepare receives the iteration number and builds the operation's input;
    only the operation itself is timed.
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    times = []
    for i in range(iterations):
        inp = prepare(i)
        start = time.perf_counter()
        operation(inp)
        times.append(time.perf_counter() - start)
    return float(np.mean(times))


def compare(cases: Dict[str, Tuple[Callable[[int], Any], Callable[[Any], Any]]],
            iterations: int = 10) -> pd.DataFrame:
    """benchmark several (prepare, operation) pairs; one row per case, fastest first"""
    rows = [{'case': name, 'mean_seconds': bench(prepare, operation, iterations)}
            for name, (prepare, operation) in cases.items()]
    return pd.DataFrame(rows).sort_values('mean_seconds').reset_index(drop=True)
