#!/usr/bin/env python3
"""Example: running mean and variance over a synthetic stream.

Feeds an AR(1) process one value at a time into the incrementors and
compares the result with batch NumPy statistics.
"""

import numpy as np
from ml_math import MeanIncrementor, VarianceIncrementor


def generate_stream(n_samples=1000, phi=0.8, noise_std=0.5, seed=42):
    """Generate an AR(1) series."""
    rng = np.random.default_rng(seed)
    ts = [0.0]
    for _ in range(n_samples - 1):
        ts.append(phi * ts[-1] + rng.normal(0, noise_std))
    return np.array(ts)


def main():
    stream = generate_stream()

    mean_inc = MeanIncrementor()
    var_inc = VarianceIncrementor()
    var_inc32 = VarianceIncrementor(dtype=np.float32)

    for t, x in enumerate(stream):
        mean_inc.add(x)
        var_inc.add(x)
        var_inc32.add(x)
        if (t + 1) % 250 == 0:
            print(f"t={t + 1:5d}  {var_inc}")

    print(f"\n{mean_inc}")
    print(f"batch mean:        {stream.mean():.6f}")
    print(f"batch variance:    {stream.var(ddof=1):.6f}")
    print(f"float32 variance:  {var_inc32.variance:.6f}")


if __name__ == "__main__":
    main()
