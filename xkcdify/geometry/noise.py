"""
Hand-tremor noise generation and smoothing.
"""

import math
from typing import Optional

import numpy as np
from scipy.signal import filtfilt

# Probability of a burst starting at any interior sample is 1 / BURST_ODDS.
BURST_ODDS = 10
MAX_BURST = 100
EDGE_FRACTION = 50

SMOOTH_COEF = 0.5
SMOOTH_PAD = 10


def generate_noise(n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generate a burst signal of signed unit steps separated by runs of zeros.

    A margin of ceil(n / 50) samples at each end is left at zero. Inside the
    margins every sample has a 1 in 10 chance of starting a burst: a run of
    random length (at most 100 samples, never crossing the end margin) set to
    either +1 or -1.

    Args:
        n: Number of samples, at least 1
        rng: Random generator, a fresh unseeded one is used when omitted

    Returns:
        Float array of length n with values in {-1, 0, 1}
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    rng = rng if rng is not None else np.random.default_rng()
    noise = np.zeros(n)

    margin = math.ceil(n / EDGE_FRACTION)
    end = n - margin

    i = margin
    while i < end:
        if rng.integers(1, BURST_ODDS + 1) == 1:
            sign = rng.choice([-1.0, 1.0])
            duration = int(rng.integers(1, min(end - i, MAX_BURST) + 1))
            noise[i:i + duration] = sign
            i += duration
        i += 1

    return noise


def smooth(values) -> np.ndarray:
    """
    Zero-phase low-pass filter used to round off the edges of burst noise.

    The signal is edge-padded, run twice through a forward-backward
    single-pole filter, then unpadded.
    """
    values = np.asarray(values, dtype=float).ravel()
    if values.size == 0:
        raise ValueError("Cannot smooth an empty sequence")

    b = [SMOOTH_COEF]
    a = [1.0, SMOOTH_COEF - 1.0]

    padded = np.pad(values, SMOOTH_PAD, mode="edge")
    padded = filtfilt(b, a, padded)
    padded = filtfilt(b, a, padded)

    return padded[SMOOTH_PAD:-SMOOTH_PAD]
