import logging

import numpy as np

logger = logging.getLogger(__name__)


def hann_window(n: int) -> np.ndarray:
    """Periodic Hann window: w[i] = 0.5 - 0.5*cos(2*pi*i/n)."""
    if n < 1:
        raise ValueError(f"window length must be at least 1, got {n}")
    i = np.arange(n, dtype=np.float64)
    return 0.5 - 0.5 * np.cos(2.0 * np.pi * i / n)


def spectrum(y: np.ndarray) -> np.ndarray:
    """Window the buffer and return its full, unscaled n-point DFT.

    The input array is left untouched. numpy's FFT handles any length,
    including primes, in O(n log n).
    """
    y = np.asarray(y, dtype=np.float64)
    n = y.shape[0]
    windowed = y * hann_window(n)
    logger.debug("fft over %d samples", n)
    return np.fft.fft(windowed)
