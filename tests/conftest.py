"""Synthetic signal helpers shared by the test suite."""

import numpy as np
import pytest

SR = 44100


def _tones(freqs, sr=SR, seconds=1.0):
    t = np.arange(int(sr * seconds)) / sr
    y = sum(np.sin(2 * np.pi * f * t) for f in freqs)
    return y / len(freqs)


@pytest.fixture
def tones():
    """Equal-amplitude sum of sines, peak-bounded to [-1, 1]."""
    return _tones
