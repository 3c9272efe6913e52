import logging
from typing import List

import numpy as np

from .config import (A4_HZ, A4_MIDI, FMAX, FMIN, MIN_BAND_RATIO, N_PITCH_CLASSES, PITCH_CLASSES,
                     TOP_PITCH_CLASSES)
from .spectrum import spectrum

logger = logging.getLogger(__name__)


def freq_to_pitch(freq, tuning: float = A4_HZ):
    """Map a frequency in Hz (scalar or array) to its pitch class 0-11.

    Only defined for positive frequencies.
    """
    midi = A4_MIDI + 12.0 * np.log2(np.asarray(freq, dtype=np.float64) / tuning)
    # half away from zero, not numpy's half-to-even
    note = np.trunc(midi + np.copysign(0.5, midi)).astype(np.int64)
    pitch_class = ((note % N_PITCH_CLASSES) + N_PITCH_CLASSES) % N_PITCH_CLASSES
    if pitch_class.ndim == 0:
        return int(pitch_class)
    return pitch_class


def check_band(fmin: float, fmax: float) -> None:
    if fmin <= 0:
        raise ValueError(f"fmin must be positive, got {fmin}")
    if fmin > fmax:
        raise ValueError(f"fmin ({fmin}) must not exceed fmax ({fmax})")


def pitch_class_energy(y: np.ndarray, sr: int, fmin: float = FMIN, fmax: float = FMAX, tuning: float = A4_HZ,
                       min_band_ratio: float = MIN_BAND_RATIO) -> np.ndarray:
    """Fold the magnitude spectrum of ``y`` into a 12-bin chroma vector.

    Bins below ``n // 2`` whose centre frequency lies in ``[fmin, fmax]`` add
    their magnitude to the pitch class of that frequency. The result is scaled
    so its largest entry is 1.0, or left all-zero when nothing landed in band.
    In-band energy weaker than ``min_band_ratio`` times the strongest bin of
    the whole spectrum counts as nothing.
    """
    check_band(fmin, fmax)
    chroma = np.zeros(N_PITCH_CLASSES, dtype=np.float64)
    n = len(y)
    if n == 0:
        return chroma

    X = spectrum(y)
    k = np.arange(n // 2)
    freqs = k * float(sr) / n
    in_band = (freqs >= fmin) & (freqs <= fmax)
    logger.debug("%d of %d bins inside %.1f-%.1f Hz", int(in_band.sum()), k.size, fmin, fmax)
    if not in_band.any():
        return chroma

    mags = np.abs(X[k[in_band]])
    classes = freq_to_pitch(freqs[in_band], tuning=tuning)
    chroma += np.bincount(classes, weights=mags, minlength=N_PITCH_CLASSES)

    max_val = chroma.max()
    peak = np.abs(X[: n // 2]).max()
    if max_val <= min_band_ratio * peak:
        logger.debug("in-band energy %.3g is below the noise floor", max_val)
        return np.zeros(N_PITCH_CLASSES, dtype=np.float64)
    chroma /= max_val
    return chroma


def top_pitch_classes(chroma: np.ndarray, count: int = TOP_PITCH_CLASSES) -> List[str]:
    chroma = np.asarray(chroma)
    if not chroma.any():
        return []
    order = np.argsort(-chroma, kind="stable")
    return [PITCH_CLASSES[int(i)] for i in order[:count]]
