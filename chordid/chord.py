import logging

import numpy as np

from .chroma import check_band, pitch_class_energy, top_pitch_classes
from .config import A4_HZ, CHORD_THRESHOLD, FMAX, FMIN, MIN_BAND_RATIO, N_PITCH_CLASSES, PITCH_CLASSES, UNKNOWN

logger = logging.getLogger(__name__)

# root, major third, perfect fifth
MAJOR_TEMPLATE = np.array([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0])
# root, minor third, perfect fifth
MINOR_TEMPLATE = np.array([1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0])


def roll_template(template: np.ndarray, shift: int) -> np.ndarray:
    """Move a C-rooted template so that index 0 lands on ``shift``."""
    return np.roll(template, shift % N_PITCH_CLASSES)


def match_chord(chroma: np.ndarray, threshold: float = CHORD_THRESHOLD):
    chroma = np.asarray(chroma, dtype=np.float64)
    if chroma.shape != (N_PITCH_CLASSES,):
        raise ValueError(f"chroma must have shape ({N_PITCH_CLASSES},), got {chroma.shape}")

    best_score = 0.0
    best_root, best_quality = None, None
    for root in range(N_PITCH_CLASSES):
        for quality, template in (("major", MAJOR_TEMPLATE), ("minor", MINOR_TEMPLATE)):
            score = float(np.dot(chroma, roll_template(template, root)))
            # strict: ties keep the lower root, and major over minor
            if score > best_score:
                best_score, best_root, best_quality = score, root, quality

    if best_root is None or not best_score > threshold:
        logger.debug("best score %.3f does not clear threshold %.3f", best_score, threshold)
        return {"chord": UNKNOWN, "root": None, "quality": None, "score": best_score}

    return {
        "chord": f"{PITCH_CLASSES[best_root]} {best_quality}",
        "root": best_root,
        "quality": best_quality,
        "score": best_score,
    }


def estimate_chord(y: np.ndarray, sr: int, fmin: float = FMIN, fmax: float = FMAX,
                   threshold: float = CHORD_THRESHOLD, tuning: float = A4_HZ,
                   min_band_ratio: float = MIN_BAND_RATIO):
    if sr <= 0:
        raise ValueError(f"sample rate must be positive, got {sr}")
    check_band(fmin, fmax)
    y = np.asarray(y)
    if y.ndim != 1:
        raise ValueError(f"expected a mono 1-D buffer, got shape {y.shape}")

    if y.size == 0:
        logger.debug("empty buffer, skipping analysis")
        return {"chord": UNKNOWN, "root": None, "quality": None, "score": 0.0,
                "chroma": np.zeros(N_PITCH_CLASSES), "top_pitch_classes": []}

    logger.debug("analysing %d samples at %d Hz", y.size, sr)
    chroma = pitch_class_energy(y, sr, fmin=fmin, fmax=fmax, tuning=tuning, min_band_ratio=min_band_ratio)
    top = top_pitch_classes(chroma)
    logger.debug("strongest pitch classes: %s", ", ".join(top))

    result = match_chord(chroma, threshold=threshold)
    logger.debug("best hypothesis %s (score %.3f)", result["chord"], result["score"])
    result["chroma"] = chroma
    result["top_pitch_classes"] = top
    return result


def detect_chord(y: np.ndarray, sr: int, **kwargs) -> str:
    """Return just the chord label, e.g. ``"C major"`` or ``"Unknown"``."""
    return estimate_chord(y, sr, **kwargs)["chord"]
