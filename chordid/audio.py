import logging
from typing import Optional, Tuple

import librosa
import numpy as np

logger = logging.getLogger(__name__)


def load_audio(path: str, sr: Optional[int] = None, mono: bool = True, offset: float = 0.0,
               duration: Optional[float] = None) -> Tuple[np.ndarray, int]:
    """Decode ``path`` into a 1-D float buffer in [-1, 1] and its sample rate.

    ``sr=None`` keeps the file's native rate. Decoding errors from librosa
    propagate unchanged.
    """
    y, native_sr = librosa.load(path, sr=sr, mono=mono, offset=offset, duration=duration)
    if y.ndim > 1:
        y = np.mean(y, axis=0)
    logger.debug("decoded %s: %d samples at %d Hz", path, y.shape[-1], native_sr)
    return np.ascontiguousarray(y, dtype=np.float32), int(native_sr)
