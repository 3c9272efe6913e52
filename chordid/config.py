"""Policy constants shared by the analysis modules.

All values can be overridden per call through keyword arguments.
"""

from typing import Final, List

PITCH_CLASSES: Final[List[str]] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
N_PITCH_CLASSES: Final[int] = 12

A4_HZ: Final[float] = 440.0
"""Reference tuning for the frequency to pitch mapping."""

A4_MIDI: Final[int] = 69

FMIN: Final[float] = 70.0
"""Lowest analysed frequency in Hz. Rejects sub-bass rumble."""

FMAX: Final[float] = 1500.0
"""Highest analysed frequency in Hz. Rejects upper harmonics and noise."""

CHORD_THRESHOLD: Final[float] = 0.4
"""A template score must exceed this to produce a chord label."""

TOP_PITCH_CLASSES: Final[int] = 3

UNKNOWN: Final[str] = "Unknown"

MIN_BAND_RATIO: Final[float] = 1e-9
"""Strongest chroma bin relative to the strongest spectral bin below which
the band counts as silent. Sits just above FFT round-off (~1e-12), so only
numerical residue from out-of-band tones is discarded."""
