"""Reverse chord lookup.

Given a set of pitch classes, find every chord symbol whose pitch-class
set contains all of them. Each (root, quality) pair of the vocabulary is
precomputed as a 12-bin chroma template; matching is a vectorized
containment test over the template matrix.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np

from chord_voicer.pitch_class import PITCH_CLASS_NAMES
from chord_voicer.vocabulary import CHORD_PATTERNS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import NDArray

DEFAULT_MIN_MATCH_SIZE = 2


@lru_cache(maxsize=1)
def chord_templates() -> tuple[tuple[str, ...], NDArray[np.bool_]]:
    """Build the chroma template of every root and quality.

    Rows are enumerated root first (C to B), then quality in vocabulary
    order.

    Returns
    -------
    tuple[tuple[str, ...], NDArray[np.bool_]]
        Chord symbols and the matching boolean matrix of shape
        ``(12 * n_qualities, 12)``. The matrix is read-only.

    Examples
    --------
    >>> symbols, templates = chord_templates()
    >>> templates.shape == (12 * len(CHORD_PATTERNS), 12)
    True
    >>> symbols[0]
    'C'
    """
    symbols: list[str] = []
    templates = np.zeros((12 * len(CHORD_PATTERNS), 12), dtype=np.bool_)

    row = 0
    for root, root_name in enumerate(PITCH_CLASS_NAMES):
        for quality, pattern in CHORD_PATTERNS.items():
            templates[row, [(root + offset) % 12 for offset in pattern]] = True
            symbols.append(root_name + quality)
            row += 1

    templates.setflags(write=False)
    return tuple(symbols), templates


def to_chroma(pitch_classes: Iterable[int]) -> NDArray[np.bool_]:
    """Convert pitch classes (or absolute pitches) to a 12-bin chroma vector.

    Examples
    --------
    >>> to_chroma([0, 4, 16]).nonzero()[0].tolist()
    [0, 4]
    """
    chroma = np.zeros(12, dtype=np.bool_)
    for pc in pitch_classes:
        chroma[pc % 12] = True
    return chroma


def match_chords(
    pitch_classes: Iterable[int],
    min_size: int = DEFAULT_MIN_MATCH_SIZE,
) -> list[str]:
    """Find every chord symbol whose pitch classes contain the given set.

    Parameters
    ----------
    pitch_classes : Iterable[int]
        Pitch classes (0-11); other integers are reduced modulo 12.
    min_size : int
        Minimum number of distinct pitch classes required, by default 2.
        Smaller inputs return no matches.

    Returns
    -------
    list[str]
        Matching chord symbols in root-then-quality order.

    Examples
    --------
    >>> matches = match_chords({0, 4})
    >>> all(s in matches for s in ("C", "Cmaj7", "C6"))
    True
    >>> match_chords({0})
    []
    """
    chroma = to_chroma(pitch_classes)
    if int(chroma.sum()) < min_size:
        return []

    symbols, templates = chord_templates()
    # A template contains the input when no input bin is missing from it
    contained = ~np.any(chroma & ~templates, axis=1)
    return [symbols[i] for i in np.flatnonzero(contained)]


def match_pitches(pitches: Iterable[int], min_size: int = DEFAULT_MIN_MATCH_SIZE) -> list[str]:
    """Reverse lookup for absolute pitches (e.g., a custom chord's notes)."""
    return match_chords((p % 12 for p in pitches), min_size=min_size)
