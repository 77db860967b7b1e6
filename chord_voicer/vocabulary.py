"""Chord quality definitions.

Each quality key maps to its semitone offsets from the root. Offsets are
ascending, always start with the root (0), and may exceed 11 so that a
ninth (14) stays distinct from a second (2).
"""

from __future__ import annotations

# Fixed middle-register anchor for the root of a symbolic voicing (C4)
REFERENCE_ROOT_PITCH = 60
OCTAVE = 12

# Chord quality -> semitone offsets from root
CHORD_PATTERNS: dict[str, tuple[int, ...]] = {
    "": (0, 4, 7),  # major triad
    "m": (0, 3, 7),
    "dim": (0, 3, 6),
    "aug": (0, 4, 8),
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    "6": (0, 4, 7, 9),
    "m6": (0, 3, 7, 9),
    "7": (0, 4, 7, 10),
    "maj7": (0, 4, 7, 11),
    "m7": (0, 3, 7, 10),
    "dim7": (0, 3, 6, 9),
    "m7b5": (0, 3, 6, 10),
    "add9": (0, 4, 7, 14),
    "9": (0, 4, 7, 10, 14),
    "m9": (0, 3, 7, 10, 14),
    "maj9": (0, 4, 7, 11, 14),
}

# Qualities that carry a suffix (everything but the bare major triad)
CHORD_TYPES: tuple[str, ...] = tuple(q for q in CHORD_PATTERNS if q)

# Semitone distance from the root -> interval label.
# 11ths and 13ths are not labelled distinctly; they fall through to "".
INTERVAL_LABELS: dict[int, str] = {
    0: "R",
    3: "m3",
    4: "3",
    5: "4",
    6: "b5",
    7: "5",
    8: "6",
    9: "6/13",
    10: "7",
    11: "maj7",
    14: "9",
}


def get_pattern(quality: str) -> tuple[int, ...] | None:
    """Return the offset pattern for a chord quality, or None if unknown.

    Examples
    --------
    >>> get_pattern("maj7")
    (0, 4, 7, 11)
    >>> get_pattern("xyz") is None
    True
    """
    return CHORD_PATTERNS.get(quality)


def quality_keys_longest_first() -> list[str]:
    """Return the non-empty quality keys, longest first.

    A regex alternation built from this order never lets a short key shadow
    a longer one sharing its prefix (``m`` vs ``m7b5``).

    Examples
    --------
    >>> keys = quality_keys_longest_first()
    >>> keys.index("m7b5") < keys.index("m7") < keys.index("m")
    True
    """
    return sorted(CHORD_TYPES, key=len, reverse=True)


def interval_label(semitones: int) -> str:
    """Label a semitone distance above the root.

    Compound distances that have their own label (the ninth, 14) keep it;
    any other distance is reduced modulo the octave first. Unmapped
    remainders give an empty label.

    Parameters
    ----------
    semitones : int
        Distance from the root in semitones.

    Returns
    -------
    str
        Interval label (e.g., "R", "m3", "9"), or "".

    Examples
    --------
    >>> interval_label(7)
    '5'
    >>> interval_label(14)
    '9'
    >>> interval_label(19)
    '5'
    >>> interval_label(2)
    ''
    """
    if semitones in INTERVAL_LABELS:
        return INTERVAL_LABELS[semitones]
    return INTERVAL_LABELS.get(semitones % OCTAVE, "")
