"""Pitch class operations.

This module maps between pitch classes (0-11, C=0) and their canonical
sharp names, normalizes enharmonic flat spellings, and names absolute
MIDI pitches.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# Canonical pitch class names (prefer sharps for consistency)
PITCH_CLASS_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Flat spellings that resolve to a canonical sharp name
ENHARMONIC: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

NOTE_TO_PC: dict[str, int] = {name: pc for pc, name in enumerate(PITCH_CLASS_NAMES)}


def normalize_root(name: str) -> str:
    """Normalize a root spelling to ``Letter + accidental``.

    Internal whitespace is removed and the letter is upper-cased; the
    accidental is kept exactly as written.

    Parameters
    ----------
    name : str
        Root spelling (e.g., "c#", " B b").

    Returns
    -------
    str
        Normalized spelling (e.g., "C#", "Bb"), or "" for empty input.

    Examples
    --------
    >>> normalize_root("f#")
    'F#'
    >>> normalize_root(" e b ")
    'Eb'
    """
    collapsed = "".join(name.split())
    if not collapsed:
        return ""
    return collapsed[0].upper() + collapsed[1:]


def name_to_pitch_class(name: str) -> int | None:
    """Convert a note name to pitch class (0-11).

    Flat spellings are mapped to their sharp equivalent before lookup.
    The letter is case-insensitive, the accidental is not.

    Parameters
    ----------
    name : str
        Note name (e.g., "C", "F#", "Bb", "db").

    Returns
    -------
    int | None
        Pitch class (0-11, where C=0), or None if the name is not recognized.

    Examples
    --------
    >>> name_to_pitch_class("C")
    0
    >>> name_to_pitch_class("Db") == name_to_pitch_class("C#")
    True
    >>> name_to_pitch_class("H") is None
    True
    """
    if not name:
        return None
    normalized = normalize_root(name)
    normalized = ENHARMONIC.get(normalized, normalized)
    return NOTE_TO_PC.get(normalized)


def pitch_class_to_name(pc: int) -> str:
    """Return the canonical sharp name of a pitch class.

    Examples
    --------
    >>> pitch_class_to_name(10)
    'A#'
    >>> pitch_class_to_name(12)
    'C'
    """
    return PITCH_CLASS_NAMES[pc % 12]


def midi_to_name(midi: int, *, unicode: bool = False) -> str:
    """Name an absolute MIDI pitch with its octave (middle C = C4 = 60).

    Parameters
    ----------
    midi : int
        MIDI note number.
    unicode : bool
        If True, render sharps as "♯" for display.

    Returns
    -------
    str
        Note name with octave (e.g., "C4", "F#5").

    Examples
    --------
    >>> midi_to_name(60)
    'C4'
    >>> midi_to_name(73, unicode=True)
    'C♯5'
    """
    name = pitch_class_to_name(midi)
    if unicode:
        name = name.replace("#", "♯")
    return f"{name}{midi // 12 - 1}"


def pitch_classes(pitches: Iterable[int]) -> frozenset[int]:
    """Reduce absolute pitches to their set of pitch classes.

    Examples
    --------
    >>> sorted(pitch_classes([60, 64, 67, 72]))
    [0, 4, 7]
    """
    return frozenset(p % 12 for p in pitches)
