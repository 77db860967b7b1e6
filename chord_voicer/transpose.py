"""Chord transposition.

Symbolic chords wrap their root around the twelve pitch classes; custom
chords shift their absolute pitches with no wrapping, so repeated
transposition can move them arbitrarily far from where they started.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from chord_voicer.models import CustomChord, ParsedChord, SymbolicChord
from chord_voicer.parser import parse

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_voicer.models import ChordEntry

logger = logging.getLogger(__name__)


def transpose_chord(chord: ParsedChord, semitones: int) -> ParsedChord:
    """Transpose a parsed chord by a number of semitones.

    Parameters
    ----------
    chord : ParsedChord
        The chord to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    ParsedChord
        Transposed chord.

    Examples
    --------
    >>> transpose_chord(ParsedChord(root=11), 1).symbol
    'C'
    >>> transpose_chord(ParsedChord(root=0, quality="m7"), -1).symbol
    'Bm7'
    """
    return ParsedChord(root=(chord.root + semitones) % 12, quality=chord.quality)


def transpose(entry: ChordEntry, semitones: int) -> ChordEntry:
    """Transpose a chord-list entry.

    Parameters
    ----------
    entry : ChordEntry
        Symbolic or custom entry.
    semitones : int
        Signed semitone delta.

    Returns
    -------
    ChordEntry
        A new entry. Symbolic entries whose symbol cannot be parsed are
        returned unchanged.

    Raises
    ------
    TypeError
        If ``entry`` is not a chord entry.

    Examples
    --------
    >>> transpose(SymbolicChord("B7", inversion=2), 1)
    SymbolicChord(symbol='C7', inversion=2, octave=False)
    >>> transpose(CustomChord((60, 64), root=60), -13)
    CustomChord(pitches=(47, 51), root=47, inversion=0)
    """
    if isinstance(entry, SymbolicChord):
        chord = parse(entry.symbol)
        if chord is None:
            logger.debug("Leaving unparseable chord %r untransposed", entry.symbol)
            return entry
        return replace(entry, symbol=transpose_chord(chord, semitones).symbol)

    if isinstance(entry, CustomChord):
        root = entry.root + semitones if entry.root is not None else None
        return replace(entry, pitches=tuple(p + semitones for p in entry.pitches), root=root)

    msg = f"Not a chord entry: {entry!r}"
    raise TypeError(msg)


def transpose_all(entries: Iterable[ChordEntry], semitones: int) -> list[ChordEntry]:
    """Transpose a whole chord list, returning a new list."""
    return [transpose(entry, semitones) for entry in entries]
