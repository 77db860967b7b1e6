"""Voicing engine.

This module expands parsed chords and custom pitch sets into concrete
voicings: ascending absolute pitches, the pitch marked as the root, and
an interval label for every pitch.

Inversions are applied one rotation at a time: the first pitch of the
current order is raised by an octave and moved to the end of the list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chord_voicer.models import CustomChord, SymbolicChord, Voicing
from chord_voicer.parser import parse
from chord_voicer.vocabulary import OCTAVE, REFERENCE_ROOT_PITCH, get_pattern, interval_label

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from chord_voicer.models import ChordEntry

logger = logging.getLogger(__name__)


def _check_inversion(inversion: int) -> None:
    if inversion < 0:
        msg = f"Inversion must be non-negative, got {inversion}"
        raise ValueError(msg)


def _select_root_pitch(pitches: Sequence[int], root_pc: int) -> int:
    """Pick the highest pitch of the root's class, else the lowest pitch."""
    for pitch in reversed(pitches):
        if pitch % OCTAVE == root_pc:
            return pitch
    return pitches[0]


def build_voicing(
    root: int,
    quality: str = "",
    inversion: int = 0,
    octave_up: bool = False,
) -> Voicing | None:
    """Build the voicing of a chord from its root and quality.

    Parameters
    ----------
    root : int
        Root pitch class (0-11).
    quality : str
        Quality key from the chord vocabulary.
    inversion : int
        Number of inversions to apply, by default 0. Larger values than the
        note count simply keep rotating.
    octave_up : bool
        Raise the whole voicing by one octave, by default False.

    Returns
    -------
    Voicing | None
        The voicing, or None for an unknown quality or out-of-range root.

    Raises
    ------
    ValueError
        If ``inversion`` is negative.

    Examples
    --------
    >>> v = build_voicing(0, "", inversion=1)
    >>> v.pitches
    (64, 67, 72)
    >>> v.root_pitch
    72
    >>> v.interval_labels
    ('3', '5', 'R')
    """
    _check_inversion(inversion)

    pattern = get_pattern(quality)
    if pattern is None:
        logger.debug("Unknown chord quality: %r", quality)
        return None
    if not 0 <= root < OCTAVE:
        logger.debug("Root pitch class out of range: %r", root)
        return None

    root_pitch = REFERENCE_ROOT_PITCH + root

    notes = [root_pitch + offset for offset in pattern]
    for _ in range(inversion):
        notes.append(notes.pop(0) + OCTAVE)

    if octave_up:
        notes = [pitch + OCTAVE for pitch in notes]

    pitches = tuple(sorted(notes))

    # Distances are reduced mod 12, so the ninth (2) stays unlabelled
    return Voicing(
        pitches=pitches,
        root_pitch=_select_root_pitch(pitches, root),
        interval_labels=tuple(interval_label((p - root_pitch) % OCTAVE) for p in pitches),
    )


def voice_symbol(symbol: str, inversion: int = 0, octave_up: bool = False) -> Voicing | None:
    """Parse a chord symbol and build its voicing.

    Examples
    --------
    >>> voice_symbol("Am").note_names
    ('A4', 'C5', 'E5')
    >>> voice_symbol("H7") is None
    True
    """
    chord = parse(symbol)
    if chord is None:
        return None
    return build_voicing(chord.root, chord.quality, inversion, octave_up)


def invert_pitches(pitches: Iterable[int], inversion: int) -> tuple[int, ...]:
    """Rotate a raw pitch list, raising the lowest pitch an octave per step.

    Parameters
    ----------
    pitches : Iterable[int]
        Absolute pitches in user order.
    inversion : int
        Number of rotations.

    Returns
    -------
    tuple[int, ...]
        The rotated pitches, in rotation order (not sorted).

    Examples
    --------
    >>> invert_pitches([60, 63, 67], 1)
    (63, 67, 72)
    >>> invert_pitches([67, 60, 64], 1)
    (67, 64, 72)
    """
    _check_inversion(inversion)
    notes = list(pitches)
    if not notes:
        return ()
    for _ in range(inversion):
        lowest = min(notes)
        notes.remove(lowest)
        notes.append(lowest + OCTAVE)
    return tuple(notes)


def build_custom_voicing(
    pitches: Iterable[int],
    root: int | None = None,
    inversion: int = 0,
) -> Voicing | None:
    """Build the voicing of a user-built chord.

    Parameters
    ----------
    pitches : Iterable[int]
        Absolute pitches in user order.
    root : int | None
        Designated root pitch. Defaults to the lowest given pitch.
    inversion : int
        Number of raw-list rotations, by default 0.

    Returns
    -------
    Voicing | None
        The voicing, or None when no pitches are given.

    Examples
    --------
    >>> v = build_custom_voicing([60, 63, 67], root=60, inversion=1)
    >>> v.pitches, v.root_pitch
    ((63, 67, 72), 72)
    >>> v.interval_labels
    ('m3', '5', 'R')
    """
    given = list(pitches)
    if not given:
        return None

    reference_root = root if root is not None else min(given)
    voiced = tuple(sorted(invert_pitches(given, inversion)))

    return Voicing(
        pitches=voiced,
        root_pitch=_select_root_pitch(voiced, reference_root % OCTAVE),
        interval_labels=tuple(interval_label((p - reference_root) % OCTAVE) for p in voiced),
    )


def voice_entry(entry: ChordEntry) -> Voicing | None:
    """Derive the voicing of a chord-list entry.

    Entries that cannot be voiced, including ones with a negative
    inversion, give None.

    Raises
    ------
    TypeError
        If ``entry`` is not a chord entry.
    """
    if isinstance(entry, SymbolicChord | CustomChord) and entry.inversion < 0:
        logger.debug("Skipping entry with negative inversion: %r", entry)
        return None
    if isinstance(entry, SymbolicChord):
        return voice_symbol(entry.symbol, entry.inversion, entry.octave)
    if isinstance(entry, CustomChord):
        return build_custom_voicing(entry.pitches, entry.root, entry.inversion)
    msg = f"Not a chord entry: {entry!r}"
    raise TypeError(msg)


def voice_entries(entries: Iterable[ChordEntry]) -> list[Voicing | None]:
    """Derive voicings for a whole chord list; failed entries give None."""
    return [voice_entry(entry) for entry in entries]


def normalize_inversion(inversion: int, note_count: int) -> int:
    """Wrap an inversion count into ``0 .. note_count - 1``.

    Examples
    --------
    >>> normalize_inversion(4, 3)
    1
    >>> normalize_inversion(2, 0)
    0
    """
    if note_count <= 0:
        return 0
    return inversion % note_count


def inversion_choices(note_count: int) -> range:
    """Return the selectable inversions for a chord with ``note_count`` notes.

    Examples
    --------
    >>> list(inversion_choices(4))
    [0, 1, 2, 3]
    """
    return range(max(0, note_count))
