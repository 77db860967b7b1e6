"""Chord notation converter.

This module converts parsed chords to and from the notations used by
other chord tooling: Harte notation (e.g., "G:min7") and pychord's
lead-sheet notation (e.g., "Gm7").
"""

from __future__ import annotations

from chord_voicer.models import ParsedChord
from chord_voicer.pitch_class import name_to_pitch_class
from chord_voicer.vocabulary import CHORD_PATTERNS

# Mapping from vocabulary quality keys to Harte shorthand
QUALITY_TO_HARTE: dict[str, str] = {
    "": "maj",
    "m": "min",
    "dim": "dim",
    "aug": "aug",
    "sus2": "sus2",
    "sus4": "sus4",
    "6": "maj6",
    "m6": "min6",
    "7": "7",
    "maj7": "maj7",
    "m7": "min7",
    "dim7": "dim7",
    "m7b5": "hdim7",
    "add9": "maj(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
}

# Reverse mapping from Harte shorthand to vocabulary quality keys
HARTE_TO_QUALITY: dict[str, str] = {harte: quality for quality, harte in QUALITY_TO_HARTE.items()}

# pychord quality names that differ from the vocabulary keys
PYCHORD_ALIASES: dict[str, str] = {
    "maj": "",
    "M": "",
    "min": "m",
    "M7": "maj7",
    "m7-5": "m7b5",
    "min7": "m7",
    "M9": "maj9",
}


def quality_to_harte(quality: str) -> str:
    """Convert a vocabulary quality key to Harte shorthand.

    Parameters
    ----------
    quality : str
        The quality key (e.g., "m7", "maj7", "").

    Returns
    -------
    str
        The equivalent Harte shorthand (e.g., "min7", "maj7", "maj").

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> quality_to_harte("m7b5")
    'hdim7'
    >>> quality_to_harte("")
    'maj'
    """
    if quality in QUALITY_TO_HARTE:
        return QUALITY_TO_HARTE[quality]
    msg = f"Unknown chord quality: {quality}"
    raise ValueError(msg)


def harte_quality_to_quality(harte_quality: str) -> str:
    """Convert a Harte shorthand to a vocabulary quality key.

    Raises
    ------
    ValueError
        If the shorthand has no counterpart in the vocabulary.

    Examples
    --------
    >>> harte_quality_to_quality("min7")
    'm7'
    """
    if harte_quality in HARTE_TO_QUALITY:
        return HARTE_TO_QUALITY[harte_quality]
    msg = f"Unknown Harte quality: {harte_quality}"
    raise ValueError(msg)


def pychord_quality_to_quality(pychord_quality: str) -> str:
    """Convert a pychord quality name to a vocabulary quality key.

    Raises
    ------
    ValueError
        If the quality has no counterpart in the vocabulary.

    Examples
    --------
    >>> pychord_quality_to_quality("M7")
    'maj7'
    >>> pychord_quality_to_quality("m7")
    'm7'
    """
    quality = PYCHORD_ALIASES.get(pychord_quality, pychord_quality)
    if quality in CHORD_PATTERNS:
        return quality
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def _root_pitch_class(root: str, source: str) -> int:
    pc = name_to_pitch_class(root)
    if pc is None:
        msg = f"Unsupported root '{root}' in chord: {source}"
        raise ValueError(msg)
    return pc


def to_harte(chord: ParsedChord) -> str:
    """Convert a parsed chord to Harte notation.

    Examples
    --------
    >>> to_harte(ParsedChord(root=10, quality="m"))
    'A#:min'
    """
    return f"{chord.root_name}:{quality_to_harte(chord.quality)}"


def to_pychord(chord: ParsedChord) -> str:
    """Convert a parsed chord to pychord notation.

    The vocabulary keys are valid pychord qualities, so this is the chord
    symbol itself.

    Examples
    --------
    >>> to_pychord(ParsedChord(root=7, quality="m7"))
    'Gm7'
    """
    if chord.quality not in CHORD_PATTERNS:
        msg = f"Unknown chord quality: {chord.quality}"
        raise ValueError(msg)
    return chord.symbol


def from_harte(chord_str: str) -> ParsedChord:
    """Parse a Harte notation string into a ParsedChord.

    Parameters
    ----------
    chord_str : str
        Chord in Harte notation (e.g., "G:min7", "C:maj", "Bb:min").

    Returns
    -------
    ParsedChord
        The parsed chord, with the root as a pitch class.

    Raises
    ------
    ValueError
        If the string cannot be parsed or uses an unsupported quality.

    Examples
    --------
    >>> from_harte("G:min7")
    ParsedChord(root=7, quality='m7')
    """
    from harte.harte import Harte

    try:
        hc = Harte(chord_str)
        root = hc.get_root()
        shorthand = hc.get_shorthand()
    except Exception as e:  # the harte grammar raises its own exception types
        msg = f"Cannot parse Harte chord: {chord_str}"
        raise ValueError(msg) from e

    return ParsedChord(
        root=_root_pitch_class(root, chord_str),
        quality=harte_quality_to_quality(shorthand if shorthand else "maj"),
    )


def from_pychord(chord_str: str) -> ParsedChord:
    """Parse a pychord notation string into a ParsedChord.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "BbM7").

    Returns
    -------
    ParsedChord
        The parsed chord, with the root as a pitch class.

    Raises
    ------
    ValueError
        If pychord cannot parse the string or the quality is unsupported, or for
        slash chords, whose bass note has no place in a ParsedChord.

    Examples
    --------
    >>> from_pychord("BbM7")
    ParsedChord(root=10, quality='maj7')
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    if pc.on:
        msg = f"Slash chords are not supported: {chord_str}"
        raise ValueError(msg)
    return ParsedChord(
        root=_root_pitch_class(pc.root, chord_str),
        quality=pychord_quality_to_quality(str(pc.quality)),
    )
