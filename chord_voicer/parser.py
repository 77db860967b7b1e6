"""Chord symbol parsing.

This module turns chord symbols such as ``"Cmaj7"`` or ``" f#m7b5 "`` into
:class:`~chord_voicer.models.ParsedChord` values, splits comma-separated
user input, and offers prefix suggestions for an input box.
"""

from __future__ import annotations

import logging
import re

from chord_voicer.models import ParsedChord
from chord_voicer.pitch_class import PITCH_CLASS_NAMES, name_to_pitch_class, normalize_root
from chord_voicer.vocabulary import CHORD_TYPES, quality_keys_longest_first

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 10

# Root letter (any case), optional accidental, optional quality, nothing else.
# Quality keys are tried longest first so "m7b5" is never read as "m" + garbage.
CHORD_RE = re.compile(
    r"^[ ]*([A-Ga-g])([#b]?)"
    r"(?:(" + "|".join(re.escape(q) for q in quality_keys_longest_first()) + r"))?"
    r"[ ]*\Z"
)


def parse(symbol: str) -> ParsedChord | None:
    """Parse a chord symbol into a ParsedChord.

    Parameters
    ----------
    symbol : str
        The chord symbol (e.g., "Cmaj7", "Bbm", " e7 ").

    Returns
    -------
    ParsedChord | None
        The parsed chord, or None if the symbol is not recognized.

    Examples
    --------
    >>> parse("F#m7b5")
    ParsedChord(root=6, quality='m7b5')
    >>> parse("Db") == parse("C#")
    True
    >>> parse("C xyz123") is None
    True
    """
    if not isinstance(symbol, str):
        return None

    m = CHORD_RE.match(symbol)
    if not m:
        logger.debug("Unrecognized chord symbol: %r", symbol)
        return None

    root_name = normalize_root(m.group(1) + m.group(2))
    root = name_to_pitch_class(root_name)
    if root is None:
        # Spellings such as "Cb" or "E#" fit the grammar but have no table entry
        logger.debug("Unsupported root spelling %r in %r", root_name, symbol)
        return None

    return ParsedChord(root=root, quality=m.group(3) or "")


def split_symbols(text: str) -> list[str]:
    """Split comma-separated input into chord symbols.

    Examples
    --------
    >>> split_symbols("C, Am7,, G ")
    ['C', 'Am7', 'G']
    """
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_many(text: str) -> list[ParsedChord]:
    """Parse every recognizable symbol in comma-separated input.

    Unrecognized symbols are skipped.

    Examples
    --------
    >>> [c.symbol for c in parse_many("C, H7, Am")]
    ['C', 'Am']
    """
    chords = []
    for sym in split_symbols(text):
        chord = parse(sym)
        if chord is not None:
            chords.append(chord)
    return chords


def suggest(prefix: str, *, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Suggest chord symbols starting with a typed prefix.

    Candidates are every sharp root combined with every non-empty quality,
    compared case-insensitively.

    Parameters
    ----------
    prefix : str
        What the user has typed so far.
    limit : int
        Maximum number of suggestions, by default 10.

    Returns
    -------
    list[str]
        Matching symbols in root-then-quality order.

    Examples
    --------
    >>> suggest("C#m")[:3]
    ['C#m', 'C#m6', 'C#maj7']
    >>> suggest("")
    []
    """
    wanted = prefix.strip().upper() if prefix else ""
    if not wanted:
        return []

    matches: list[str] = []
    for note in PITCH_CLASS_NAMES:
        for quality in CHORD_TYPES:
            candidate = note + quality
            if candidate.upper().startswith(wanted):
                matches.append(candidate)
                if len(matches) >= limit:
                    return matches
    return matches
