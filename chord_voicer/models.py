"""Chord data models for chord-voicer.

This module provides the immutable values the engine works with: parsed
chord symbols, rendered voicings, and the two kinds of chord-list entries
a host application stores (symbolic and custom). Entries are the only
canonical state; voicings are always rederived from them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from chord_voicer.pitch_class import midi_to_name, pitch_class_to_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedChord:
    """A chord symbol resolved to root pitch class and quality.

    Parameters
    ----------
    root : int
        Root pitch class (0-11, where C=0).
    quality : str
        Quality key from the chord vocabulary ("" is the major triad).

    Examples
    --------
    >>> chord = ParsedChord(root=7, quality="m7")
    >>> chord.symbol
    'Gm7'
    >>> chord.to_harte()
    'G:min7'
    """

    root: int
    quality: str = ""

    @property
    def root_name(self) -> str:
        """Return the canonical (sharp) name of the root."""
        return pitch_class_to_name(self.root)

    @property
    def symbol(self) -> str:
        """Return the chord symbol, e.g. "C#maj7"."""
        return f"{self.root_name}{self.quality}"

    def to_harte(self) -> str:
        """Convert to Harte notation string (e.g., "G:min7")."""
        from chord_voicer.converter import to_harte

        return to_harte(self)

    def to_pychord(self) -> str:
        """Convert to pychord notation string (e.g., "Gm7")."""
        from chord_voicer.converter import to_pychord

        return to_pychord(self)

    def __str__(self) -> str:
        """Return the chord symbol as default string representation."""
        return self.symbol


@dataclass(frozen=True)
class Voicing:
    """A concrete, octave-aware arrangement of a chord's pitches.

    Parameters
    ----------
    pitches : tuple[int, ...]
        Absolute MIDI pitches, ascending.
    root_pitch : int
        The pitch marked as the root in this voicing.
    interval_labels : tuple[str, ...]
        Interval label for each pitch, aligned with ``pitches``.
    """

    pitches: tuple[int, ...]
    root_pitch: int
    interval_labels: tuple[str, ...]

    @property
    def note_names(self) -> tuple[str, ...]:
        """Return note names with octave for each pitch (e.g., "E4")."""
        return tuple(midi_to_name(p) for p in self.pitches)

    @property
    def pitch_classes(self) -> frozenset[int]:
        """Return the set of pitch classes in the voicing."""
        return frozenset(p % 12 for p in self.pitches)

    def __len__(self) -> int:
        """Return the number of pitches."""
        return len(self.pitches)


@dataclass(frozen=True)
class SymbolicChord:
    """A chord-list entry described by a chord symbol.

    Parameters
    ----------
    symbol : str
        The chord symbol as entered (e.g., "F#m7b5").
    inversion : int
        Number of inversions to apply.
    octave : bool
        Whether the voicing is raised by one octave.
    """

    symbol: str
    inversion: int = 0
    octave: bool = False


@dataclass(frozen=True)
class CustomChord:
    """A chord-list entry built from explicit pitches.

    Parameters
    ----------
    pitches : tuple[int, ...]
        Absolute MIDI pitches in user order.
    root : int | None
        Designated root pitch, if any.
    inversion : int
        Number of raw-list rotations to apply.
    """

    pitches: tuple[int, ...]
    root: int | None = None
    inversion: int = 0


ChordEntry = SymbolicChord | CustomChord


def entry_to_dict(entry: ChordEntry) -> dict[str, Any]:
    """Convert an entry to its JSON-compatible form.

    Parameters
    ----------
    entry : ChordEntry
        Entry to serialize.

    Returns
    -------
    dict[str, Any]
        ``{"symbol", "inversion", "octave"}`` for symbolic chords or
        ``{"custom_pitches", "designated_root", "inversion"}`` for custom ones.

    Raises
    ------
    TypeError
        If ``entry`` is not a chord entry.

    Examples
    --------
    >>> entry_to_dict(SymbolicChord("Am", inversion=1))
    {'symbol': 'Am', 'inversion': 1, 'octave': False}
    """
    if isinstance(entry, SymbolicChord):
        return {"symbol": entry.symbol, "inversion": entry.inversion, "octave": entry.octave}
    if isinstance(entry, CustomChord):
        return {
            "custom_pitches": list(entry.pitches),
            "designated_root": entry.root,
            "inversion": entry.inversion,
        }
    msg = f"Not a chord entry: {entry!r}"
    raise TypeError(msg)


def _require_int(data: dict[str, Any], key: str, default: int | None) -> int | None:
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Field '{key}' must be an integer, got {value!r}"
        raise ValueError(msg)
    return value


def _require_bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"Field '{key}' must be a boolean, got {value!r}"
        raise ValueError(msg)
    return value


def entry_from_dict(data: dict[str, Any]) -> ChordEntry:
    """Build an entry from its JSON-compatible form.

    Parameters
    ----------
    data : dict[str, Any]
        Serialized entry, as produced by :func:`entry_to_dict`.

    Returns
    -------
    ChordEntry
        The symbolic or custom entry.

    Raises
    ------
    ValueError
        If the mapping matches neither entry shape or a field has the wrong type.

    Examples
    --------
    >>> entry_from_dict({"symbol": "Cmaj7"})
    SymbolicChord(symbol='Cmaj7', inversion=0, octave=False)
    >>> entry_from_dict({"custom_pitches": [60, 63], "designated_root": 60})
    CustomChord(pitches=(60, 63), root=60, inversion=0)
    """
    if not isinstance(data, dict):
        msg = f"Unrecognized chord entry: {data!r}"
        raise ValueError(msg)
    inversion = _require_int(data, "inversion", 0) or 0
    if inversion < 0:
        msg = f"Field 'inversion' must be non-negative, got {inversion}"
        raise ValueError(msg)

    if "custom_pitches" in data:
        raw = data["custom_pitches"]
        if not isinstance(raw, list | tuple) or any(
            isinstance(p, bool) or not isinstance(p, int) for p in raw
        ):
            msg = f"Field 'custom_pitches' must be a list of integers, got {raw!r}"
            raise ValueError(msg)
        root = _require_int(data, "designated_root", None)
        return CustomChord(pitches=tuple(raw), root=root, inversion=inversion)

    if "symbol" in data:
        symbol = data["symbol"]
        if not isinstance(symbol, str):
            msg = f"Field 'symbol' must be a string, got {symbol!r}"
            raise ValueError(msg)
        return SymbolicChord(symbol=symbol, inversion=inversion, octave=_require_bool(data, "octave", False))

    msg = f"Unrecognized chord entry: {data!r}"
    raise ValueError(msg)


def dumps_entries(entries: list[ChordEntry]) -> str:
    """Serialize a chord list to a JSON string."""
    return json.dumps([entry_to_dict(e) for e in entries])


def loads_entries(text: str) -> list[ChordEntry]:
    """Deserialize a chord list from a JSON string.

    An empty string gives an empty list.

    Raises
    ------
    ValueError
        If the JSON is invalid, is not a list, or holds a malformed entry.
    """
    if not text.strip():
        return []
    data = json.loads(text)
    if not isinstance(data, list):
        msg = f"Chord list must be a JSON array, got {type(data).__name__}"
        raise ValueError(msg)
    entries = [entry_from_dict(item) for item in data]
    logger.debug("Loaded %d chord entries", len(entries))
    return entries
