"""Chord voicing engine.

This library parses chord symbols, expands them into concrete pitch sets,
applies voicing transformations (inversion, octave shift), transposes
chord lists, and finds chord symbols matching a set of pitch classes.

Examples
--------
>>> from chord_voicer import parse, build_voicing, match_chords

>>> chord = parse("Cmaj7")
>>> chord.symbol
'Cmaj7'

>>> voicing = build_voicing(chord.root, chord.quality, inversion=1)
>>> voicing.note_names
('E4', 'G4', 'B4', 'C5')
>>> voicing.interval_labels
('3', '5', 'maj7', 'R')

>>> "Am7" in match_chords({0, 4, 9})
True
"""

from chord_voicer.converter import from_harte, from_pychord, to_harte, to_pychord
from chord_voicer.matcher import match_chords, match_pitches
from chord_voicer.models import (
    ChordEntry,
    CustomChord,
    ParsedChord,
    SymbolicChord,
    Voicing,
    dumps_entries,
    entry_from_dict,
    entry_to_dict,
    loads_entries,
)
from chord_voicer.parser import parse, parse_many, split_symbols, suggest
from chord_voicer.pitch_class import midi_to_name, name_to_pitch_class, pitch_class_to_name
from chord_voicer.transpose import transpose, transpose_all, transpose_chord
from chord_voicer.vocabulary import CHORD_PATTERNS, INTERVAL_LABELS
from chord_voicer.voicing import (
    build_custom_voicing,
    build_voicing,
    voice_entries,
    voice_entry,
    voice_symbol,
)

__all__ = [
    "CHORD_PATTERNS",
    "INTERVAL_LABELS",
    "ChordEntry",
    "CustomChord",
    "ParsedChord",
    "SymbolicChord",
    "Voicing",
    "build_custom_voicing",
    "build_voicing",
    "dumps_entries",
    "entry_from_dict",
    "entry_to_dict",
    "from_harte",
    "from_pychord",
    "loads_entries",
    "match_chords",
    "match_pitches",
    "midi_to_name",
    "name_to_pitch_class",
    "parse",
    "parse_many",
    "pitch_class_to_name",
    "split_symbols",
    "suggest",
    "to_harte",
    "to_pychord",
    "transpose",
    "transpose_all",
    "transpose_chord",
    "voice_entries",
    "voice_entry",
    "voice_symbol",
]
