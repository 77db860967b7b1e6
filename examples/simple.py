import sys

from chord_voicer import (
    CustomChord,
    SymbolicChord,
    dumps_entries,
    match_pitches,
    transpose_all,
    voice_entries,
)

# The host owns the chord list; the engine only derives new values from it
chords = [
    SymbolicChord("Cmaj7"),
    SymbolicChord("Am7", inversion=1),
    SymbolicChord("D7", octave=True),
    CustomChord((55, 59, 62, 65), root=55),
]
chords = transpose_all(chords, 2)

for entry, voicing in zip(chords, voice_entries(chords)):
    label = entry.symbol if isinstance(entry, SymbolicChord) else "custom"
    if voicing is None:
        sys.stdout.write(f"{label}: unrecognized chord\n")
        continue
    notes = " ".join(f"{n}({i})" for n, i in zip(voicing.note_names, voicing.interval_labels))
    sys.stdout.write(f"{label}: {notes}\n")
    if isinstance(entry, CustomChord):
        sys.stdout.write(f"  could be: {', '.join(match_pitches(voicing.pitches)[:5])}\n")

sys.stdout.write(dumps_entries(chords) + "\n")
