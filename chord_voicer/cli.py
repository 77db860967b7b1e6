"""Command line interface for chord-voicer.

Usage:
    chord-voicer voice "Cmaj7, F#m7b5" --inversion 1
    chord-voicer match C E G
    chord-voicer transpose "B, Em" --semitones 1
    chord-voicer suggest C#m
"""

from __future__ import annotations

import argparse
import logging
import sys

from chord_voicer.matcher import match_chords
from chord_voicer.models import SymbolicChord
from chord_voicer.parser import MAX_SUGGESTIONS, split_symbols, suggest
from chord_voicer.pitch_class import name_to_pitch_class
from chord_voicer.transpose import transpose_all
from chord_voicer.voicing import voice_symbol

logger = logging.getLogger("chord_voicer")


def _configure_logging(verbose: bool) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _note_to_pitch_class(text: str) -> int:
    """argparse type: note name ("Eb") or pitch-class integer ("3")."""
    if text.lstrip("-").isdigit():
        return int(text) % 12
    pc = name_to_pitch_class(text)
    if pc is None:
        msg = f"unknown note: {text}"
        raise argparse.ArgumentTypeError(msg)
    return pc


def _cmd_voice(args: argparse.Namespace) -> int:
    for symbol in split_symbols(args.symbols):
        voicing = voice_symbol(symbol, args.inversion, args.octave)
        if voicing is None:
            sys.stdout.write(f"{symbol}: unrecognized chord symbol\n")
            continue
        notes = " ".join(
            f"{name}({label})" if label else name
            for name, label in zip(voicing.note_names, voicing.interval_labels)
        )
        sys.stdout.write(f"{symbol}: {notes}\n")
    return 0


def _cmd_match(args: argparse.Namespace) -> int:
    matches = match_chords(set(args.notes))
    if not matches:
        sys.stdout.write("no matching chords\n")
        return 0
    sys.stdout.write(" ".join(matches) + "\n")
    return 0


def _cmd_transpose(args: argparse.Namespace) -> int:
    entries = [SymbolicChord(symbol=s) for s in split_symbols(args.symbols)]
    transposed = transpose_all(entries, args.semitones)
    sys.stdout.write(", ".join(e.symbol for e in transposed) + "\n")
    return 0


def _cmd_suggest(args: argparse.Namespace) -> int:
    for symbol in suggest(args.prefix, limit=args.limit):
        sys.stdout.write(symbol + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="chord-voicer", description="Chord symbol voicing and lookup")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    voice = subparsers.add_parser("voice", help="Show the notes of chord symbols")
    voice.add_argument("symbols", help="Comma-separated chord symbols")
    voice.add_argument("--inversion", type=int, default=0, help="Inversion to apply (default: 0)")
    voice.add_argument("--octave", action="store_true", help="Raise the voicing by one octave")
    voice.set_defaults(func=_cmd_voice)

    match = subparsers.add_parser("match", help="Find chords containing the given notes")
    match.add_argument("notes", nargs="+", type=_note_to_pitch_class, help="Note names or pitch classes")
    match.set_defaults(func=_cmd_match)

    transpose = subparsers.add_parser("transpose", help="Transpose chord symbols")
    transpose.add_argument("symbols", help="Comma-separated chord symbols")
    transpose.add_argument("--semitones", type=int, required=True, help="Signed semitone delta")
    transpose.set_defaults(func=_cmd_transpose)

    suggest_cmd = subparsers.add_parser("suggest", help="Suggest chord symbols for a prefix")
    suggest_cmd.add_argument("prefix")
    suggest_cmd.add_argument("--limit", type=int, default=MAX_SUGGESTIONS)
    suggest_cmd.set_defaults(func=_cmd_suggest)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if getattr(args, "inversion", 0) < 0:
        parser.error("--inversion must be non-negative")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
