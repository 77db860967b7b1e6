"""Tests for pitch class operations."""

import pytest

from chord_voicer.pitch_class import (
    PITCH_CLASS_NAMES,
    midi_to_name,
    name_to_pitch_class,
    normalize_root,
    pitch_class_to_name,
    pitch_classes,
)


class TestNameToPitchClass:
    """Note name lookup tests."""

    @pytest.mark.parametrize("pc, name", list(enumerate(PITCH_CLASS_NAMES)))
    def test_sharp_names(self, pc: int, name: str) -> None:
        assert name_to_pitch_class(name) == pc

    @pytest.mark.parametrize(
        "flat, sharp",
        [("Db", "C#"), ("Eb", "D#"), ("Gb", "F#"), ("Ab", "G#"), ("Bb", "A#")],
    )
    def test_enharmonic_equivalence(self, flat: str, sharp: str) -> None:
        assert name_to_pitch_class(flat) == name_to_pitch_class(sharp)

    def test_lowercase_letter(self) -> None:
        assert name_to_pitch_class("f#") == 6
        assert name_to_pitch_class("eb") == 3

    def test_accidental_is_case_sensitive(self) -> None:
        assert name_to_pitch_class("EB") is None

    @pytest.mark.parametrize("name", ["H", "", "Cb", "E#", "C##", "X#"])
    def test_unknown_names(self, name: str) -> None:
        assert name_to_pitch_class(name) is None


class TestPitchClassToName:
    def test_table_lookup(self) -> None:
        assert pitch_class_to_name(0) == "C"
        assert pitch_class_to_name(11) == "B"

    def test_wraps_modulo_12(self) -> None:
        assert pitch_class_to_name(13) == "C#"
        assert pitch_class_to_name(-1) == "B"


class TestNormalizeRoot:
    def test_collapses_whitespace(self) -> None:
        assert normalize_root(" c # ") == "C#"

    def test_keeps_accidental(self) -> None:
        assert normalize_root("bb") == "Bb"

    def test_empty(self) -> None:
        assert normalize_root("   ") == ""


class TestMidiToName:
    @pytest.mark.parametrize(
        "midi, name",
        [(60, "C4"), (61, "C#4"), (72, "C5"), (59, "B3"), (0, "C-1")],
    )
    def test_names(self, midi: int, name: str) -> None:
        assert midi_to_name(midi) == name

    def test_unicode_sharp(self) -> None:
        assert midi_to_name(66, unicode=True) == "F♯4"


def test_pitch_classes_of_absolute_pitches() -> None:
    assert pitch_classes([48, 64, 76, 67]) == frozenset({0, 4, 7})
