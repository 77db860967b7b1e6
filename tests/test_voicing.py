"""Tests for the voicing engine."""

from collections import Counter

import pytest

from chord_voicer.models import CustomChord, SymbolicChord
from chord_voicer.voicing import (
    build_custom_voicing,
    build_voicing,
    inversion_choices,
    invert_pitches,
    normalize_inversion,
    voice_entries,
    voice_entry,
    voice_symbol,
)
from chord_voicer.vocabulary import CHORD_PATTERNS


class TestBuildVoicingBasic:
    """Root-position voicings."""

    def test_c_major(self) -> None:
        v = build_voicing(0, "")
        assert v is not None
        assert v.pitches == (60, 64, 67)
        assert v.root_pitch == 60
        assert v.interval_labels == ("R", "3", "5")

    def test_reference_register(self) -> None:
        v = build_voicing(9, "m")
        assert v is not None
        assert v.pitches == (69, 72, 76)
        assert v.note_names == ("A4", "C5", "E5")

    def test_ninth_is_unlabelled(self) -> None:
        v = build_voicing(0, "add9")
        assert v is not None
        assert v.pitches == (60, 64, 67, 74)
        assert v.interval_labels == ("R", "3", "5", "")

    def test_half_diminished_labels(self) -> None:
        v = build_voicing(11, "m7b5")
        assert v is not None
        assert v.pitches == (71, 74, 77, 81)
        assert v.interval_labels == ("R", "m3", "b5", "7")

    def test_dominant_seventh_labels(self) -> None:
        v = build_voicing(7, "7")
        assert v is not None
        assert v.interval_labels == ("R", "3", "5", "7")

    def test_unlabelled_second(self) -> None:
        v = build_voicing(0, "sus2")
        assert v is not None
        assert v.interval_labels == ("R", "", "5")


class TestInversions:
    def test_first_inversion_selects_high_root(self) -> None:
        v = build_voicing(0, "", inversion=1)
        assert v is not None
        assert v.pitches == (64, 67, 72)
        assert v.root_pitch == 72

    def test_second_inversion(self) -> None:
        v = build_voicing(0, "", inversion=2)
        assert v is not None
        assert v.pitches == (67, 72, 76)
        assert v.root_pitch == 72
        assert v.interval_labels == ("5", "R", "3")

    def test_full_cycle_raises_an_octave(self) -> None:
        v = build_voicing(2, "m7", inversion=4)
        base = build_voicing(2, "m7")
        assert v is not None and base is not None
        assert v.pitches == tuple(p + 12 for p in base.pitches)

    def test_large_inversion_keeps_rotating(self) -> None:
        v = build_voicing(0, "", inversion=7)
        assert v is not None
        # two full cycles plus one rotation
        assert v.pitches == (88, 91, 96)

    def test_sequential_rotation_with_ninth(self) -> None:
        v = build_voicing(0, "add9", inversion=1)
        assert v is not None
        assert v.pitches == (64, 67, 72, 74)
        assert v.interval_labels == ("3", "5", "R", "")

    def test_negative_inversion_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            build_voicing(0, "", inversion=-1)

    @pytest.mark.parametrize("quality", list(CHORD_PATTERNS))
    @pytest.mark.parametrize("inversion", range(6))
    def test_pitch_class_multiset_invariant(self, quality: str, inversion: int) -> None:
        base = build_voicing(5, quality)
        inverted = build_voicing(5, quality, inversion=inversion)
        assert base is not None and inverted is not None
        assert Counter(p % 12 for p in inverted.pitches) == Counter(p % 12 for p in base.pitches)


class TestOctaveShift:
    def test_octave_up(self) -> None:
        v = build_voicing(0, "", octave_up=True)
        assert v is not None
        assert v.pitches == (72, 76, 79)
        assert v.root_pitch == 72
        assert v.interval_labels == ("R", "3", "5")

    def test_octave_with_inversion(self) -> None:
        v = build_voicing(0, "", inversion=1, octave_up=True)
        assert v is not None
        assert v.pitches == (76, 79, 84)
        assert v.root_pitch == 84


class TestPatternLength:
    @pytest.mark.parametrize("quality, pattern", list(CHORD_PATTERNS.items()))
    @pytest.mark.parametrize("inversion", [0, 1, 3])
    @pytest.mark.parametrize("octave_up", [False, True])
    def test_length_matches_pattern(self, quality: str, pattern: tuple, inversion: int, octave_up: bool) -> None:
        v = build_voicing(4, quality, inversion=inversion, octave_up=octave_up)
        assert v is not None
        assert len(v) == len(pattern)
        assert len(v.interval_labels) == len(pattern)
        assert list(v.pitches) == sorted(v.pitches)


class TestInvalidVoicing:
    def test_unknown_quality(self) -> None:
        assert build_voicing(0, "xyz") is None

    @pytest.mark.parametrize("root", [-1, 12])
    def test_root_out_of_range(self, root: int) -> None:
        assert build_voicing(root, "") is None

    def test_unparseable_symbol(self) -> None:
        assert voice_symbol("H") is None


class TestVoiceSymbol:
    def test_symbol_with_modifiers(self) -> None:
        v = voice_symbol("Cmaj7", inversion=1)
        assert v is not None
        assert v.note_names == ("E4", "G4", "B4", "C5")

    def test_flat_symbol(self) -> None:
        v = voice_symbol("Bb")
        assert v is not None
        assert v.pitches == (70, 74, 77)


class TestInvertPitches:
    def test_ascending(self) -> None:
        assert invert_pitches([60, 64, 67], 2) == (67, 72, 76)

    def test_moves_lowest_not_first(self) -> None:
        assert invert_pitches([67, 60, 64], 1) == (67, 64, 72)

    def test_empty(self) -> None:
        assert invert_pitches([], 3) == ()


class TestCustomVoicing:
    def test_designated_root(self) -> None:
        v = build_custom_voicing([64, 60, 67], root=60)
        assert v is not None
        assert v.pitches == (60, 64, 67)
        assert v.root_pitch == 60
        assert v.interval_labels == ("R", "3", "5")

    def test_default_root_is_lowest(self) -> None:
        v = build_custom_voicing([57, 60, 64])
        assert v is not None
        assert v.root_pitch == 57
        assert v.interval_labels == ("R", "m3", "5")

    def test_root_above_other_pitches(self) -> None:
        v = build_custom_voicing([60, 64, 69], root=69)
        assert v is not None
        assert v.interval_labels == ("m3", "5", "R")

    def test_inversion_marks_high_root(self) -> None:
        v = build_custom_voicing([60, 63, 67], root=60, inversion=1)
        assert v is not None
        assert v.pitches == (63, 67, 72)
        assert v.root_pitch == 72

    def test_empty_is_noop(self) -> None:
        assert build_custom_voicing([]) is None

    def test_root_not_in_pitches_falls_back_to_lowest(self) -> None:
        v = build_custom_voicing([64, 67], root=60)
        assert v is not None
        assert v.root_pitch == 64
        assert v.interval_labels == ("3", "5")


class TestVoiceEntry:
    def test_symbolic_entry(self) -> None:
        v = voice_entry(SymbolicChord("C", inversion=1))
        assert v is not None
        assert v.root_pitch == 72

    def test_custom_entry(self) -> None:
        v = voice_entry(CustomChord((62, 65, 69), root=62))
        assert v is not None
        assert v.interval_labels == ("R", "m3", "5")

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            voice_entry("Cmaj7")  # type: ignore[arg-type]

    def test_bad_entry_does_not_block_others(self) -> None:
        results = voice_entries([SymbolicChord("C"), SymbolicChord("nope"), CustomChord(())])
        assert results[0] is not None
        assert results[1] is None
        assert results[2] is None

    def test_negative_inversion_does_not_block_others(self) -> None:
        entries = [SymbolicChord("C", inversion=-1), SymbolicChord("Am"), CustomChord((60,), inversion=-2)]
        results = voice_entries(entries)
        assert results[0] is None
        assert results[1] is not None
        assert results[2] is None


class TestInversionHelpers:
    def test_normalize(self) -> None:
        assert normalize_inversion(3, 3) == 0
        assert normalize_inversion(5, 4) == 1

    def test_choices(self) -> None:
        assert list(inversion_choices(3)) == [0, 1, 2]
        assert list(inversion_choices(0)) == []
