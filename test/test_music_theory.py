"""
Unit tests for pitch classes and interval arithmetic.

Run with: python -m pytest test/test_music_theory.py
     or: python test/run_tests.py test_music_theory
"""
import sys

sys.path.insert(0, "src/lib")

from fretboard_engine.errors import InvalidPitchClassError, UnsupportedConstructError
from fretboard_engine.music_theory import (
    NOTE_NAMES,
    PitchClass,
    circle_of_fifths,
    get_progression,
    index_of,
    interval_from,
    note_name,
    parse_note_with_octave,
    pitch_class,
    transpose,
)


def _raises(exc_type, func, *args):
    try:
        func(*args)
    except exc_type:
        return True
    return False


class TestPitchClass:
    """Tests for pitch class parsing."""

    def test_sharp_names_are_canonical(self):
        for name in NOTE_NAMES:
            assert pitch_class(name) == name

    def test_flat_names_normalised(self):
        assert pitch_class("Db") == "C#"
        assert pitch_class("Eb") == "D#"
        assert pitch_class("Bb") == "A#"
        assert pitch_class("Cb") == "B"
        assert pitch_class("bb") == "A#"

    def test_integers(self):
        assert pitch_class(0) == "C"
        assert pitch_class(11) == "B"

    def test_invalid(self):
        assert _raises(InvalidPitchClassError, pitch_class, "H")
        assert _raises(InvalidPitchClassError, pitch_class, 12)
        assert _raises(InvalidPitchClassError, pitch_class, -1)
        assert _raises(InvalidPitchClassError, pitch_class, "")
        assert _raises(InvalidPitchClassError, pitch_class, None)
        assert _raises(InvalidPitchClassError, index_of, "X#")

    def test_index_of(self):
        assert index_of("C") == 0
        assert index_of("A") == 9
        assert index_of("B") == 11
        assert index_of("Gb") == 6

    def test_note_names(self):
        """Test MIDI note to name conversion."""
        assert note_name(60) == "C"  # C4
        assert note_name(61) == "C#"
        assert note_name(40) == "E"  # low E string
        assert note_name(69) == "A"  # A4 (440Hz)

    def test_note_with_octave(self):
        assert parse_note_with_octave("E2") == ("E", 2)
        assert parse_note_with_octave("F#3") == ("F#", 3)
        assert parse_note_with_octave("Bb-1") == ("A#", -1)
        assert _raises(InvalidPitchClassError, parse_note_with_octave, "E")
        assert _raises(InvalidPitchClassError, parse_note_with_octave, "Q4")

    def test_enharmonic_equality(self):
        eb = pitch_class("Eb")
        assert isinstance(eb, PitchClass)
        assert str(eb) == "D#"
        assert eb == "Eb" and eb == "D#" and "Eb" == eb
        assert eb != "E"
        assert eb != "not a note"
        assert eb != 3
        assert PitchClass("Db") == PitchClass("C#")
        assert hash(PitchClass("Db")) == hash("C#")
        assert eb.index == 3

    def test_pitch_class_constructor(self):
        assert PitchClass("bb") is NOTE_NAMES[10]
        assert PitchClass(4) == "E"
        assert _raises(InvalidPitchClassError, PitchClass, "H")


class TestIntervals:
    """Tests for transposition and interval distance."""

    def test_transpose_closure(self):
        for note in NOTE_NAMES:
            assert transpose(note, 12) == note
            assert transpose(note, 0) == note
            assert transpose(note, -12) == note

    def test_transpose_wraps_at_boundary(self):
        assert transpose("B", 1) == "C"
        assert transpose("B", 13) == "C"
        assert transpose("C", -1) == "B"
        assert transpose("C", -13) == "B"
        assert transpose("A#", 2) == "C"

    def test_interval_to_self_is_zero(self):
        for note in NOTE_NAMES:
            assert interval_from(note, note) == 0

    def test_interval_is_ascending(self):
        assert interval_from("C", "G") == 7
        assert interval_from("G", "C") == 5
        assert interval_from("B", "C") == 1
        assert interval_from("C", "B") == 11
        assert interval_from("E", "Eb") == 11

    def test_interval_inverts_transpose(self):
        for root in NOTE_NAMES:
            for semitones in range(12):
                assert interval_from(root, transpose(root, semitones)) == semitones


class TestCircleAndProgressions:
    """Tests for the circle of fifths and progressions."""

    def test_circle_steps_by_fifths(self):
        circle = circle_of_fifths()
        assert circle[0] == "C"
        assert len(set(circle)) == 12
        for a, b in zip(circle, circle[1:]):
            assert interval_from(a, b) == 7

    def test_circle_rotation(self):
        assert circle_of_fifths("Gb")[:3] == ["F#", "C#", "G#"]

    def test_progressions(self):
        assert get_progression("C", "I-VI-IV-V") == ["C", "A", "F", "G"]
        assert get_progression("G", "I-VI-II-V") == ["G", "E", "A", "D"]

    def test_unknown_progression(self):
        assert _raises(UnsupportedConstructError, get_progression, "C", "I-IV")
