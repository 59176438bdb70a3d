"""
Pure music theory calculations - pitch classes and interval arithmetic.
No instrument or rendering dependencies.
"""
from .constants import Music
from .errors import InvalidPitchClassError, UnsupportedConstructError

# Interval definitions (in semitones)
INTERVALS = {
    "unison": 0,
    "minor_second": 1,
    "major_second": 2,
    "minor_third": 3,
    "major_third": 4,
    "perfect_fourth": 5,
    "tritone": 6,
    "perfect_fifth": 7,
    "minor_sixth": 8,
    "major_sixth": 9,
    "minor_seventh": 10,
    "major_seventh": 11,
}

# Canonical pitch class spelling
_SHARP_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Enharmonic spellings accepted on input
NOTE_ALIASES = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
    "Cb": "B",
    "Fb": "E",
    "E#": "F",
    "B#": "C",
}


# Progressions as semitone offsets of each chord root from the key root
PROGRESSIONS = {
    "I-VI-IV-V": [0, 9, 5, 7],
    "I-VI-II-V": [0, 9, 2, 7],
}

_NOTE_INDEX = {name: index for index, name in enumerate(_SHARP_NAMES)}


class PitchClass(str):
    """
    Canonically spelled pitch class that compares equal to any enharmonic
    spelling of itself: PitchClass("D#") == "Eb".

    Hashes like its sharp spelling, so mix only sharp-spelled plain strings
    into sets or dict keys alongside it.
    """

    __slots__ = ()

    def __new__(cls, value):
        return pitch_class(value)

    def __eq__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        if not isinstance(other, PitchClass):
            try:
                other = pitch_class(other)
            except InvalidPitchClassError:
                return False
        return str.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = str.__hash__

    def __repr__(self):
        return "PitchClass(%s)" % str.__repr__(self)

    @property
    def index(self):
        return _NOTE_INDEX[str(self)]


NOTE_NAMES = [str.__new__(PitchClass, name) for name in _SHARP_NAMES]

CIRCLE_OF_FIFTHS = [NOTE_NAMES[(index * 7) % Music.NOTES_PER_OCTAVE] for index in range(Music.NOTES_PER_OCTAVE)]


def pitch_class(value):
    """
    Normalise a note name or number to its canonical pitch class.

    Args:
        value: Name such as "C#" or "Db", or an integer 0-11

    Returns:
        PitchClass with the canonical sharp spelling from NOTE_NAMES

    Raises:
        InvalidPitchClassError: if value is not in the 12-tone alphabet
    """
    if isinstance(value, bool):
        raise InvalidPitchClassError("Not a pitch class: %r" % (value,))
    if isinstance(value, int):
        if 0 <= value < Music.NOTES_PER_OCTAVE:
            return NOTE_NAMES[value]
        raise InvalidPitchClassError("Pitch class index out of range: %d" % value)
    if isinstance(value, str):
        name = value.strip()
        if name[:1].islower():
            name = name[:1].upper() + name[1:]
        name = NOTE_ALIASES.get(name, name)
        if name in _NOTE_INDEX:
            return NOTE_NAMES[_NOTE_INDEX[name]]
    raise InvalidPitchClassError("Not a pitch class: %r" % (value,))


def index_of(note):
    """Return the stable ordinal (0-11) of a pitch class."""
    return pitch_class(note).index


def transpose(note, semitones):
    """Move a pitch class by any number of semitones, negative included."""
    return NOTE_NAMES[(index_of(note) + semitones) % Music.NOTES_PER_OCTAVE]


def interval_from(root, note):
    """Ascending distance in semitones (0-11) from root to note."""
    return (index_of(note) - index_of(root) + Music.NOTES_PER_OCTAVE) % Music.NOTES_PER_OCTAVE


def note_name(midi_note):
    """Convert MIDI note number to note name."""
    return NOTE_NAMES[midi_note % Music.NOTES_PER_OCTAVE]


def parse_note_with_octave(text):
    """
    Split a scientific pitch name into (pitch class, octave).

    Args:
        text: e.g. "E2", "F#3", "Bb-1"

    Returns:
        Tuple of (pitch class, octave)
    """
    text = str(text).strip()
    split_at = len(text)
    while split_at > 0 and (text[split_at - 1].isdigit() or text[split_at - 1] == "-"):
        split_at -= 1
    name, octave = text[:split_at], text[split_at:]
    try:
        return pitch_class(name), int(octave)
    except ValueError:
        raise InvalidPitchClassError("Expected a note with octave, got %r" % (text,))


def circle_of_fifths(start="C"):
    """Return the circle of fifths rotated to begin on start."""
    offset = CIRCLE_OF_FIFTHS.index(pitch_class(start))
    return CIRCLE_OF_FIFTHS[offset:] + CIRCLE_OF_FIFTHS[:offset]


def get_progression_names():
    """Return list of available progression names."""
    return list(PROGRESSIONS.keys())


def get_progression(root, name):
    """
    Get the chord roots of a progression in the key of root.

    Args:
        root: Key root pitch class
        name: Progression name, e.g. "I-VI-IV-V"

    Returns:
        List of pitch classes
    """
    if name not in PROGRESSIONS:
        raise UnsupportedConstructError("Unknown progression: %r" % (name,))
    root = pitch_class(root)
    return [transpose(root, offset) for offset in PROGRESSIONS[name]]
