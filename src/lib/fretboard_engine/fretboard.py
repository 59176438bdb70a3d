"""
Fretboard geometry - maps (course, fret) cells onto pitch classes.
Built once from a tuning and read-only afterwards.
"""
import logging
from collections import namedtuple

from .constants import Fretboard, Music
from .errors import ConfigError, RangeError
from .music_theory import index_of, parse_note_with_octave, pitch_class, transpose

logger = logging.getLogger(__name__)

# One open string: pitch class plus scientific octave (E2 = low E)
OpenCourse = namedtuple("OpenCourse", ["pitch_class", "octave"])


class Tuning(tuple):
    """
    Open pitches of every course, course 0 (highest-pitched) first.

    Accepts (name, octave) pairs or "E2"-style strings.
    """

    def __new__(cls, courses=Fretboard.STANDARD_TUNING):
        parsed = []
        for course in courses:
            if isinstance(course, str):
                note, octave = parse_note_with_octave(course)
            else:
                try:
                    note, octave = course
                    octave = int(octave)
                except (TypeError, ValueError):
                    raise ConfigError("Tuning entry must be \"E2\" or (note, octave), got %r" % (course,))
                note = pitch_class(note)
            parsed.append(OpenCourse(note, int(octave)))
        if len(parsed) != Fretboard.COURSES:
            raise ConfigError(
                "Tuning needs exactly %d courses, got %d" % (Fretboard.COURSES, len(parsed))
            )
        return super().__new__(cls, parsed)

    def __repr__(self):
        return "Tuning(%s)" % " ".join(c.pitch_class + str(c.octave) for c in self)

    @property
    def lowest_course(self):
        """Index of the lowest-pitched course."""
        return len(self) - 1


STANDARD_TUNING = Tuning()


class Geometry:
    """
    Immutable (course, fret) -> pitch class table.
    """

    __slots__ = ("_tuning", "_max_fret", "_table")

    def __init__(self, tuning=STANDARD_TUNING, max_fret=Fretboard.MAX_FRET):
        """
        Args:
            tuning: Tuning instance (or anything Tuning() accepts)
            max_fret: Highest fret number on the neck (inclusive)
        """
        if not isinstance(tuning, Tuning):
            tuning = Tuning(tuning)
        if max_fret < 0:
            raise ConfigError("max_fret must not be negative, got %d" % max_fret)
        object.__setattr__(self, "_tuning", tuning)
        object.__setattr__(self, "_max_fret", int(max_fret))
        object.__setattr__(self, "_table", tuple(
            tuple(transpose(course.pitch_class, fret) for fret in range(max_fret + 1))
            for course in tuning
        ))
        logger.debug("Built geometry %r with %d frets", tuning, max_fret)

    def __setattr__(self, name, value):
        raise AttributeError("Geometry is read-only")

    def __eq__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return self._tuning == other._tuning and self._max_fret == other._max_fret

    def __hash__(self):
        return hash((self._tuning, self._max_fret))

    def __repr__(self):
        return "Geometry(%r, max_fret=%d)" % (self._tuning, self._max_fret)

    @property
    def tuning(self):
        return self._tuning

    @property
    def max_fret(self):
        return self._max_fret

    @property
    def course_count(self):
        return len(self._table)

    def _check(self, course, fret):
        if not 0 <= course < len(self._table):
            raise RangeError("Course %r outside 0..%d" % (course, len(self._table) - 1))
        if not 0 <= fret <= self._max_fret:
            raise RangeError("Fret %r outside 0..%d" % (fret, self._max_fret))

    def note_at(self, course, fret):
        """Pitch class sounding at a course/fret cell."""
        self._check(course, fret)
        return self._table[course][fret]

    def midi_note_at(self, course, fret):
        """MIDI note number sounding at a course/fret cell (C4 = 60)."""
        self._check(course, fret)
        open_course = self._tuning[course]
        return (open_course.octave + 1) * Music.NOTES_PER_OCTAVE + index_of(open_course.pitch_class) + fret

    def cells(self):
        """Iterate (course, fret, pitch class), course first then fret."""
        for course, row in enumerate(self._table):
            for fret, note in enumerate(row):
                yield course, fret, note


def get_geometry(tuning=STANDARD_TUNING, max_fret=Fretboard.MAX_FRET):
    """Build the fretboard geometry for a tuning."""
    return Geometry(tuning, max_fret)
