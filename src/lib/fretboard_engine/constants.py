"""
Constants for the fretboard engine.
All magic strings and numbers are defined here for easy maintenance.
"""
from enum import Enum


# ============================================================================
# MUSIC CONSTANTS
# ============================================================================
class Music:
    """Music theory constants."""
    NOTES_PER_OCTAVE = 12


# ============================================================================
# FRETBOARD CONSTANTS
# ============================================================================
class Fretboard:
    """Instrument geometry constants."""
    # Course 0 is the highest-pitched string, course 5 the lowest
    COURSES = 6
    MAX_FRET = 22

    # Standard tuning, course 0 first
    STANDARD_TUNING = (
        ("E", 4),
        ("B", 3),
        ("G", 3),
        ("D", 3),
        ("A", 2),
        ("E", 2),
    )


# ============================================================================
# SHAPE WINDOW CONSTANTS
# ============================================================================
class Window:
    """Size of the playable window used for shape detection."""
    COURSES = 3
    FRETS = 5


# ============================================================================
# MIDI CONSTANTS
# ============================================================================
class Midi:
    """MIDI-related constants."""
    CHANNEL_MIN = 0
    CHANNEL_MAX = 15

    VELOCITY_MIN = 0
    VELOCITY_MAX = 127
    VELOCITY_DEFAULT = 100

    NOTE_MIN = 0
    NOTE_MAX = 127


# ============================================================================
# ROLES AND INVERSIONS
# ============================================================================
class Role(Enum):
    """Function a pitch class plays within a construct."""
    ROOT = "root"
    THIRD = "third"
    FIFTH = "fifth"
    SCALE_DEGREE = "scale_degree"


class Inversion(Enum):
    """Inversion filter vocabulary, shared by triads and power chords."""
    ALL = "all"
    ROOT_POSITION = "root_position"
    FIRST_INVERSION = "first_inversion"
    SECOND_INVERSION = "second_inversion"

    @classmethod
    def for_bass_role(cls, role):
        """Label a window by the role sitting on its lowest-pitched course."""
        labels = {
            Role.ROOT: cls.ROOT_POSITION,
            Role.THIRD: cls.FIRST_INVERSION,
            Role.FIFTH: cls.SECOND_INVERSION,
        }
        return labels.get(role)


class ConstructFamily:
    """Construct family tags."""
    CHORD = "chord"
    SCALE = "scale"
