"""
Fretboard Engine - maps chords and scales onto a fretted neck and finds
playable shapes by inversion.
"""

from .constants import Role, Inversion, Fretboard, Window
from .errors import (
    FretboardError,
    InvalidPitchClassError,
    RangeError,
    UnsupportedConstructError,
    ConfigError,
)
from .music_theory import (
    INTERVALS,
    NOTE_NAMES,
    CIRCLE_OF_FIFTHS,
    PROGRESSIONS,
    PitchClass,
    pitch_class,
    index_of,
    transpose,
    interval_from,
    note_name,
    circle_of_fifths,
    get_progression,
    get_progression_names,
)
from .fretboard import Tuning, Geometry, STANDARD_TUNING, get_geometry
from .constructs import (
    CHORD_TYPES,
    SCALES,
    Construct,
    ConstructTables,
    Member,
    make_construct,
    chord_members,
    scale_members,
    get_construct_members,
    classify_role,
    get_formula,
    get_display_name,
)
from .positions import Position, find_positions
from .shapes import Shape, parse_inversion, find_shape_windows, find_shapes
from .config import EngineConfig, default_config, load_config
from .engine import FretboardEngine

__all__ = [
    # Constants
    "Role",
    "Inversion",
    "Fretboard",
    "Window",
    # Errors
    "FretboardError",
    "InvalidPitchClassError",
    "RangeError",
    "UnsupportedConstructError",
    "ConfigError",
    # Music Theory
    "INTERVALS",
    "NOTE_NAMES",
    "CIRCLE_OF_FIFTHS",
    "PROGRESSIONS",
    "PitchClass",
    "pitch_class",
    "index_of",
    "transpose",
    "interval_from",
    "note_name",
    "circle_of_fifths",
    "get_progression",
    "get_progression_names",
    # Geometry
    "Tuning",
    "Geometry",
    "STANDARD_TUNING",
    "get_geometry",
    # Constructs
    "CHORD_TYPES",
    "SCALES",
    "Construct",
    "ConstructTables",
    "Member",
    "make_construct",
    "chord_members",
    "scale_members",
    "get_construct_members",
    "classify_role",
    "get_formula",
    "get_display_name",
    # Positions and shapes
    "Position",
    "find_positions",
    "Shape",
    "parse_inversion",
    "find_shape_windows",
    "find_shapes",
    # Configuration
    "EngineConfig",
    "default_config",
    "load_config",
    # Engine
    "FretboardEngine",
]
