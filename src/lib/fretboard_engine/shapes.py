"""
Shape detector - groups matched positions into playable windows and
labels each window by inversion.

A window spans adjacent courses and adjacent frets. Course indices run
from high-pitched (0) to low-pitched, so the bass of a window is the
position on its largest course index, nearest the nut.
"""
import logging
from collections import namedtuple

from .constants import Fretboard, Inversion, Window
from .constructs import DEFAULT_TABLES, required_roles
from .errors import UnsupportedConstructError

logger = logging.getLogger(__name__)

# Accepted spellings of the inversion filter
_INVERSION_ALIASES = {
    "all": Inversion.ALL,
    "root": Inversion.ROOT_POSITION,
    "root_position": Inversion.ROOT_POSITION,
    "first": Inversion.FIRST_INVERSION,
    "first_inversion": Inversion.FIRST_INVERSION,
    "second": Inversion.SECOND_INVERSION,
    "second_inversion": Inversion.SECOND_INVERSION,
}


class Shape(namedtuple("Shape", ["base_course", "base_fret", "positions", "bass", "inversion"])):
    """One accepted window: its corner, positions, bass position and label."""

    __slots__ = ()

    @property
    def cells(self):
        return frozenset(position.cell for position in self.positions)


def parse_inversion(value):
    """Resolve an Inversion member or one of its string spellings."""
    if isinstance(value, Inversion):
        return value
    key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return _INVERSION_ALIASES[key]
    except KeyError:
        raise UnsupportedConstructError("Unknown inversion filter: %r" % (value,))


def _highest_fret(positions):
    return max((p.fret for p in positions), default=0)


def find_shape_windows(positions, construct, tables=DEFAULT_TABLES,
                       course_count=Fretboard.COURSES, max_fret=None,
                       window_courses=Window.COURSES, window_frets=Window.FRETS):
    """
    Slide a course x fret window over the positions and keep every window
    that covers all roles the chord needs.

    Scales have no shapes; an empty list is returned for them.
    When max_fret is not given the scan stops at the highest matched fret.

    Returns:
        List of Shape, ordered by base course then base fret
    """
    if not construct.is_chord:
        return []

    if max_fret is None:
        max_fret = _highest_fret(positions)
    needed = required_roles(construct, tables)
    shapes = []
    for base_course in range(course_count - window_courses + 1):
        window_course_set = range(base_course, base_course + window_courses)
        on_courses = [p for p in positions if p.course in window_course_set]

        for base_fret in range(max_fret + 1):
            last_fret = base_fret + window_frets - 1
            in_window = [p for p in on_courses if base_fret <= p.fret <= last_fret]
            if not in_window:
                continue

            roles = {p.role for p in in_window}
            if not needed <= roles:
                continue

            lowest_course = max(p.course for p in in_window)
            bass = min((p for p in in_window if p.course == lowest_course), key=lambda p: p.fret)
            inversion = Inversion.for_bass_role(bass.role)
            shapes.append(Shape(base_course, base_fret, tuple(in_window), bass, inversion))

    logger.debug("%s %s: %d shape windows", construct.root, construct.kind, len(shapes))
    return shapes


def find_shapes(positions, construct, inversion_filter=Inversion.ALL, tables=DEFAULT_TABLES,
                course_count=Fretboard.COURSES, max_fret=None):
    """
    Narrow matched positions down to the shapes of one inversion.

    Args:
        positions: Output of find_positions
        construct: The construct the positions were found for
        inversion_filter: Inversion member or "all"/"root"/"first"/"second"

    Returns:
        List of Position, each (course, fret) at most once. May be empty.
    """
    inversion_filter = parse_inversion(inversion_filter)
    if inversion_filter == Inversion.ALL or not construct.is_chord:
        return list(positions)

    result = []
    seen = set()
    windows = find_shape_windows(positions, construct, tables, course_count, max_fret)
    for shape in windows:
        if shape.inversion != inversion_filter:
            continue
        for position in shape.positions:
            if position.cell not in seen:
                seen.add(position.cell)
                result.append(position)
    return result
