"""
Position finder - every fretboard cell that sounds a construct member.
"""
from collections import namedtuple

from .constants import Role
from .constructs import DEFAULT_TABLES, classify_role


class Position(namedtuple("Position", ["course", "fret", "pitch_class", "role"])):
    """A matched (course, fret) cell with its role in the construct."""

    __slots__ = ()

    @property
    def is_root(self):
        return self.role == Role.ROOT

    @property
    def cell(self):
        return (self.course, self.fret)

    def to_render_tuple(self):
        """(course, fret, pitch_class, is_root) as consumed by a renderer."""
        return (self.course, self.fret, self.pitch_class, self.is_root)


def find_positions(geometry, construct, tables=DEFAULT_TABLES):
    """
    Scan the geometry for cells whose pitch class belongs to construct.

    Args:
        geometry: Geometry to scan
        construct: Construct to look for
        tables: ConstructTables the construct was built from

    Returns:
        List of Position, ordered course first then fret
    """
    positions = []
    for course, fret, note in geometry.cells():
        role = classify_role(construct, note, tables)
        if role is not None:
            positions.append(Position(course, fret, note, role))
    return positions


def to_render_tuples(positions):
    """Convert positions to renderer tuples."""
    return [position.to_render_tuple() for position in positions]
