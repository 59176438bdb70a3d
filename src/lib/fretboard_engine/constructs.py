"""
Construct generation - chord and scale member sets.
Pure logic, no instrument dependencies.
"""
from collections import namedtuple
from types import MappingProxyType

from .constants import ConstructFamily, Music, Role
from .errors import UnsupportedConstructError
from .music_theory import interval_from, pitch_class, transpose

# Chord qualities as (interval, role) pairs from the root.
# Power chords carry no third: nothing may ever map to Role.THIRD for them.
CHORD_TYPES = {
    "major": ((0, Role.ROOT), (4, Role.THIRD), (7, Role.FIFTH)),
    "minor": ((0, Role.ROOT), (3, Role.THIRD), (7, Role.FIFTH)),
    "diminished": ((0, Role.ROOT), (3, Role.THIRD), (6, Role.FIFTH)),
    "augmented": ((0, Role.ROOT), (4, Role.THIRD), (8, Role.FIFTH)),
    "power": ((0, Role.ROOT), (7, Role.FIFTH)),
}

# Scale definitions as interval patterns from root
SCALES = {
    "pentatonic": (0, 2, 4, 7, 9),
    "major_scale": (0, 2, 4, 5, 7, 9, 11),  # W-W-H-W-W-W-H
    "minor_pentatonic": (0, 3, 5, 7, 10),
    "minor_pentatonic_b3": (0, 2, 3, 7, 10),
    "minor_pentatonic_b7": (0, 3, 5, 7, 9),
    "natural_minor": (0, 2, 3, 5, 7, 8, 10),  # W-H-W-W-H-W-W
}

# One member of a construct
Member = namedtuple("Member", ["pitch_class", "role"])


class Construct(namedtuple("Construct", ["root", "kind", "family"])):
    """A root pitch class plus a chord quality or scale kind."""

    __slots__ = ()

    @property
    def is_chord(self):
        return self.family == ConstructFamily.CHORD

    @property
    def is_scale(self):
        return self.family == ConstructFamily.SCALE


def _dedupe_intervals(pattern):
    """Drop repeated intervals, first role wins (a doubled root stays a root)."""
    seen = {}
    for interval, role in pattern:
        seen.setdefault(interval % Music.NOTES_PER_OCTAVE, Role(role))
    return tuple(seen.items())


def normalize_kind(kind):
    """Accept "minor-pentatonic" style names as well as underscores."""
    return str(kind).strip().lower().replace("-", "_").replace(" ", "_")


class ConstructTables:
    """
    Read-only interval tables handed to the generator and position finder.
    Both sides read the same interval->role mapping so they stay in lockstep.
    """

    def __init__(self, chords=None, scales=None):
        """
        Args:
            chords: Dict of quality -> iterable of (interval, Role)
            scales: Dict of scale kind -> iterable of intervals
        """
        chords = CHORD_TYPES if chords is None else chords
        scales = SCALES if scales is None else scales

        self._chords = MappingProxyType({
            normalize_kind(name): _dedupe_intervals(pattern) for name, pattern in chords.items()
        })
        self._scales = MappingProxyType({
            normalize_kind(name): tuple(dict.fromkeys(interval % Music.NOTES_PER_OCTAVE for interval in pattern))
            for name, pattern in scales.items()
        })
        self._chord_roles = MappingProxyType({
            name: MappingProxyType(dict(pattern)) for name, pattern in self._chords.items()
        })

    def __eq__(self, other):
        if not isinstance(other, ConstructTables):
            return NotImplemented
        return dict(self._chords) == dict(other._chords) and dict(self._scales) == dict(other._scales)

    __hash__ = None

    @property
    def chords(self):
        return self._chords

    @property
    def scales(self):
        return self._scales

    def get_chord_names(self):
        return list(self._chords.keys())

    def get_scale_names(self):
        return list(self._scales.keys())

    def family_of(self, kind):
        """Return ConstructFamily for a kind; chords win if a name is in both tables."""
        kind = normalize_kind(kind)
        if kind in self._chords:
            return ConstructFamily.CHORD
        if kind in self._scales:
            return ConstructFamily.SCALE
        raise UnsupportedConstructError("Unknown chord quality or scale kind: %r" % (kind,))

    def chord_roles(self, quality):
        try:
            return self._chord_roles[normalize_kind(quality)]
        except KeyError:
            raise UnsupportedConstructError("Unknown chord quality: %r" % (quality,))

    def scale_intervals(self, scale_kind):
        try:
            return self._scales[normalize_kind(scale_kind)]
        except KeyError:
            raise UnsupportedConstructError("Unknown scale kind: %r" % (scale_kind,))


DEFAULT_TABLES = ConstructTables()


def make_construct(root, kind, tables=DEFAULT_TABLES, family=None):
    """
    Build a Construct, validating the root and resolving the kind's family.

    Args:
        root: Root pitch class (any spelling accepted by pitch_class)
        kind: Chord quality or scale kind name
        family: Force ConstructFamily.CHORD or SCALE for names in both tables
    """
    kind = normalize_kind(kind)
    if family is None:
        family = tables.family_of(kind)
    elif family == ConstructFamily.CHORD:
        tables.chord_roles(kind)
    elif family == ConstructFamily.SCALE:
        tables.scale_intervals(kind)
    else:
        raise UnsupportedConstructError("Unknown construct family: %r" % (family,))
    return Construct(pitch_class(root), kind, family)


def chord_members(root, quality, tables=DEFAULT_TABLES):
    """
    Get the members of a chord.

    Returns:
        List of Member(pitch_class, role), root first
    """
    root = pitch_class(root)
    pattern = tables.chords.get(normalize_kind(quality))
    if pattern is None:
        raise UnsupportedConstructError("Unknown chord quality: %r" % (quality,))
    return [Member(transpose(root, interval), role) for interval, role in pattern]


def scale_members(root, scale_kind, tables=DEFAULT_TABLES):
    """Get the members of a scale; only offset 0 is the root."""
    root = pitch_class(root)
    return [
        Member(transpose(root, interval), Role.ROOT if interval == 0 else Role.SCALE_DEGREE)
        for interval in tables.scale_intervals(scale_kind)
    ]


def get_construct_members(root, kind, tables=DEFAULT_TABLES):
    """Members of a chord or scale, given a Construct or a root and kind."""
    construct = kind if isinstance(kind, Construct) else make_construct(root, kind, tables)
    if construct.is_chord:
        return chord_members(construct.root, construct.kind, tables)
    return scale_members(construct.root, construct.kind, tables)


def classify_role(construct, note, tables=DEFAULT_TABLES):
    """
    Role of note within construct, or None when it is not a member.
    Derived from the interval to the root with the generator's own table.
    """
    interval = interval_from(construct.root, note)
    if construct.is_chord:
        return tables.chord_roles(construct.kind).get(interval)
    if interval in tables.scale_intervals(construct.kind):
        return Role.ROOT if interval == 0 else Role.SCALE_DEGREE
    return None


def required_roles(construct, tables=DEFAULT_TABLES):
    """Roles a shape window has to cover for a chord construct."""
    return frozenset(tables.chord_roles(construct.kind).values())


def get_formula(root, kind, tables=DEFAULT_TABLES):
    """Member pitch classes joined for display, e.g. "C - E - G"."""
    return " - ".join(member.pitch_class for member in get_construct_members(root, kind, tables))


def get_display_name(root, kind, tables=DEFAULT_TABLES):
    """Return formatted construct name, e.g. "C Minor Pentatonic"."""
    construct = make_construct(root, kind, tables)
    words = [word[:1].upper() + word[1:] for word in construct.kind.split("_") if word]
    return construct.root + " " + " ".join(words)
