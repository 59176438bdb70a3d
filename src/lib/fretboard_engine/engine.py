"""
Fretboard engine - ties geometry, constructs, positions and shapes together.
Pure logic - no rendering dependencies.
"""
from .config import default_config
from .constants import Inversion
from .constructs import (
    get_construct_members,
    get_display_name,
    get_formula,
    make_construct,
)
from .fretboard import Geometry
from .positions import find_positions, to_render_tuples
from .shapes import find_shape_windows, find_shapes


class FretboardEngine:
    """
    Answers "where on the neck is this chord or scale" queries.
    Holds only read-only configuration; every query is recomputed.
    """

    def __init__(self, config=None):
        """
        Args:
            config: EngineConfig, defaults to standard tuning and built-in tables
        """
        if config is None:
            config = default_config()
        self._config = config
        self._geometry = Geometry(config.tuning, config.max_fret)

    @property
    def geometry(self):
        return self._geometry

    @property
    def tables(self):
        return self._config.tables

    def get_available_kinds(self):
        """Return dict with the available chord qualities and scale kinds."""
        return {
            "chords": self.tables.get_chord_names(),
            "scales": self.tables.get_scale_names(),
        }

    def construct(self, root, kind):
        return make_construct(root, kind, self.tables)

    def get_members(self, root, kind):
        return get_construct_members(root, kind, self.tables)

    def get_positions(self, root, kind):
        """Every position of the construct on the neck."""
        return find_positions(self._geometry, self.construct(root, kind), self.tables)

    def get_shape_positions(self, root, kind, inversion=Inversion.ALL):
        """Positions belonging to shapes of the requested inversion."""
        construct = self.construct(root, kind)
        positions = find_positions(self._geometry, construct, self.tables)
        return find_shapes(
            positions,
            construct,
            inversion,
            self.tables,
            course_count=self._geometry.course_count,
            max_fret=self._geometry.max_fret,
        )

    def get_shapes(self, root, kind):
        """All accepted shape windows (every inversion) for a chord."""
        construct = self.construct(root, kind)
        positions = find_positions(self._geometry, construct, self.tables)
        return find_shape_windows(
            positions,
            construct,
            self.tables,
            course_count=self._geometry.course_count,
            max_fret=self._geometry.max_fret,
        )

    def get_highlights(self, root, kind, inversion=Inversion.ALL):
        """
        Data needed for fretboard rendering.

        Returns:
            List of (course, fret, pitch_class, is_root) tuples
        """
        return to_render_tuples(self.get_shape_positions(root, kind, inversion))

    def get_display_name(self, root, kind):
        return get_display_name(root, kind, self.tables)

    def get_formula(self, root, kind):
        return get_formula(root, kind, self.tables)
