"""
Unit tests for YAML configuration loading.
"""
import os
import sys
import tempfile

sys.path.insert(0, "src/lib")

from fretboard_engine.config import default_config, load_config
from fretboard_engine.constants import Fretboard, Role
from fretboard_engine.constructs import chord_members, scale_members
from fretboard_engine.errors import ConfigError, InvalidPitchClassError
from fretboard_engine.fretboard import Geometry

DROP_D = """
tuning: [E4, B3, G3, D3, A2, D2]
max_fret: 15
chords:
  sus4: [[0, root], [5, third], [7, fifth]]
  power: [[0, root], [7, fifth], [0, third]]
scales:
  blues: [0, 3, 5, 6, 7, 10]
"""


def _raises(exc_type, func, *args):
    try:
        func(*args)
    except exc_type:
        return True
    return False


class TestLoadConfig:
    """Tests for configuration parsing."""

    def test_defaults(self):
        config = default_config()
        assert config.max_fret == Fretboard.MAX_FRET
        assert "power" in config.tables.get_chord_names()
        assert load_config("") == config

    def test_drop_d(self):
        config = load_config(DROP_D)
        geometry = Geometry(config.tuning, config.max_fret)
        assert geometry.note_at(5, 0) == "D"
        assert geometry.midi_note_at(5, 0) == 38
        assert geometry.max_fret == 15

    def test_tables_merged(self):
        tables = load_config(DROP_D).tables
        assert [m.pitch_class for m in chord_members("C", "sus4", tables)] == ["C", "F", "G"]
        assert [m.pitch_class for m in scale_members("A", "blues", tables)] == ["A", "C", "D", "D#", "E", "G"]
        assert "major" in tables.get_chord_names()

    def test_power_duplicate_root_has_no_third(self):
        tables = load_config(DROP_D).tables
        members = chord_members("E", "power", tables)
        assert [m.role for m in members] == [Role.ROOT, Role.FIFTH]

    def test_from_file(self):
        fd, path = tempfile.mkstemp(suffix=".yaml")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(DROP_D)
            assert load_config(path).max_fret == 15
        finally:
            os.remove(path)

    def test_errors(self):
        assert _raises(ConfigError, load_config, "tuning: [E4, B3, G3, D3, A2]")
        assert _raises(InvalidPitchClassError, load_config, "tuning: [E4, B3, G3, D3, A2, H2]")
        assert _raises(ConfigError, load_config, "max_fret: -1")
        assert _raises(ConfigError, load_config, "max_fret: lots")
        assert _raises(ConfigError, load_config, "chords:\n  odd: [[0, tonic]]")
        assert _raises(ConfigError, load_config, "scales:\n  odd: [one, two]")
        assert _raises(ConfigError, load_config, "- just\n- a list")
        assert _raises(ConfigError, load_config, "tuning: [1, 2, 3, 4, 5, 6]")
