"""
Engine configuration - tuning, fret count and construct tables.
Loaded from YAML or built from the defaults.
"""
import os
from collections import namedtuple

import yaml

from .constants import Fretboard, Role
from .constructs import CHORD_TYPES, SCALES, ConstructTables
from .errors import ConfigError
from .fretboard import Tuning

EngineConfig = namedtuple("EngineConfig", ["tuning", "max_fret", "tables"])


def default_config():
    """Standard tuning, 22 frets, built-in chord and scale tables."""
    return EngineConfig(Tuning(), Fretboard.MAX_FRET, ConstructTables())


def _parse_chords(raw):
    if not isinstance(raw, dict):
        raise ConfigError("'chords' must be a mapping of quality -> [[interval, role], ...]")
    chords = {}
    for name, pattern in raw.items():
        entries = []
        for entry in pattern or []:
            try:
                interval, role = entry
                entries.append((int(interval), Role(str(role).lower())))
            except (TypeError, ValueError):
                raise ConfigError("Bad chord entry for %r: %r" % (name, entry))
        chords[name] = entries
    return chords


def _parse_scales(raw):
    if not isinstance(raw, dict):
        raise ConfigError("'scales' must be a mapping of kind -> [interval, ...]")
    scales = {}
    for name, pattern in raw.items():
        try:
            scales[name] = [int(interval) for interval in pattern or []]
        except (TypeError, ValueError):
            raise ConfigError("Bad scale intervals for %r: %r" % (name, pattern))
    return scales


def load_config(source):
    """
    Load an EngineConfig from YAML text or a path to a YAML file.

    Example:
        tuning: [E4, B3, G3, D3, A2, D2]
        max_fret: 15
        chords:
          sus2: [[0, root], [2, third], [7, fifth]]
        scales:
          blues: [0, 3, 5, 6, 7, 10]

    Missing keys fall back to the defaults; given chord and scale tables
    are merged over the built-in ones.
    """
    if os.path.isfile(source):
        with open(source, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    else:
        data = yaml.safe_load(source)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping")

    tuning = Tuning(data.get("tuning", Fretboard.STANDARD_TUNING))

    try:
        max_fret = int(data.get("max_fret", Fretboard.MAX_FRET))
    except (TypeError, ValueError):
        raise ConfigError("max_fret must be an integer")
    if max_fret < 0:
        raise ConfigError("max_fret must not be negative, got %d" % max_fret)

    chords = dict(CHORD_TYPES)
    chords.update(_parse_chords(data.get("chords", {})))
    scales = dict(SCALES)
    scales.update(_parse_scales(data.get("scales", {})))

    return EngineConfig(tuning, max_fret, ConstructTables(chords, scales))
