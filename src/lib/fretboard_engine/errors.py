"""
Exceptions raised by the fretboard engine.
"""


class FretboardError(Exception):
    """Base class for all engine errors."""


class InvalidPitchClassError(FretboardError, ValueError):
    """Note name or number outside the 12-tone alphabet."""


class RangeError(FretboardError, IndexError):
    """Course or fret index outside the geometry bounds."""


class UnsupportedConstructError(FretboardError, ValueError):
    """Unknown chord quality, scale kind, progression or inversion filter."""


class ConfigError(FretboardError, ValueError):
    """Malformed tuning or construct table configuration."""
