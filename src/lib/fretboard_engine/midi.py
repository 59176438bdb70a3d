"""
MIDI export of fretboard voicings.
Turns matched positions into concrete note numbers and mido messages.
"""
import mido

from .constants import Midi as MidiConst


def _clamp(value, lo, hi):
    return max(lo, min(hi, value))


def voicing_notes(geometry, positions):
    """
    Distinct MIDI note numbers sounded by a set of positions.

    Args:
        geometry: Geometry the positions were found on
        positions: Iterable of Position

    Returns:
        Sorted list of MIDI note numbers, lowest first
    """
    return sorted({geometry.midi_note_at(p.course, p.fret) for p in positions})


def chord_messages(notes, channel=MidiConst.CHANNEL_MIN, velocity=MidiConst.VELOCITY_DEFAULT):
    """
    Build note_on and note_off messages for a chord.

    Returns:
        Tuple of (note_on messages, note_off messages)
    """
    channel = _clamp(channel, MidiConst.CHANNEL_MIN, MidiConst.CHANNEL_MAX)
    velocity = _clamp(velocity, MidiConst.VELOCITY_MIN, MidiConst.VELOCITY_MAX)
    notes = [n for n in notes if MidiConst.NOTE_MIN <= n <= MidiConst.NOTE_MAX]
    note_on = [mido.Message("note_on", channel=channel, note=n, velocity=velocity) for n in notes]
    note_off = [mido.Message("note_off", channel=channel, note=n, velocity=0) for n in notes]
    return note_on, note_off


def send_voicing(output, notes, channel=MidiConst.CHANNEL_MIN,
                 velocity=MidiConst.VELOCITY_DEFAULT, hold=None):
    """
    Send a chord to a MIDI output.

    Args:
        output: Anything with send(message), e.g. a mido output port
        notes: MIDI note numbers
        hold: Callable run between note on and note off (e.g. a sleep)

    Note offs are sent even when hold raises (e.g. Ctrl+C during a sleep).
    """
    note_on, note_off = chord_messages(notes, channel, velocity)
    for message in note_on:
        output.send(message)
    try:
        if hold is not None:
            hold()
    finally:
        for message in note_off:
            output.send(message)
    return note_on + note_off


def list_outputs():
    """Names of the MIDI output ports mido can see."""
    return mido.get_output_names()
