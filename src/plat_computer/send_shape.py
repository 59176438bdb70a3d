#!/usr/bin/env python3
"""
List chord shapes on the fretboard and send one to a USB MIDI interface.

Examples:
    send_shape.py C major --inversion first
    send_shape.py A power --send 2 --port "IAC Driver Bus 1"
"""

import argparse
import sys
import time

import mido

from fretboard_engine import FretboardEngine, FretboardError, Inversion, load_config, parse_inversion
from fretboard_engine.midi import list_outputs, send_voicing, voicing_notes


def build_parser():
    parser = argparse.ArgumentParser(description="Find playable chord shapes and preview them over MIDI.")
    parser.add_argument("root", help="Root note, e.g. C, F#, Bb")
    parser.add_argument("kind", help="Chord quality or scale kind, e.g. major, power, minor-pentatonic")
    parser.add_argument("--inversion", default="all", help="all, root, first or second")
    parser.add_argument("--config", help="YAML file with tuning and construct tables")
    parser.add_argument("--send", type=int, metavar="N", help="Send shape number N over MIDI")
    parser.add_argument("--port", help="MIDI output port name (default: first available)")
    parser.add_argument("--hold", type=float, default=1.0, help="Seconds to hold the chord")
    return parser


def print_shapes(engine, root, kind, inversion):
    """Print matching shapes (or all positions for scales); return the shapes."""
    print(engine.get_display_name(root, kind) + ":  " + engine.get_formula(root, kind))

    shapes = engine.get_shapes(root, kind)
    if not shapes:
        for course, fret, note, is_root in engine.get_highlights(root, kind):
            print(f"  course {course}  fret {fret:>2}  {note}{' (root)' if is_root else ''}")
        return []

    inversion = parse_inversion(inversion)
    selected = [s for s in shapes if inversion in (Inversion.ALL, s.inversion)]
    if not selected:
        print("No shapes for that inversion.")
    for i, shape in enumerate(selected):
        label = shape.inversion.value if shape.inversion else "-"
        cells = ", ".join(f"{p.course}/{p.fret}:{p.pitch_class}" for p in shape.positions)
        print(f"  [{i}] courses {shape.base_course}-{shape.base_course + 2}, "
              f"frets {shape.base_fret}+  {label:<16} {cells}")
    return selected


def send_shape(engine, shape, port_name, hold):
    outputs = list_outputs()
    if not outputs:
        print("No MIDI output ports found!")
        return False
    if port_name is None:
        port_name = outputs[0]
        print(f"Using first available port: {port_name}")

    notes = voicing_notes(engine.geometry, shape.positions)
    with mido.open_output(port_name) as outport:
        for message in send_voicing(outport, notes, hold=lambda: time.sleep(hold)):
            print(f"Sent: {message}")
    return True


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config) if args.config else None
        engine = FretboardEngine(config)
        shapes = print_shapes(engine, args.root, args.kind, args.inversion)
        if args.send is not None:
            if not 0 <= args.send < len(shapes):
                print(f"Error: no shape number {args.send}")
                return 1
            if not send_shape(engine, shapes[args.send], args.port, args.hold):
                return 1
    except FretboardError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nStopped by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
