"""Command that runs the application's frame loop."""

from __future__ import annotations

import argparse
import itertools
import sys

from gameframe.client.defines import KeyState
from gameframe.client.main_app import MainApp
from gameframe.structs import EngineError

DEFAULT_TIME_DELTA = 0.0016


def run(app, frames=None, time_delta=DEFAULT_TIME_DELTA) -> int:
    """Update and render ``frames`` times (forever if None); return frames completed.

    The loop stops early when rendering fails or on a keyboard interrupt.
    """
    if frames is not None and frames < 0:
        raise ValueError(f"number of frames cannot be negative: {frames}")
    steps = itertools.count() if frames is None else range(frames)
    completed = 0
    try:
        for _ in steps:
            app.update(time_delta)
            try:
                app.render()
            except EngineError:
                break
            completed += 1
    except KeyboardInterrupt:
        pass
    return completed


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="gameframe", description="Run the game loop.")
    parser.add_argument("--frames", type=int, default=None, help="frames to run (default: until interrupted)")
    parser.add_argument("--time-delta", type=float, default=DEFAULT_TIME_DELTA, help="seconds per frame")
    parser.add_argument("--key", action="append", default=[], help="key held down for the whole run")
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames cannot be negative")

    try:
        app = MainApp.create(KeyState(key.upper() for key in args.key))
    except EngineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        completed = run(app, args.frames, args.time_delta)
    finally:
        app.close()
    print(f"{completed} frames, title: {app.window.title}")
    return 0


if __name__ == "__main__":
    sys.exit(main())