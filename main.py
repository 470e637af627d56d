from __future__ import annotations

import argparse
import math
from typing import Sequence

import config


def finite_float(text: str) -> float:
    """argparse type: a float that is neither inf nor nan."""
    value = float(text)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"expected a finite number, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Chronos clock face with minute notes")
    ap.add_argument("--notes", default=config.NOTES_PATH,
                    help=f"note store file (default: {config.NOTES_PATH})")
    ap.add_argument("--speed", type=finite_float, default=config.START_MULTIPLIER,
                    help="initial time multiplier (clamped at 0)")
    ap.add_argument("--cols", type=int, default=config.COLS,
                    help="grid width in cells")
    ap.add_argument("--rows", type=int, default=config.ROWS,
                    help="grid height in cells")
    ap.add_argument("--fullscreen", action="store_true", default=config.FULLSCREEN)
    ap.add_argument("--screenshot", metavar="PATH",
                    help="render one frame offscreen to PATH and exit")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from app import ChronosApp

    app = ChronosApp(
        notes_path=args.notes,
        multiplier=args.speed,
        cols=args.cols,
        rows=args.rows,
        fullscreen=args.fullscreen,
        headless=bool(args.screenshot),
    )
    if args.screenshot:
        try:
            app.save_screenshot(args.screenshot)
        finally:
            app.close()
        return 0

    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
