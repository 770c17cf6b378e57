"""Command-line entry point: print a position and its pseudo-legal moves."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.config import load_settings, parse_log_level
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import position_from_fen
from chessrules.core.types import Square, is_valid_square, parse_square, square_name

_LOGGER = logging.getLogger(__name__)


def parse_square_arg(text: str) -> Square:
    """Accept either a square index (``52``) or a name (``e2``)."""
    if text.isascii() and text.isdigit():
        sq = int(text)
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq}")
        return sq
    return parse_square(text)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chessrules",
        description="List pseudo-legal destinations for pieces in a FEN position.",
    )
    ap.add_argument("squares", nargs="*", help="Source squares, by index or name (e.g. e2)")
    ap.add_argument("--fen", help="Position to inspect (default: starting position)")
    ap.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        level = parse_log_level(args.log_level) if args.log_level else settings.log_level
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    fen = settings.start_fen if args.fen is None else args.fen
    try:
        position = position_from_fen(fen)
        sources = [parse_square_arg(s) for s in args.squares]
    except ValueError as e:
        _LOGGER.error("Rejected input: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    gen = MoveGenerator(position)
    print(repr(position))

    if not sources:
        for move in gen.generate_moves():
            print(move.uci)
        return 0

    for sq in sources:
        piece = position.piece_at(sq)
        targets = " ".join(square_name(t) for t in gen.legal_destinations(sq))
        label = str(piece) if piece is not None else "-"
        print(f"{square_name(sq)} {label}: {targets}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
