"""Print a gradient, one color per line.

Usage:
    python -m chromalerp
    python -m chromalerp --anchor 127,0,0 --anchor 0,0,127
"""
import argparse
from typing import List, Optional, Sequence, Tuple

from .gradient import DEFAULT_ANCHORS, gradient_from_triples


def parse_anchor(text: str) -> Tuple[int, int, int]:
    """Parse ``"R,G,B"`` into an integer triple."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected R,G,B but got {text!r}")
    try:
        r, g, b = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"components must be integers: {text!r}")
    return r, g, b


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromalerp",
        description="Linearly interpolate 100 colors across a sequence of RGB anchors.",
    )
    parser.add_argument(
        "--anchor",
        dest="anchors",
        action="append",
        type=parse_anchor,
        metavar="R,G,B",
        help="anchor color, repeat in gradient order (default: %s)"
        % " ".join(",".join(str(c) for c in a) for a in DEFAULT_ANCHORS),
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    anchors: List[Tuple[int, int, int]] = args.anchors or list(DEFAULT_ANCHORS)

    for rgb in gradient_from_triples(anchors):
        print(rgb)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
