"""Command-line entry point: analyze or compare image files."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from pixelsight.engine.analyzer import analyze_many
from pixelsight.engine.compare import are_compatible, compare
from pixelsight.engine.errors import PixelSightError
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.imaging.decoder import load_image
from pixelsight.models.analysis import AnalysisModel


def _load_all(paths: list[str]) -> list[PixelBuffer]:
    buffers = []
    for path in paths:
        if not os.path.exists(path):
            raise FileNotFoundError(f"File not found: {path}")
        buffers.append(load_image(path))
    return buffers


def cmd_analyze(args: argparse.Namespace) -> int:
    results = analyze_many(_load_all(args.images))
    for path, result in zip(args.images, results):
        payload = {"file": path, "analysis": AnalysisModel.from_result(result).model_dump(mode="json")}
        print(json.dumps(payload, indent=args.indent))
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    first, second = analyze_many(_load_all([args.first, args.second]))
    result = compare(first, second)
    payload = {
        "first": args.first,
        "second": args.second,
        "score": result.score,
        "reason": result.reason,
        "compatible": are_compatible(first, second),
    }
    print(json.dumps(payload, indent=args.indent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelsight",
        description="PixelSight — offline heuristic image characterization",
    )
    parser.add_argument("--log-level", default="warning", help="Logging level (default: warning)")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Analyze one or more images")
    p_analyze.add_argument("images", nargs="+", help="Image files")
    p_analyze.set_defaults(func=cmd_analyze)

    p_compare = sub.add_parser("compare", help="Compare two images")
    p_compare.add_argument("first", help="First image file")
    p_compare.add_argument("second", help="Second image file")
    p_compare.set_defaults(func=cmd_compare)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return args.func(args)
    except (FileNotFoundError, PixelSightError) as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
