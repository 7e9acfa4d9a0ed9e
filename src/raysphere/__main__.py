"""
Command-line entry point for raysphere.

Usage:
    python -m raysphere render out.png --preset preview --radius 1.0
    python -m raysphere check
"""

import argparse
import math
import sys

from raysphere.core.vector import Vector3
from raysphere.geometry.sphere import Sphere
from raysphere.binding import intersect
from raysphere.renderer.silhouette import QUALITY_PRESETS, SilhouetteRenderer

# Reference ray and its expected hit, computed in double precision.
REFERENCE_CASE = {
    "dir": {"x": 0.09690059143094072, "y": 0.026037001021610728, "z": 0.9949534411007053},
    "ori": {"x": 0.0, "y": 2.0, "z": -15.0},
    "c": {"x": 1.5524163574746117, "y": 1.6, "z": 0.001858237138153862},
    "radius": 0.8,
    "col": {"x": 1.0, "y": 1.0, "z": 1.0},
}
REFERENCE_T = 15.006141139311929
REFERENCE_PI = (1.4541039514954965, 2.3907149121746993, -0.0695882357987383)
REFERENCE_REL_TOL = 1e-9


def _parse_triple(text: str):
    parts = text.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected three comma separated numbers, got {text!r}")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected three comma separated numbers, got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raysphere",
        description="Ray-sphere intersection demo and reference check"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a sphere silhouette to an image file")
    render.add_argument("output", type=str, help="Output image path (format from extension)")
    render.add_argument(
        "--preset", "-p",
        choices=sorted(QUALITY_PRESETS),
        default="preview",
        help="Named resolution (default: preview)",
    )
    render.add_argument("--width", "-W", type=int, default=None, help="Override preset width")
    render.add_argument("--height", "-H", type=int, default=None, help="Override preset height")
    render.add_argument(
        "--center",
        type=_parse_triple,
        default=(0.7, 1.5, 0.4),
        help="Sphere center as x,y,z (default: 0.7,1.5,0.4)",
    )
    render.add_argument("--radius", type=float, default=1.0, help="Sphere radius (default: 1.0)")
    render.add_argument(
        "--color",
        type=_parse_triple,
        default=(200.0, 100.0, 255.0),
        help="Sphere colour as r,g,b in 0-255 (default: 200,100,255)",
    )
    render.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")

    sub.add_parser("check", help="Evaluate the reference ray and compare with the expected hit")
    return parser


def run_render(args) -> int:
    preset = QUALITY_PRESETS[args.preset]
    width = args.width if args.width is not None else preset["width"]
    height = args.height if args.height is not None else preset["height"]

    sphere = Sphere(Vector3(*args.center), args.radius, args.color)
    renderer = SilhouetteRenderer(width, height, verbose=not args.quiet)
    renderer.render(sphere)
    renderer.save(args.output)
    return 0


def run_check() -> int:
    case = REFERENCE_CASE
    result = intersect(case["dir"], case["ori"], case["c"], case["radius"], case["col"])

    print(f"Expect t: {REFERENCE_T}")
    print(f"Expect pi: {REFERENCE_PI}")
    if result is None:
        print("Result: no hit")
        return 1

    pi = (result["pi"]["x"], result["pi"]["y"], result["pi"]["z"])
    print(f"Result t: {result['t']}")
    print(f"Result pi: {pi}")

    ok = math.isclose(result["t"], REFERENCE_T, rel_tol=REFERENCE_REL_TOL) and all(
        math.isclose(a, b, rel_tol=REFERENCE_REL_TOL) for a, b in zip(pi, REFERENCE_PI))
    print("OK" if ok else "MISMATCH")
    return 0 if ok else 1


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        for name in ("width", "height"):
            value = getattr(args, name)
            if value is not None and value <= 0:
                parser.error(f"--{name} must be positive")
        return run_render(args)
    return run_check()


if __name__ == "__main__":
    sys.exit(main())
