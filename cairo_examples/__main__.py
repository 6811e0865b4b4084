"""CLI entry point for cairo_examples.

Invoke as:  python -m cairo_examples [demo ...]
"""

import argparse
import sys

import cairo

from ._common import OUTPUT_DIR
from .basics import basics, paint, principle, rand_lines
from .paths import curves, scale
from .sources import mask, pattern, source1, source2

# ----------------------------
# Demo registry
# ----------------------------

DEMOS = [
    ("principle", principle),
    ("paint", paint),
    ("rand_lines", rand_lines),
    ("basics", basics),
    ("mask", mask),
    ("source1", source1),
    ("source2", source2),
    ("curves", curves),
    ("pattern", pattern),
    ("scale", scale),
]


def describe_failure(name, err):
    """Turn a drawing error into a one line message naming what failed."""
    status = getattr(err, "status", None)
    if isinstance(err, MemoryError) or status == cairo.STATUS_INVALID_SIZE:
        kind = "failed to allocate surface"
    elif isinstance(err, OSError):
        # cairo.IOError is an OSError as well
        kind = "failed to write png"
    else:
        kind = "failed to draw"
    return f"{name}: {kind}: {err}"


def run(names=None, output_dir=OUTPUT_DIR):
    """
    Run the selected demos (all of them by default) in registry order.
    The first failure stops everything: the message goes to stderr and 1 is returned.
    """
    selected = [(n, f) for n, f in DEMOS if names is None or n in names]
    for name, func in selected:
        try:
            func(output_dir=output_dir)
        except (cairo.Error, MemoryError, OSError) as err:
            print(describe_failure(name, err), file=sys.stderr)
            return 1

    print(f"\nGenerated {len(selected)} image(s) in {output_dir}.")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw the cairo example images.")
    parser.add_argument("demos", nargs="*", metavar="demo", help="demos to draw (default: all)")
    parser.add_argument("--list", action="store_true", help="list available demos")
    parser.add_argument(
        "-o", "--output-dir", default=OUTPUT_DIR,
        help=f"existing directory to write images into (default: {OUTPUT_DIR})",
    )
    args = parser.parse_args(argv)

    if args.list:
        print("Available demos:")
        for name, _ in DEMOS:
            print(f"  {name}.png")
        return 0

    known = {name for name, _ in DEMOS}
    unknown = [d for d in args.demos if d not in known]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)} (use --list)")

    return run(args.demos or None, args.output_dir)


if __name__ == "__main__":
    sys.exit(main())
