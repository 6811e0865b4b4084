"""cairo_examples: a small tour of the cairo drawing model with pycairo.

Each demo draws onto a 200x200 ARGB32 surface and writes one PNG into
example_output/ (the directory must already exist).

Usage:
    python -m cairo_examples              # all demos
    python -m cairo_examples paint mask   # a subset
    python -m cairo_examples --list       # list available

Requires: pip install pycairo
"""
