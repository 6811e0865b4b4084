"""First steps: surface, context, paint, fill, stroke and text."""

import random

import cairo

from ._common import HEIGHT, OUTPUT_DIR, WIDTH, new_canvas, save, text_origin

# ----------------------------
# Principle
# ----------------------------

def principle(output_dir=OUTPUT_DIR):
    """
    The basic loop of every drawing:
    the surface is what we draw into, the context is the pen we draw with,
    and the surface is saved to a file at the end.
    """
    surface, ctx = new_canvas()

    # change the pen, then give it a path to follow
    ctx.set_source_rgb(0.8, 0.8, 0.8)
    ctx.rectangle(50, 50, 100, 100)

    # fill the inside of the path (stroke would draw its outline)
    ctx.fill()

    out = save(surface, "principle", output_dir)
    surface.finish()
    return out


def paint(output_dir=OUTPUT_DIR):
    """paint() covers the whole surface with the current source, no path needed"""
    surface, ctx = new_canvas()

    ctx.set_source_rgb(1, 0, 0)
    ctx.paint()

    out = save(surface, "paint", output_dir)
    surface.finish()
    return out


# ----------------------------
# Random lines
# ----------------------------

def rand_lines(output_dir=OUTPUT_DIR, size=WIDTH, rng=None):
    """
    Sketch a chain of linked lines to random points, then stroke it once.
    Adapted from Keith Peters' intro to cairo graphics.

    size: width and height of the square canvas
    rng: random.Random to draw points from, the unseeded module source by default
    """
    rng = rng if rng is not None else random
    surface, ctx = new_canvas(size, size)
    count = 80 if size <= WIDTH else 100

    # white canvas
    ctx.set_source_rgb(1, 1, 1)
    ctx.paint()

    # black pen
    ctx.set_source_rgb(0, 0, 0)
    for _ in range(count):
        # with no current point the first line_to acts as a move_to
        ctx.line_to(rng.random() * size, rng.random() * size)
    ctx.stroke()

    out = save(surface, "rand_lines", output_dir)
    surface.finish()
    return out


# ----------------------------
# Basics
# ----------------------------

def basics(output_dir=OUTPUT_DIR):
    """
    Background, framed border and centered text.
    Adapted from the cairo tutorial.
    """
    surface, ctx = new_canvas()

    # black background
    ctx.set_source_rgb(0, 0, 0)
    ctx.paint()

    # frame: half of the 8px line falls outside the surface
    ctx.set_line_width(8)
    ctx.set_source_rgb(26 / 255, 188 / 255, 156 / 255)
    ctx.rectangle(0, 0, WIDTH, HEIGHT)
    ctx.stroke()

    # text in the middle, positioned from its measured extents
    ctx.set_source_rgb(204 / 255, 174 / 255, 249 / 255)
    ctx.select_font_face("Georgia", cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD)
    ctx.set_font_size(40)
    text = "cairo"
    ctx.move_to(*text_origin(ctx, text, WIDTH / 2, HEIGHT / 2))
    ctx.show_text(text)

    out = save(surface, "basics", output_dir)
    surface.finish()
    return out
