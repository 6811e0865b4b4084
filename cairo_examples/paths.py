"""Path construction and user-space transforms."""

import math

from ._common import OUTPUT_DIR, new_canvas, save

# ----------------------------
# Curves
# ----------------------------

def curves(output_dir=OUTPUT_DIR):
    """
    Segments, an arc and a bezier curve linked into one closed path.
    Adapted from the cairo tutorial.
    """
    surface, ctx = new_canvas()

    ctx.move_to(50, 50)

    # linked lines, the second one relative to the current point
    ctx.line_to(100, 75)
    ctx.rel_line_to(50, -25)

    # arc through (150, 50) and (150, 150), angles increase clockwise on screen
    ctx.arc(100, 100, 50 * math.sqrt(2), -0.25 * math.pi, 0.25 * math.pi)

    # back towards the left with a curve
    ctx.rel_curve_to(-50, -25, -50, 25, -100, 0)

    # straight line to the start of the sub-path
    ctx.close_path()

    ctx.set_source_rgb(6 / 255, 117 / 255, 114 / 255)
    ctx.stroke()

    out = save(surface, "curves", output_dir)
    surface.finish()
    return out


# ----------------------------
# Scale
# ----------------------------

def scale(output_dir=OUTPUT_DIR):
    """
    Work in a unit square instead of pixels.
    The frame is 150px wide and high, moved by 25px (1/6 of 150) to center it.
    """
    surface, ctx = new_canvas()

    ctx.scale(150, 150)
    ctx.translate(1 / 6, 1 / 6)

    # fill the whole working frame
    ctx.rectangle(0, 0, 1, 1)
    ctx.set_source_rgb(1, 1, 0)
    ctx.fill()

    out = save(surface, "scale", output_dir)
    surface.finish()
    return out
