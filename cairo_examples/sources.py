"""Sources: gradients, masks, translucent colors and surface patterns.

Most of these are adapted from the cairo tutorial
(https://www.cairographics.org/tutorial/).
"""

import cairo

from ._common import (
    HEIGHT,
    OUTPUT_DIR,
    WIDTH,
    linear_gradient,
    new_canvas,
    radial_gradient,
    save,
    surface_pattern,
)

# ----------------------------
# Gradients and masks
# ----------------------------

def mask(output_dir=OUTPUT_DIR):
    """
    Color with a linear gradient, seen through a radial gradient used as a mask.
    Offset 0 of a gradient sits on its start point (or circle), offset 1 on its end.
    """
    surface, ctx = new_canvas()

    # blue to green along the diagonal
    gradient_lin = linear_gradient(0, 0, WIDTH, HEIGHT, [
        (0, 0, 0.3, 0.8),
        (1, 0, 0.8, 0.3),
    ])
    # opaque at the center, transparent from half way out
    gradient_rad = radial_gradient(100, 100, 10, 100, 100, 140, [
        (0, 0, 0, 0, 1),
        (0.5, 0, 0, 0, 0),
    ])

    ctx.set_source(gradient_lin)
    # only the alpha channel of the mask is used
    ctx.mask(gradient_rad)

    out = save(surface, "mask", output_dir)
    surface.finish()
    return out


def source1(output_dir=OUTPUT_DIR):
    """Change the source between drawings: a black cross under translucent squares"""
    surface, ctx = new_canvas()

    # cross over the whole image, two sub-paths stroked at once
    ctx.set_source_rgb(0, 0, 0)
    ctx.move_to(0, 0)
    ctx.line_to(WIDTH, HEIGHT)
    ctx.move_to(WIDTH, 0)
    ctx.line_to(0, HEIGHT)
    ctx.set_line_width(25)
    ctx.stroke()

    # red, up left
    ctx.rectangle(0, 0, 100, 100)
    ctx.set_source_rgba(225 / 255, 96 / 255, 78 / 255, 0.8)
    ctx.fill()

    # green, low left
    ctx.rectangle(0, 100, 100, 100)
    ctx.set_source_rgba(56 / 255, 215 / 255, 28 / 255, 0.4)
    ctx.fill()

    # blue, up right
    ctx.rectangle(100, 0, 100, 100)
    ctx.set_source_rgba(46 / 255, 147 / 255, 213 / 255, 0.6)
    ctx.fill()

    out = save(surface, "source1", output_dir)
    surface.finish()
    return out


def source2(output_dir=OUTPUT_DIR):
    """A grid filled with one radial gradient, then a striped linear gradient over everything"""
    surface, ctx = new_canvas()

    gradient_rad = radial_gradient(
        WIDTH * 0.25, HEIGHT * 0.25, WIDTH * 0.1,
        WIDTH * 0.5, HEIGHT * 0.5, WIDTH * 0.5,
        [
            (0, 1, 0.8, 0.8),
            (1, 0.9, 0, 0),
        ],
    )

    # 9 x 9 squares with spacing, all in one path
    for i in range(1, 10):
        for j in range(1, 10):
            ctx.rectangle(
                WIDTH * (i / 10 - 0.04),
                HEIGHT * (j / 10 - 0.04),
                WIDTH * 0.08,
                HEIGHT * 0.08,
            )
    ctx.set_source(gradient_rad)
    ctx.fill()

    gradient_lin = linear_gradient(WIDTH * 0.25, HEIGHT * 0.35, WIDTH * 0.75, HEIGHT * 0.65, [
        (0, 1, 1, 1, 0),
        (0.25, 0, 1, 0, 0.5),
        (0.5, 1, 1, 1, 0),
        (0.75, 0, 0, 1, 0.5),
        (1, 1, 1, 1, 0),
    ])

    ctx.rectangle(0, 0, WIDTH, HEIGHT)
    ctx.set_source(gradient_lin)
    ctx.fill()

    out = save(surface, "source2", output_dir)
    surface.finish()
    return out


# ----------------------------
# Patterns
# ----------------------------

def pattern(output_dir=OUTPUT_DIR):
    """
    Reuse a drawing as a repeating source.
    A second context draws a red line on the same surface, the surface is
    wrapped into a pattern, stretched and repeated, then painted back with ATOP.
    """
    surface, ctx = new_canvas()
    ctx.set_source_rgba(1, 1, 1, 1)
    ctx.paint()

    # red vertical line drawn through a second pen
    pattern_ctx = cairo.Context(surface)
    pattern_ctx.set_source_rgb(1, 0, 0)
    pattern_ctx.set_line_width(8)
    pattern_ctx.move_to(100, 0)
    pattern_ctx.line_to(100, HEIGHT)
    pattern_ctx.stroke()

    # x_new = xx * x + xy * y + x0, y_new = yx * x + yy * y + y0
    # xx and yy must be non zero or the matrix is not invertible
    matrix = cairo.Matrix(60, 0, 0, 1, 10, 0)
    line_pattern = surface_pattern(surface, extend=cairo.EXTEND_REPEAT, matrix=matrix)

    ctx.set_operator(cairo.OPERATOR_ATOP)
    ctx.set_source(line_pattern)
    ctx.paint()

    out = save(surface, "pattern", output_dir)
    surface.finish()
    return out
