"""Shared canvas setup, source builders and PNG export for the demos."""

import os

import cairo

# ----------------------------
# Canvas and output settings
# ----------------------------

WIDTH, HEIGHT = 200, 200
OUTPUT_DIR = "example_output"


def new_canvas(width=WIDTH, height=HEIGHT):
    """
    Create the surface (the image we draw into) and the context bound to it.
    The context is the pen: every drawing call goes through it.
    The surface starts fully transparent.
    """
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    ctx = cairo.Context(surface)
    return surface, ctx


def save(surface, name, output_dir=OUTPUT_DIR):
    """
    Write the surface to <output_dir>/<name>.png and return the path.
    The output directory is not created here; writing into a missing
    directory raises OSError.
    """
    out = os.path.join(output_dir, f"{name}.png")
    surface.write_to_png(out)
    print(f"{out} saved")
    return out


# ----------------------------
# Sources
# ----------------------------

def _add_stops(gradient, stops):
    # offsets are passed through unchecked, cairo decides what unordered stops look like
    for stop in stops:
        if len(stop) == 5:
            gradient.add_color_stop_rgba(*stop)
        else:
            gradient.add_color_stop_rgb(*stop)
    return gradient


def linear_gradient(x0, y0, x1, y1, stops):
    """
    Linear gradient from (x0, y0) at offset 0 to (x1, y1) at offset 1.
    stops: iterable of (offset, r, g, b) or (offset, r, g, b, a)
    """
    return _add_stops(cairo.LinearGradient(x0, y0, x1, y1), stops)


def radial_gradient(cx0, cy0, r0, cx1, cy1, r1, stops):
    """Radial gradient between a start circle and an end circle, same stops format."""
    return _add_stops(cairo.RadialGradient(cx0, cy0, r0, cx1, cy1, r1), stops)


def surface_pattern(surface, extend=None, matrix=None):
    """
    Wrap an already drawn surface so it can be used as a source.
    extend: one of the cairo.EXTEND_* policies for sampling outside the surface
    matrix: cairo.Matrix mapping user space to pattern space
    """
    pattern = cairo.SurfacePattern(surface)
    if extend is not None:
        pattern.set_extend(extend)
    if matrix is not None:
        pattern.set_matrix(matrix)
    return pattern


# ----------------------------
# Text
# ----------------------------

def text_origin(ctx, text, cx, cy):
    """
    Return the point to move_to so that the ink of text is centered on (cx, cy)
    with the context's current font. Nothing is drawn.
    """
    extents = ctx.text_extents(text)
    x = cx - extents.width / 2 - extents.x_bearing
    y = cy - extents.height / 2 - extents.y_bearing
    return x, y
