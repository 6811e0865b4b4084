from __future__ import annotations

from cairo_examples.paths import curves, scale

TEAL = (255, 6, 117, 114)
YELLOW = (255, 255, 255, 0)


def test_curves_strokes_closed_outline(out_dir: str, read_png, pixel) -> None:
    image = read_png(curves(output_dir=out_dir))

    # close_path draws the vertical edge back to (50, 50)
    assert pixel(image, 50, 75) == TEAL
    assert pixel(image, 50, 120) == TEAL
    # stroked, not filled
    assert pixel(image, 100, 100) == (0, 0, 0, 0)
    assert pixel(image, 10, 10) == (0, 0, 0, 0)


def test_scale_maps_unit_square_to_centered_frame(out_dir: str, read_png, pixel) -> None:
    image = read_png(scale(output_dir=out_dir))

    assert (image.get_width(), image.get_height()) == (200, 200)
    for x, y in [(100, 100), (27, 27), (172, 172), (27, 172)]:
        assert pixel(image, x, y) == YELLOW
    for x, y in [(10, 10), (22, 100), (178, 100), (100, 22), (100, 178)]:
        assert pixel(image, x, y) == (0, 0, 0, 0)
