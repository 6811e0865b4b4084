from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator, Tuple

import cairo
import pytest

Pixel = Tuple[int, int, int, int]


def _decode(surface: cairo.ImageSurface, data: bytes, x: int, y: int) -> Pixel:
    offset = y * surface.get_stride() + 4 * x
    word = int.from_bytes(data[offset : offset + 4], sys.byteorder)
    # opaque PNGs load back as RGB24 where the top byte is unused
    if surface.get_format() == cairo.FORMAT_ARGB32:
        alpha = word >> 24
    else:
        alpha = 0xFF
    return alpha, (word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF


def pixel_at(surface: cairo.ImageSurface, x: int, y: int) -> Pixel:
    """Return (a, r, g, b) of one pixel, colors premultiplied as cairo stores them."""
    surface.flush()
    return _decode(surface, bytes(surface.get_data()), x, y)


def all_pixels(surface: cairo.ImageSurface) -> Iterator[Pixel]:
    surface.flush()
    data = bytes(surface.get_data())
    for y in range(surface.get_height()):
        for x in range(surface.get_width()):
            yield _decode(surface, data, x, y)


@pytest.fixture
def out_dir(tmp_path: Path) -> str:
    return str(tmp_path)


@pytest.fixture
def read_png() -> Callable[[str], cairo.ImageSurface]:
    def _read(path: str) -> cairo.ImageSurface:
        return cairo.ImageSurface.create_from_png(path)

    return _read


@pytest.fixture
def pixel() -> Callable[[cairo.ImageSurface, int, int], Pixel]:
    return pixel_at


@pytest.fixture
def pixels() -> Callable[[cairo.ImageSurface], Iterator[Pixel]]:
    return all_pixels
