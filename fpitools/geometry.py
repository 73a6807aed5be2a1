"""Geometric operations and 3x3 convolution on RGB images."""

from itertools import product

import numpy as np

from fpitools.tones import _as_rgb


def mirror_vertical(image):
    """Flip the image upside down."""
    return _as_rgb(image)[::-1].copy()


def mirror_horizontal(image):
    """Flip the image left to right."""
    return _as_rgb(image)[:, ::-1].copy()


def zoom_out(image, sx, sy):
    """Shrink by integer factors, averaging each ``sx`` by ``sy`` block.

    Rows and columns that do not fill a whole block are dropped.
    """
    if sx < 1 or sy < 1:
        raise ValueError("zoom factors must be at least 1")
    img = _as_rgb(image)
    height, width = img.shape[0] // sy, img.shape[1] // sx
    blocks = img[: height * sy, : width * sx].astype(np.int64)
    blocks = blocks.reshape(height, sy, width, sx, 3)
    return (blocks.sum(axis=(1, 3)) // (sx * sy)).astype(np.uint8)


def zoom_in(image):
    """Double both dimensions, filling new pixels by averaging neighbours.

    The last column and last row repeat their neighbours.
    """
    img = _as_rgb(image)
    height, width = img.shape[:2]
    if height == 0 or width == 0:
        raise ValueError("image has no pixels")
    src = img.astype(np.int64)

    rows = np.empty((height, 2 * width, 3), dtype=np.int64)
    rows[:, 0::2] = src
    rows[:, 1:-1:2] = (src[:, :-1] + src[:, 1:]) // 2
    rows[:, -1] = src[:, -1]

    zoomed = np.empty((2 * height, 2 * width, 3), dtype=np.int64)
    zoomed[0::2] = rows
    zoomed[1:-1:2] = (rows[:-1] + rows[1:]) // 2
    zoomed[-1] = rows[-1]
    return zoomed.astype(np.uint8)


def rotate(image, clockwise):
    """Rotate by 90 degrees, clockwise or counter-clockwise."""
    return np.rot90(_as_rgb(image), k=-1 if clockwise else 1).copy()


def convolve(image, kernel, embossing):
    """Apply a 3x3 kernel, given row by row, to every interior pixel.

    Sums are truncated to integers term by term. With ``embossing`` 127 is
    added before clamping. Border pixels of the result are black.
    """
    weights = [float(w) for w in np.asarray(kernel, dtype=np.float64).ravel()]
    if len(weights) != 9:
        raise ValueError("kernel must hold 9 values")
    img = _as_rgb(image)
    height, width = img.shape[:2]
    out = np.zeros_like(img)
    if height < 3 or width < 3:
        return out

    src = img.astype(np.float64)
    acc = np.zeros((height - 2, width - 2, 3))
    for (dy, dx), weight in zip(product(range(3), repeat=2), weights):
        acc = np.trunc(acc + weight * src[dy : dy + height - 2, dx : dx + width - 2])
    if embossing:
        acc += 127
    out[1:-1, 1:-1] = np.clip(acc, 0, 255).astype(np.uint8)
    return out