"""Preset 3x3 convolution kernels and the rotation that prepares them for use."""

from enum import IntEnum

import numpy as np


class Preset(IntEnum):
    """Kernel presets, numbered as in the filter selector."""

    MEAN = 0
    GAUSSIAN = 1
    LAPLACIAN = 2
    HIGH_PASS = 3
    PREWITT_HX = 4
    PREWITT_HY = 5
    SOBEL_HX = 6
    SOBEL_HY = 7


_MEAN = ((0.11111, 0.11111, 0.11111),) * 3

_KERNELS = {
    Preset.MEAN: _MEAN,
    Preset.GAUSSIAN: (
        (0.0625, 0.125, 0.0625),
        (0.125, 0.25, 0.125),
        (0.0625, 0.125, 0.0625),
    ),
    Preset.LAPLACIAN: (
        (0, -1, 0),
        (-1, 4, -1),
        (0, -1, 0),
    ),
    Preset.HIGH_PASS: (
        (-1, -1, -1),
        (-1, 8, -1),
        (-1, -1, -1),
    ),
    Preset.PREWITT_HX: (
        (-1, 0, 1),
        (-1, 0, 1),
        (-1, 0, 1),
    ),
    Preset.PREWITT_HY: (
        (-1, -1, -1),
        (0, 0, 0),
        (1, 1, 1),
    ),
    Preset.SOBEL_HX: (
        (-1, 0, 1),
        (-2, 0, 2),
        (-1, 0, 1),
    ),
    Preset.SOBEL_HY: (
        (-1, -2, -1),
        (0, 0, 0),
        (1, 2, 1),
    ),
}


def preset_kernel(preset):
    """Return the 3x3 kernel of a preset, row by row.

    Any index that is not a known preset gives the mean filter.
    """
    return _KERNELS.get(preset, _MEAN)


def rotate_kernel(kernel):
    """Rotate a 3x3 kernel by 180 degrees so it can be applied as a correlation.

    The kernel may be given as three rows or as nine values row by row.
    """
    values = np.asarray(kernel, dtype=np.float64)
    if values.size != 9:
        raise ValueError("kernel must hold 9 values")
    rows = values.reshape(3, 3)[::-1, ::-1]
    return tuple(tuple(float(v) for v in row) for row in rows)