"""Histogram scaling and bar-chart rendering."""

import numpy as np
from matplotlib.figure import Figure

_DPI = 100
_WIDTH = 709
_HEIGHT = 500


def scale_histogram(hist):
    """Scale a histogram so that its tallest column becomes 255, truncating."""
    values = np.asarray(hist, dtype=np.int64)
    if values.size == 0:
        raise ValueError("histogram is empty")
    peak = int(values.max())
    if peak <= 0:
        raise ValueError("histogram has no counts")
    factor = np.float32(255.0 / peak)
    return np.trunc(values.astype(np.float32) * factor).astype(np.int64)


def plot_histogram(hist, title, path):
    """Draw the scaled histogram as black bars on white and save it to ``path``.

    Returns the scaled column heights that were drawn.
    """
    scaled = scale_histogram(hist)
    fig = Figure(figsize=(_WIDTH / _DPI, _HEIGHT / _DPI), dpi=_DPI, facecolor="white")
    ax = fig.add_subplot()
    ax.set_facecolor("white")
    ax.bar(np.arange(scaled.size), scaled, width=1.0, color="black")
    ax.set_title(title)
    fig.savefig(path, dpi=_DPI, facecolor="white")
    return scaled