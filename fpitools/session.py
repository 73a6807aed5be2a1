"""An editing session: an original image and the edited copy it works on."""

from os import PathLike

import numpy as np
from PIL import Image

from fpitools import geometry, tones
from fpitools.kernels import rotate_kernel
from fpitools.tones import _as_rgb


def load_image(path):
    """Read an image file as an RGB uint8 array of shape (height, width, 3)."""
    with Image.open(path) as im:
        return np.array(im.convert("RGB"), dtype=np.uint8)


def save_image(image, path):
    """Write an RGB array to ``path``; the format follows the file extension."""
    Image.fromarray(_as_rgb(image)).save(path)


class Editor:
    """Holds an original image and an edited copy that operations change in place."""

    def __init__(self, original):
        self.original = _as_rgb(original).copy()
        self.image = self.original.copy()
        self.is_grey = tones.is_greyscale(self.image)

    @classmethod
    def open(cls, path):
        """Start a session from an image file."""
        return cls(load_image(path))

    def _update(self, image):
        self.image = image
        self.is_grey = tones.is_greyscale(image)

    def reset(self):
        """Replace the edited image with a copy of the original."""
        self._update(self.original.copy())

    def save(self, path):
        """Write the edited image to ``path``."""
        save_image(self.image, path)

    def grey(self):
        self._update(tones.to_grey(self.image))

    def flip_vertical(self):
        self._update(geometry.mirror_vertical(self.image))

    def flip_horizontal(self):
        self._update(geometry.mirror_horizontal(self.image))

    def quantize(self, num_shades):
        self._update(tones.quantize(self.image, num_shades))

    def brightness(self, scale):
        self._update(tones.adjust_brightness(self.image, scale))

    def contrast(self, scale):
        self._update(tones.adjust_contrast(self.image, scale))

    def negative(self):
        self._update(tones.negative(self.image))

    def histogram(self):
        """Histogram of the edited image, of its luminance if it is in colour."""
        return tones.histogram(self.image, self.is_grey)

    def equalize(self):
        """Equalise the edited image.

        For a greyscale image returns the histograms before and after; for a
        colour image returns None.
        """
        before = self.image
        was_grey = self.is_grey
        self._update(tones.equalize(before, was_grey))
        if not was_grey:
            return None
        return tones.histogram(before, True), tones.histogram(self.image, True)

    def match(self, target):
        """Match the edited image's histogram to ``target`` (an array or a path).

        Both images must be greyscale. Returns the normalised cumulative
        histograms of source and target.
        """
        if isinstance(target, (str, PathLike)):
            target = load_image(target)
        target = _as_rgb(target)
        if not (self.is_grey and tones.is_greyscale(target)):
            raise ValueError("one of the images is not in greyscale")
        matched, src_cum, tgt_cum = tones.match_histogram(self.image, target)
        self._update(matched)
        return src_cum, tgt_cum

    def zoom_in(self):
        self._update(geometry.zoom_in(self.image))

    def zoom_out(self, sx, sy):
        self._update(geometry.zoom_out(self.image, sx, sy))

    def rotate(self, clockwise):
        self._update(geometry.rotate(self.image, clockwise))

    def convolve(self, kernel, embossing):
        """Convolve with a 3x3 kernel as entered; it is rotated 180 degrees first."""
        self._update(geometry.convolve(self.image, rotate_kernel(kernel), embossing))