"""Point operations on RGB images: grey conversion, quantisation, tone and histogram work.

Images are numpy arrays of shape (height, width, 3) holding 8-bit RGB values.
Every function returns a new array and leaves its input untouched.
"""

import numpy as np

_LEVELS = 256


def _as_rgb(image):
    """Return ``image`` as a uint8 array of shape (height, width, 3)."""
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("expected an RGB image of shape (height, width, 3)")
    if arr.dtype != np.uint8:
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("pixel values must lie between 0 and 255")
        arr = arr.astype(np.uint8)
    return arr


def _grey_to_rgb(grey):
    return np.repeat(grey.astype(np.uint8)[..., None], 3, axis=2)


def _pixel_count(img):
    count = img.shape[0] * img.shape[1]
    if count == 0:
        raise ValueError("image has no pixels")
    return count


def to_grey(image):
    """Convert to greyscale with L = 0.299 R + 0.587 G + 0.114 B, truncated."""
    img = _as_rgb(image).astype(np.float64)
    luma = 0.299 * img[..., 0] + 0.587 * img[..., 1] + 0.114 * img[..., 2]
    return _grey_to_rgb(np.trunc(luma))


def is_greyscale(image):
    """Tell whether every pixel has equal red, green and blue values."""
    img = _as_rgb(image)
    return bool(np.all(img[..., 0] == img[..., 1]) and np.all(img[..., 1] == img[..., 2]))


def quantize(image, num_shades):
    """Reduce the shades of a greyscale image to at most ``num_shades``.

    The range between the darkest and brightest shade (read from the red
    channel) is cut into equal bins; each pixel takes the centre of its bin.
    Images that already use no more shades than asked for are returned as is.
    """
    if num_shades < 1:
        raise ValueError("num_shades must be at least 1")
    img = _as_rgb(image)
    out = img.copy()
    if img.size == 0:
        return out

    red = img[..., 0].astype(np.int64)
    lo, hi = int(red.min()), int(red.max())
    interval = hi - lo + 1
    if interval <= num_shades:
        return out

    step = np.float32(interval) / np.float32(num_shades)
    increments = np.concatenate(([np.float32(lo - 0.5)], np.full(num_shades + 1, step, dtype=np.float32)))
    bins = np.cumsum(increments, dtype=np.float32)
    centres = (bins[:-1] + bins[1:]) / np.float32(2)

    slot = np.searchsorted(bins, red, side="right") - 1
    shades = np.clip(np.trunc(centres[slot]).astype(np.int64), lo, hi)
    return _grey_to_rgb(shades)


def _clamp(values):
    return np.clip(np.trunc(values), 0, 255).astype(np.uint8)


def adjust_brightness(image, scale):
    """Add ``scale`` to every channel, truncating and clamping to 0..255."""
    return _clamp(_as_rgb(image).astype(np.float64) + scale)


def adjust_contrast(image, scale):
    """Multiply every channel by ``scale``, truncating and clamping to 0..255."""
    return _clamp(_as_rgb(image).astype(np.float64) * scale)


def negative(image):
    """Invert every channel: 255 - value."""
    return (255 - _as_rgb(image).astype(np.int64)).astype(np.uint8)


def histogram(image, is_grey):
    """Count the pixels of each of the 256 shades.

    A colour image (``is_grey`` false) is converted to greyscale first; the
    shade is read from the red channel.
    """
    img = _as_rgb(image)
    grey = img if is_grey else to_grey(img)
    return np.bincount(grey[..., 0].ravel(), minlength=_LEVELS).astype(np.int64)


def cumulative(hist):
    """Running totals of a histogram."""
    return np.cumsum(np.asarray(hist, dtype=np.int64))


def _normalized_cumulative(img):
    scale = np.float32(255.0 / _pixel_count(img))
    cum = cumulative(histogram(img, True))
    return np.trunc(cum.astype(np.float32) * scale).astype(np.int64)


def equalize(image, is_grey):
    """Equalise the histogram of an image.

    The cumulative histogram of the luminance is scaled to 0..255 and used as
    a lookup table for each of the three channels.
    """
    img = _as_rgb(image)
    scale = np.float32(255.0 / _pixel_count(img))
    cum = cumulative(histogram(img, is_grey))
    lut = np.clip(np.trunc(cum.astype(np.float32) * scale), 0, 255).astype(np.uint8)
    return lut[img]


def match_histogram(source, target):
    """Match the histogram of greyscale ``source`` to that of ``target``.

    Returns ``(image, source_cumulative, target_cumulative)``: the matched
    greyscale image and both cumulative histograms normalised to 0..255.
    """
    src = _as_rgb(source)
    tgt = _as_rgb(target)
    src_cum = _normalized_cumulative(src)
    tgt_cum = _normalized_cumulative(tgt)

    distance = np.abs(tgt_cum[None, :] - src_cum[:, None])
    mapping = np.argmin(distance, axis=1)
    matched = _grey_to_rgb(mapping[src[..., 0]])
    return matched, src_cum, tgt_cum