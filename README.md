# fpitools

Classic image-processing operations on RGB images held as NumPy arrays of
shape `(height, width, 3)` with 8-bit values. The operations can be used
from Python or from the `fpitools` command. Every function returns a new
array and leaves its input untouched.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `fpitools.tones`

- `to_grey(image)` converts to luminance, L = 0.299 R + 0.587 G + 0.114 B,
  truncated to an integer and written to all three channels.
- `is_greyscale(image)` tells whether every pixel has R = G = B.
- `quantize(image, num_shades)` reduces a greyscale image (shades read from
  the red channel) to at most `num_shades` shades. The range from darkest to
  brightest shade is cut into equal bins and each pixel takes the centre of
  its bin. An image that already uses no more shades is returned unchanged.
  `num_shades` below 1 raises `ValueError`.
- `adjust_brightness(image, scale)` adds `scale` to every channel;
  `adjust_contrast(image, scale)` multiplies every channel by `scale`. Both
  truncate and clamp to 0–255. `negative(image)` gives 255 − value.
- `histogram(image, is_grey)` counts the pixels of each of the 256 shades;
  with `is_grey` false the image is converted to greyscale first.
  `cumulative(hist)` gives running totals.
- `equalize(image, is_grey)` scales the cumulative histogram to 0–255 and
  uses it as a lookup table for all three channels.
- `match_histogram(source, target)` maps the greyscale `source` so its
  histogram follows that of `target`, and returns
  `(image, source_cumulative, target_cumulative)`, the two cumulative
  histograms normalised to 0–255.

Inputs must be RGB arrays with values in 0–255; anything else raises
`ValueError`.

### `fpitools.geometry`

- `mirror_vertical(image)`, `mirror_horizontal(image)`.
- `rotate(image, clockwise)` turns by 90° clockwise or counter-clockwise.
- `zoom_out(image, sx, sy)` averages each `sx` × `sy` block; rows and
  columns that do not fill a whole block are dropped.
- `zoom_in(image)` doubles both dimensions, filling new pixels with the
  average of their neighbours; the last row and column repeat their
  neighbours.
- `convolve(image, kernel, embossing)` applies a 3×3 kernel (nine values row
  by row, or three rows) to every interior pixel. With `embossing` 127 is
  added before clamping. Border pixels of the result are black.

### `fpitools.kernels`

`Preset` is an enum of filters: `MEAN`, `GAUSSIAN`, `LAPLACIAN`,
`HIGH_PASS`, `PREWITT_HX`, `PREWITT_HY`, `SOBEL_HX`, `SOBEL_HY`.
`preset_kernel(preset)` returns its 3×3 kernel (any unknown value gives the
mean filter), and `rotate_kernel(kernel)` turns a kernel by 180°.

### `fpitools.charts`

`scale_histogram(hist)` scales a histogram so its tallest column is 255.
`plot_histogram(hist, title, path)` draws the scaled histogram as black bars
on white, saves the chart to `path` and returns the heights drawn.

### `fpitools.session`

`load_image(path)` and `save_image(image, path)` read and write image files
(the format follows the extension). An `Editor` keeps the original image and
an edited copy that its methods change:

```python
from fpitools.session import Editor

editor = Editor.open("photo.jpg")
editor.grey()
editor.quantize(8)
before, after = editor.equalize()   # histograms, for a greyscale image
editor.save("photo-edited.png")

editor.reset()          # back to a copy of the original image
editor.rotate(True)     # 90° clockwise
editor.zoom_out(2, 2)
editor.convolve([[0, -1, 0], [-1, 4, -1], [0, -1, 0]], False)
editor.save("photo-small.png")
```

`Editor.is_grey` tracks whether the edited image is greyscale.
`Editor.histogram()` uses the luminance of a colour image.
`Editor.equalize()` returns `None` for a colour image.
`Editor.match(target)` takes an array or a file path, raises `ValueError`
unless both images are greyscale, and returns the two normalised cumulative
histograms. `Editor.convolve` rotates the kernel by 180° before applying it.

## Command line

```
fpitools INPUT [-o OUTPUT] [--emboss] [operations...]
```

Operations run in the order given:

`--reset`, `--grey`, `--flip-vertical`, `--flip-horizontal`,
`--quantize SHADES`, `--brightness VALUE`, `--contrast VALUE`,
`--negative`, `--equalize`, `--match TARGET`, `--zoom-in`,
`--zoom-out SX SY`, `--rotate {clockwise,counterclockwise}`,
`--convolve {mean,gaussian,laplacian,high-pass,prewitt-hx,prewitt-hy,sobel-hx,sobel-hy}`,
`--kernel W W W W W W W W W` (nine weights row by row), and
`--histogram PATH`, which saves a chart of the current histogram.
`--emboss` applies to every convolution. The result is saved only when
`-o/--output` is given.

```
fpitools photo.jpg --grey --quantize 8 --histogram hist.png -o out.png
```

A file or value error is printed and the command exits with status 1.
See all options with `fpitools --help`.

## What it does not do

There is no window or interactive display: images and histogram charts are
only written to files.