import numpy as np
import pytest

from fpitools import geometry, tones
from fpitools.kernels import rotate_kernel
from fpitools.session import Editor, load_image, save_image


@pytest.fixture
def colour():
    rng = np.random.default_rng(0)
    img = rng.integers(0, 256, size=(4, 6, 3), dtype=np.uint8)
    img[0, 0] = (10, 200, 30)
    return img


@pytest.fixture
def grey():
    rng = np.random.default_rng(1)
    shades = rng.integers(0, 256, size=(5, 7), dtype=np.uint8)
    return np.repeat(shades[..., None], 3, axis=2)


def test_save_load_round_trip(tmp_path, colour):
    path = tmp_path / "img.png"
    save_image(colour, path)
    assert np.array_equal(load_image(path), colour)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")


def test_open_reads_file(tmp_path, grey):
    path = tmp_path / "g.png"
    save_image(grey, path)
    editor = Editor.open(path)
    assert np.array_equal(editor.image, grey)
    assert np.array_equal(editor.original, grey)
    assert editor.is_grey


def test_editor_copies_input(colour):
    editor = Editor(colour)
    colour[...] = 0
    assert editor.image.any()
    assert editor.original.any()


def test_grey_updates_flag(colour):
    editor = Editor(colour)
    assert not editor.is_grey
    editor.grey()
    assert editor.is_grey
    assert np.array_equal(editor.image, tones.to_grey(colour))


def test_reset_restores_original(colour):
    editor = Editor(colour)
    editor.negative()
    editor.zoom_in()
    editor.reset()
    assert np.array_equal(editor.image, colour)
    assert not editor.is_grey


def test_original_untouched_by_operations(colour):
    editor = Editor(colour)
    editor.flip_horizontal()
    editor.brightness(40)
    assert np.array_equal(editor.original, colour)


@pytest.mark.parametrize("flip", ["flip_vertical", "flip_horizontal", "negative"])
def test_involutions(colour, flip):
    editor = Editor(colour)
    getattr(editor, flip)()
    getattr(editor, flip)()
    assert np.array_equal(editor.image, colour)


def test_rotate_round_trip(colour):
    editor = Editor(colour)
    editor.rotate(True)
    assert editor.image.shape == (6, 4, 3)
    editor.rotate(False)
    assert np.array_equal(editor.image, colour)


def test_zoom_shapes(colour):
    editor = Editor(colour)
    editor.zoom_in()
    assert editor.image.shape == (8, 12, 3)
    editor.zoom_out(2, 2)
    assert editor.image.shape == (4, 6, 3)


def test_brightness_and_contrast_identity(colour):
    editor = Editor(colour)
    editor.brightness(0)
    editor.contrast(1)
    assert np.array_equal(editor.image, colour)


def test_quantize_limits_shades(grey):
    editor = Editor(grey)
    editor.quantize(4)
    assert len(np.unique(editor.image[..., 0])) <= 4
    assert editor.is_grey


def test_histogram_counts_every_pixel(colour):
    hist = Editor(colour).histogram()
    assert len(hist) == 256
    assert hist.sum() == colour.shape[0] * colour.shape[1]


def test_equalize_grey_returns_histograms(grey):
    editor = Editor(grey)
    before, after = editor.equalize()
    pixels = grey.shape[0] * grey.shape[1]
    assert before.sum() == pixels
    assert after.sum() == pixels
    assert np.array_equal(after, tones.histogram(editor.image, True))


def test_equalize_colour_returns_nothing(colour):
    editor = Editor(colour)
    assert editor.equalize() is None
    assert np.array_equal(editor.image, tones.equalize(colour, False))


def test_match_needs_greyscale(colour, grey):
    with pytest.raises(ValueError):
        Editor(colour).match(grey)
    with pytest.raises(ValueError):
        Editor(grey).match(colour)


def test_match_grey(grey):
    target = tones.negative(grey)
    editor = Editor(grey)
    src_cum, tgt_cum = editor.match(target)
    expected, exp_src, exp_tgt = tones.match_histogram(grey, target)
    assert np.array_equal(editor.image, expected)
    assert np.array_equal(src_cum, exp_src)
    assert np.array_equal(tgt_cum, exp_tgt)
    assert editor.is_grey


def test_match_from_path(tmp_path, grey):
    path = tmp_path / "target.png"
    save_image(grey, path)
    editor = Editor(grey)
    editor.match(path)
    assert np.array_equal(editor.image, tones.match_histogram(grey, grey)[0])


def test_convolve_identity_kernel(colour):
    editor = Editor(colour)
    editor.convolve(((0, 0, 0), (0, 1, 0), (0, 0, 0)), False)
    assert np.array_equal(editor.image[1:-1, 1:-1], colour[1:-1, 1:-1])
    assert not editor.image[0].any()
    assert not editor.image[:, -1].any()


def test_convolve_rotates_kernel(colour):
    kernel = ((1, 2, 0), (0, -1, 0), (0, 0, 0.5))
    editor = Editor(colour)
    editor.convolve(kernel, True)
    assert np.array_equal(editor.image, geometry.convolve(colour, rotate_kernel(kernel), True))


def test_save_writes_edited_image(tmp_path, colour):
    editor = Editor(colour)
    editor.negative()
    path = tmp_path / "out.png"
    editor.save(path)
    assert np.array_equal(load_image(path), editor.image)