"""Command line: open an image, apply operations in order, save the result."""

import argparse
import sys

from fpitools.charts import plot_histogram
from fpitools.kernels import Preset, preset_kernel
from fpitools.session import Editor

_PRESET_NAMES = [preset.name.lower().replace("_", "-") for preset in Preset]


class _Step(argparse.Action):
    """Record an operation, keeping the order given on the command line."""

    def __call__(self, parser, namespace, values, option_string=None):
        steps = list(getattr(namespace, "steps", None) or [])
        steps.append((self.dest, values))
        namespace.steps = steps


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fpitools",
        description="Edit an image with operations applied in the order given.",
    )
    parser.add_argument("input", help="image to edit")
    parser.add_argument("-o", "--output", help="where to save the edited image")
    parser.add_argument(
        "--emboss", action="store_true", help="add 127 to every convolution result"
    )
    parser.set_defaults(steps=[])

    ops = parser.add_argument_group("operations")

    def step(flag, help_text, **kwargs):
        ops.add_argument(flag, action=_Step, help=help_text, **kwargs)

    step("--reset", "start again from the original image", nargs=0)
    step("--grey", "convert to greyscale", nargs=0)
    step("--flip-vertical", "mirror upside down", nargs=0)
    step("--flip-horizontal", "mirror left to right", nargs=0)
    step("--quantize", "reduce to at most SHADES shades", type=int, metavar="SHADES")
    step("--brightness", "add a value to every channel", type=float, metavar="VALUE")
    step("--contrast", "multiply every channel by a value", type=float, metavar="VALUE")
    step("--negative", "invert every channel", nargs=0)
    step("--equalize", "equalise the histogram", nargs=0)
    step("--match", "match the histogram to a greyscale target image", metavar="TARGET")
    step("--zoom-in", "double the size", nargs=0)
    step("--zoom-out", "shrink by factors SX and SY", type=int, nargs=2, metavar=("SX", "SY"))
    step("--rotate", "rotate by 90 degrees", choices=("clockwise", "counterclockwise"))
    step("--convolve", "convolve with a preset kernel", choices=_PRESET_NAMES)
    step("--kernel", "convolve with a kernel given row by row", type=float, nargs=9, metavar="W")
    step("--histogram", "save a chart of the current histogram", metavar="PATH")
    return parser


def _apply(editor, name, value, emboss):
    if name == "reset":
        editor.reset()
    elif name == "grey":
        editor.grey()
    elif name == "flip_vertical":
        editor.flip_vertical()
    elif name == "flip_horizontal":
        editor.flip_horizontal()
    elif name == "quantize":
        editor.quantize(value)
    elif name == "brightness":
        editor.brightness(value)
    elif name == "contrast":
        editor.contrast(value)
    elif name == "negative":
        editor.negative()
    elif name == "equalize":
        editor.equalize()
    elif name == "match":
        editor.match(value)
    elif name == "zoom_in":
        editor.zoom_in()
    elif name == "zoom_out":
        editor.zoom_out(*value)
    elif name == "rotate":
        editor.rotate(value == "clockwise")
    elif name == "convolve":
        preset = Preset[value.upper().replace("-", "_")]
        editor.convolve(preset_kernel(preset), emboss)
    elif name == "kernel":
        editor.convolve(value, emboss)
    elif name == "histogram":
        plot_histogram(editor.histogram(), "Edited Image Histogram", value)


def main(argv=None):
    """Run the command; returns the exit status."""
    args = build_parser().parse_args(argv)
    try:
        editor = Editor.open(args.input)
        for name, value in args.steps:
            _apply(editor, name, value, args.emboss)
        if args.output:
            editor.save(args.output)
    except (OSError, ValueError) as exc:
        print(f"fpitools: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())