"""Raster image processing on RGB arrays: tones, histograms, geometry, convolution and a command line."""

__version__ = "0.1.0"
__all__ = ["charts", "cli", "geometry", "kernels", "session", "tones"]