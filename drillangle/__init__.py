"""Measure the opening angle of a drill tip or V-notch on camera frames."""

__version__ = "0.1.0"
