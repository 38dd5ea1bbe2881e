"""Detect faces in a photo and paste a gopher over each one."""

__version__ = "0.1.0"
