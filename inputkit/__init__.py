"""Keyboard input sets and emoji Unicode names."""

from inputkit.__version__ import __version__
