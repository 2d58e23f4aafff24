"""Version information for fmv2fm2."""

__version__ = "0.1.0"
