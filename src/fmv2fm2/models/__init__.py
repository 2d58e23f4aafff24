"""Pydantic models for fmv2fm2."""

from .buttons import FM2_BUTTON_ORDER, Fm2Button, FmvButton, describe_buttons
from .recording import Comment, Recording, Subtitle
from .result import ConversionResult

__all__ = [
    # Recording
    "Recording",
    "Comment",
    "Subtitle",
    # Conversion
    "ConversionResult",
    # Controller buttons
    "FmvButton",
    "Fm2Button",
    "FM2_BUTTON_ORDER",
    "describe_buttons",
]
