"""Conversion result model."""

from pydantic import BaseModel

from .recording import Recording


class ConversionResult(BaseModel):
    """Outcome of converting one FMV file."""

    source: str
    rom: str
    output: str
    output_size: int
    recording: Recording

    @property
    def frame_count(self) -> int:
        """Return the number of frames written."""
        return self.recording.frame_count
