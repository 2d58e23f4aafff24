"""Base classes for movie decoders and encoders."""

from abc import ABC, abstractmethod
from typing import ClassVar

from fmv2fm2.models import Recording


class BaseDecoder(ABC):
    """Abstract base class for movie decoders.

    A decoder turns the raw bytes of a movie file into a Recording. It
    either returns a complete Recording or raises; it never returns
    partial results.

    Attributes:
        name: Human-readable name of the source format
        extension: File extension of the source format
    """

    name: ClassVar[str] = "base"
    extension: ClassVar[str] = ""

    @abstractmethod
    def decode(self, rom_file_name: str, rom_checksum: str, data: bytes) -> Recording:
        """Decode a movie.

        Args:
            rom_file_name: Base name of the ROM the movie was recorded on
            rom_checksum: Base64 checksum of the ROM image
            data: Full contents of the movie file

        Returns:
            Decoded Recording
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class BaseEncoder(ABC):
    """Abstract base class for movie encoders.

    Attributes:
        name: Human-readable name of the target format
        extension: File extension of the target format
    """

    name: ClassVar[str] = "base"
    extension: ClassVar[str] = ""

    @abstractmethod
    def encode(self, recording: Recording) -> bytes:
        """Serialize a Recording.

        Args:
            recording: Recording to serialize

        Returns:
            Complete contents of the output file
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
