"""FCEUX FM2 movie encoder.

An FM2 file is a list of ``key value`` header lines, a ``|`` delimiter and
the frame body. Only binary bodies are written here.

See https://fceux.com/web/FM2.html
"""

from typing import ClassVar

from fmv2fm2.errors import UnsupportedBodyFormatError
from fmv2fm2.formats.base import BaseEncoder
from fmv2fm2.models import Comment, Recording, Subtitle

# emuVersion is always written as this value, whatever the recording holds
FM2_EMU_VERSION = 22020

BODY_DELIMITER = "|"


def _flag(value: bool) -> int:
    return 1 if value else 0


def format_comment(comment: Comment) -> str:
    """Format a comment header line."""
    return f"comment {comment.subject} {comment.content}\n"


def format_subtitle(subtitle: Subtitle) -> str:
    """Format a subtitle header line."""
    return f"subtitle {subtitle.frame} {subtitle.content}\n"


class Fm2Encoder(BaseEncoder):
    """Encode recordings as binary FM2 movies.

    Args:
        include_comments: Write ``comment`` header lines. Off by default, so
            the source metadata stays on the Recording only.
    """

    name: ClassVar[str] = "fm2"
    extension: ClassVar[str] = ".fm2"

    def __init__(self, include_comments: bool = False):
        self.include_comments = include_comments

    def build_header(self, recording: Recording) -> str:
        """Build the ASCII header, ending with the body delimiter."""
        fields = [
            ("version", recording.version),
            ("emuVersion", FM2_EMU_VERSION),
            ("rerecordCount", recording.rerecord_count),
            ("palFlag", _flag(recording.pal_flag)),
            ("NewPPU", _flag(recording.new_ppu)),
            ("FDS", _flag(recording.fds)),
            ("fourscore", _flag(recording.fourscore)),
            ("port0", recording.port0),
            ("port1", recording.port1),
            ("port2", recording.port2),
            ("binary", _flag(recording.binary)),
            ("length", recording.frame_count),
            ("romFilename", recording.rom_file_name),
        ]
        lines = [f"{key} {value}\n" for key, value in fields]

        if self.include_comments:
            lines.extend(format_comment(comment) for comment in recording.comments)

        lines.extend(format_subtitle(subtitle) for subtitle in recording.subtitles)

        lines.append(f"guid {recording.id}\n")
        lines.append(f"romChecksum base64:{recording.rom_checksum}\n")
        lines.append("savestate 0\n")
        lines.append(BODY_DELIMITER)
        return "".join(lines)

    def encode(self, recording: Recording) -> bytes:
        """Serialize a recording as an FM2 file.

        Args:
            recording: Recording with a binary input body

        Returns:
            ASCII header followed by the raw input body

        Raises:
            UnsupportedBodyFormatError: The recording is not binary
        """
        if not recording.binary:
            raise UnsupportedBodyFormatError("Writing text FM2 input logs is not supported")

        header = self.build_header(recording).encode("ascii", errors="replace")
        return header + recording.input


def encode_fm2(recording: Recording, include_comments: bool = False) -> bytes:
    """Encode a recording with an Fm2Encoder."""
    return Fm2Encoder(include_comments=include_comments).encode(recording)
