"""fmv2fm2 - Famtasia FMV to FCEUX FM2 movie converter.

Usage:
    from fmv2fm2 import convert_file, decode_fmv, encode_fm2

    # Convert a movie next to itself (movie.fmv -> movie.fm2)
    result = convert_file("movie.fmv", "game.nes")
    print(result.output, result.frame_count)

    # Work on bytes directly
    recording = decode_fmv("game", checksum, fmv_bytes)
    fm2_bytes = encode_fm2(recording)
"""

from fmv2fm2._version import __version__
from fmv2fm2.checksum import rom_checksum, rom_checksum_file
from fmv2fm2.convert import convert_file, convert_files, load_recording, output_path_for
from fmv2fm2.errors import (
    BadSignatureError,
    ConversionError,
    CorruptFrameDataError,
    Fm2EncodeError,
    FmvDecodeError,
    InvalidRomError,
    NoControllersRecordedError,
    TruncatedHeaderError,
    UnsupportedBodyFormatError,
    UnsupportedSavestateRecordingError,
)
from fmv2fm2.formats import Fm2Encoder, FmvDecoder, decode_fmv, encode_fm2
from fmv2fm2.formatters import format_default, format_json, format_quiet, to_dict
from fmv2fm2.models import Comment, ConversionResult, Recording, Subtitle

__all__ = [
    # Version
    "__version__",
    # Main functions
    "convert_file",
    "convert_files",
    "load_recording",
    "output_path_for",
    "decode_fmv",
    "encode_fm2",
    "rom_checksum",
    "rom_checksum_file",
    # Codecs
    "FmvDecoder",
    "Fm2Encoder",
    # Models
    "Recording",
    "Comment",
    "Subtitle",
    "ConversionResult",
    # Formatters
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
    # Errors
    "ConversionError",
    "FmvDecodeError",
    "Fm2EncodeError",
    "TruncatedHeaderError",
    "BadSignatureError",
    "UnsupportedSavestateRecordingError",
    "NoControllersRecordedError",
    "CorruptFrameDataError",
    "UnsupportedBodyFormatError",
    "InvalidRomError",
]
