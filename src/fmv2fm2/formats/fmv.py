"""Famtasia FMV movie decoder.

FMV layout (little-endian):

    0x000  4 bytes   signature "FMV\\x1a"
    0x004  1 byte    flags, 0x80 = movie starts from a savestate
    0x005  1 byte    input mode, bits 7/6/5 = controller 1/2/3 recorded
    0x00A  4 bytes   rerecord count
    0x010  64 bytes  emulator identifier
    0x050  64 bytes  movie title
    0x090  ...       frame data, one byte per recorded controller per frame
"""

import struct
from typing import ClassVar

from fmv2fm2.errors import (
    BadSignatureError,
    CorruptFrameDataError,
    NoControllersRecordedError,
    TruncatedHeaderError,
    UnsupportedSavestateRecordingError,
)
from fmv2fm2.formats.base import BaseDecoder
from fmv2fm2.formats.bits import remap_bytes
from fmv2fm2.formats.fm2 import FM2_EMU_VERSION
from fmv2fm2.models import Comment, Recording

FMV_SIGNATURE = b"FMV\x1a"

SIGNATURE_OFFSET = 0x000
SAVESTATE_FLAG_OFFSET = 0x004
INPUT_MODE_OFFSET = 0x005
RERECORD_COUNT_OFFSET = 0x00A
EMULATOR_IDENTIFIER_OFFSET = 0x010
MOVIE_TITLE_OFFSET = 0x050
FRAME_DATA_OFFSET = 0x090

TEXT_FIELD_LENGTH = 0x40
SAVESTATE_FLAG = 0x80
MAX_CONTROLLERS = 3

# Command byte written before every frame: no reset, power cycle or disk change
NO_COMMAND = 0

# FM2 file version written for every converted movie
FM2_VERSION = 3

EMULATOR_IDENTIFIER_SUBJECT = "famtasiaEmulatorIdentifier"
MOVIE_TITLE_SUBJECT = "famtasiaMovieTitle"


def recorded_controllers(input_mode: int) -> list[int]:
    """Return the recorded controller indices for an input mode byte.

    Controller i is recorded when bit (7 - i) is set. The order of the
    returned list is the order of the controller bytes within a frame.
    """
    return [i for i in range(MAX_CONTROLLERS) if input_mode & (1 << (7 - i))]


def _read_text(data: bytes, offset: int) -> str:
    raw = data[offset : offset + TEXT_FIELD_LENGTH]
    return raw.decode("ascii", errors="replace")


def _build_input(frame_data: bytes, bytes_per_frame: int) -> bytes:
    remapped = remap_bytes(frame_data)
    command = bytes([NO_COMMAND])
    return b"".join(
        command + remapped[start : start + bytes_per_frame]
        for start in range(0, len(remapped), bytes_per_frame)
    )


class FmvDecoder(BaseDecoder):
    """Decode Famtasia FMV movies into FM2-ready recordings."""

    name: ClassVar[str] = "fmv"
    extension: ClassVar[str] = ".fmv"

    def decode(self, rom_file_name: str, rom_checksum: str, data: bytes) -> Recording:
        """Decode an FMV movie.

        Args:
            rom_file_name: Base name of the ROM the movie was recorded on
            rom_checksum: Base64 checksum of the ROM image
            data: Full contents of the FMV file

        Returns:
            Recording with a binary FM2 input body

        Raises:
            TruncatedHeaderError: Data is shorter than the FMV header
            BadSignatureError: Signature does not match
            UnsupportedSavestateRecordingError: Movie starts from a savestate
            NoControllersRecordedError: Frame data without recorded controllers
            CorruptFrameDataError: Frame data does not fit the controller layout
        """
        data = bytes(data)

        if len(data) < FRAME_DATA_OFFSET:
            raise TruncatedHeaderError(
                f"FMV data is {len(data)} bytes, smaller than the "
                f"{FRAME_DATA_OFFSET}-byte header"
            )

        signature = data[SIGNATURE_OFFSET : SIGNATURE_OFFSET + len(FMV_SIGNATURE)]
        if signature != FMV_SIGNATURE:
            raise BadSignatureError(f"Invalid FMV signature: {signature!r}")

        if data[SAVESTATE_FLAG_OFFSET] & SAVESTATE_FLAG:
            raise UnsupportedSavestateRecordingError(
                "FMV movies recorded from a savestate are not supported"
            )

        (stored_rerecords,) = struct.unpack_from("<I", data, RERECORD_COUNT_OFFSET)
        controllers = recorded_controllers(data[INPUT_MODE_OFFSET])
        bytes_per_frame = len(controllers)
        frame_data = data[FRAME_DATA_OFFSET:]

        if frame_data and bytes_per_frame == 0:
            raise NoControllersRecordedError(
                "FMV file does not specify which controller(s) are recorded"
            )

        if bytes_per_frame and len(frame_data) % bytes_per_frame:
            raise CorruptFrameDataError(
                f"FMV frame data is {len(frame_data)} bytes, not a multiple of "
                f"{bytes_per_frame} bytes per frame for {bytes_per_frame} controller(s)"
            )

        comments = (
            Comment(
                subject=EMULATOR_IDENTIFIER_SUBJECT,
                content=_read_text(data, EMULATOR_IDENTIFIER_OFFSET),
            ),
            Comment(
                subject=MOVIE_TITLE_SUBJECT,
                content=_read_text(data, MOVIE_TITLE_OFFSET),
            ),
        )

        # Recorded controllers fill FM2 ports in order; port2 is never set
        return Recording(
            rom_file_name=rom_file_name,
            rom_checksum=rom_checksum,
            version=FM2_VERSION,
            emu_version=FM2_EMU_VERSION,
            rerecord_count=stored_rerecords + 1,
            port0=int(bytes_per_frame >= 1),
            port1=int(bytes_per_frame >= 2),
            binary=True,
            comments=comments,
            input=_build_input(frame_data, bytes_per_frame) if frame_data else b"",
        )


def decode_fmv(rom_file_name: str, rom_checksum: str, data: bytes) -> Recording:
    """Decode an FMV movie with a default FmvDecoder."""
    return FmvDecoder().decode(rom_file_name, rom_checksum, data)
