"""ROM checksum as written to the FM2 romChecksum field."""

import base64
import hashlib
import os

from fmv2fm2.errors import InvalidRomError

# iNES header, excluded from the checksum
ROM_HEADER_SIZE = 0x10


def rom_checksum(data: bytes) -> str:
    """Compute the base64 MD5 digest of a ROM image without its header.

    Args:
        data: Full contents of the ROM file

    Returns:
        Base64-encoded MD5 digest of everything after the first 16 bytes

    Raises:
        InvalidRomError: The image is smaller than its header
    """
    if len(data) < ROM_HEADER_SIZE:
        raise InvalidRomError(
            f"ROM image is {len(data)} bytes, smaller than the {ROM_HEADER_SIZE}-byte header"
        )
    digest = hashlib.md5(data[ROM_HEADER_SIZE:]).digest()
    return base64.b64encode(digest).decode("ascii")


def rom_checksum_file(path: str | os.PathLike[str]) -> str:
    """Compute the FM2 ROM checksum of a file on disk."""
    with open(path, "rb") as f:
        return rom_checksum(f.read())
