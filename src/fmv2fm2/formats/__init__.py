"""Movie format decoders and encoders."""

from fmv2fm2.formats.base import BaseDecoder, BaseEncoder
from fmv2fm2.formats.bits import (
    DESTINATION_BIT_TABLE,
    PERMUTATION_TABLE,
    build_permutation_table,
    remap_byte,
    remap_bytes,
)
from fmv2fm2.formats.fm2 import Fm2Encoder, encode_fm2
from fmv2fm2.formats.fmv import FmvDecoder, decode_fmv

__all__ = [
    # Base classes
    "BaseDecoder",
    "BaseEncoder",
    # Formats
    "FmvDecoder",
    "Fm2Encoder",
    # Functions
    "decode_fmv",
    "encode_fm2",
    # Bit remapping
    "DESTINATION_BIT_TABLE",
    "PERMUTATION_TABLE",
    "build_permutation_table",
    "remap_byte",
    "remap_bytes",
]
