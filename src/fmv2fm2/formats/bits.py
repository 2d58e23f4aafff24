"""Controller bit remapping between FMV and FM2 byte layouts."""

from collections.abc import Sequence

# Destination bit for each source bit: source bit j -> DESTINATION_BIT_TABLE[j]
DESTINATION_BIT_TABLE: tuple[int, ...] = (7, 6, 4, 5, 1, 0, 2, 3)


def build_permutation_table(destination_bits: Sequence[int] = DESTINATION_BIT_TABLE) -> bytes:
    """Build a 256-entry lookup table that moves each bit to its destination.

    Args:
        destination_bits: Destination bit position for source bits 0..7

    Returns:
        Translation table usable with ``bytes.translate``
    """
    if sorted(destination_bits) != list(range(8)):
        raise ValueError(f"Not a permutation of bits 0-7: {list(destination_bits)}")

    table = bytearray(256)
    for value in range(256):
        for source_bit, destination_bit in enumerate(destination_bits):
            if value & (1 << source_bit):
                table[value] |= 1 << destination_bit
    return bytes(table)


PERMUTATION_TABLE = build_permutation_table()


def remap_byte(value: int) -> int:
    """Translate one FMV controller byte to the FM2 bit layout."""
    return PERMUTATION_TABLE[value]


def remap_bytes(data: bytes) -> bytes:
    """Translate a run of FMV controller bytes to the FM2 bit layout."""
    return data.translate(PERMUTATION_TABLE)
