"""File-level conversion functions."""

import logging
import os
import warnings

from fmv2fm2.checksum import rom_checksum_file
from fmv2fm2.config import get_config
from fmv2fm2.errors import ConversionError
from fmv2fm2.formats import Fm2Encoder, FmvDecoder
from fmv2fm2.models import ConversionResult, Recording

logger = logging.getLogger(__name__)


def output_path_for(fmv_path: str, output_dir: str | None = None) -> str:
    """Derive the FM2 output path for an FMV file.

    Args:
        fmv_path: Path to the FMV file
        output_dir: Directory to place the output in (default: next to the FMV)

    Returns:
        Path with the extension replaced by .fm2
    """
    path = os.path.splitext(fmv_path)[0] + Fm2Encoder.extension
    if output_dir:
        path = os.path.join(output_dir, os.path.basename(path))
    return path


def _require_file(path: str) -> None:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")


def load_recording(fmv_path: str, rom_path: str) -> Recording:
    """Read and decode an FMV file against its ROM.

    Args:
        fmv_path: Path to the FMV movie
        rom_path: Path to the ROM the movie was recorded on

    Returns:
        Decoded Recording

    Raises:
        FileNotFoundError: If either file does not exist
        ConversionError: If the ROM or the movie is invalid
    """
    _require_file(fmv_path)
    _require_file(rom_path)

    rom_name = os.path.splitext(os.path.basename(rom_path))[0]
    checksum = rom_checksum_file(rom_path)
    logger.debug("ROM %s checksum %s", rom_name, checksum)

    with open(fmv_path, "rb") as f:
        data = f.read()

    recording = FmvDecoder().decode(rom_name, checksum, data)
    logger.debug(
        "Decoded %s: %d frames, ports %s",
        fmv_path,
        recording.frame_count,
        recording.active_ports,
    )
    return recording


def convert_file(
    fmv_path: str,
    rom_path: str,
    output_path: str | None = None,
    *,
    include_comments: bool | None = None,
    overwrite: bool | None = None,
) -> ConversionResult:
    """Convert an FMV movie to an FM2 file.

    The whole FM2 file is built in memory before anything is written, so
    a failed conversion leaves no output behind.

    Args:
        fmv_path: Path to the FMV movie
        rom_path: Path to the ROM the movie was recorded on
        output_path: Destination path (default: FMV path with .fm2 extension)
        include_comments: Write comment lines (default: from config)
        overwrite: Replace an existing output file (default: from config)

    Returns:
        ConversionResult describing the written file

    Raises:
        FileNotFoundError: If an input file does not exist
        FileExistsError: If the output exists and overwriting is disabled
        ConversionError: If the ROM or the movie is invalid
    """
    config = get_config()
    if include_comments is None:
        include_comments = config.conversion.include_comments
    if overwrite is None:
        overwrite = config.output.overwrite
    if output_path is None:
        output_path = output_path_for(fmv_path, config.output.directory)

    recording = load_recording(fmv_path, rom_path)
    data = Fm2Encoder(include_comments=include_comments).encode(recording)

    if not overwrite and os.path.exists(output_path):
        raise FileExistsError(f"Output file already exists: {output_path}")

    with open(output_path, "wb") as f:
        f.write(data)
    logger.info("Wrote %s (%d bytes)", output_path, len(data))

    return ConversionResult(
        source=os.path.abspath(fmv_path),
        rom=os.path.abspath(rom_path),
        output=os.path.abspath(output_path),
        output_size=len(data),
        recording=recording,
    )


def convert_files(
    fmv_paths: list[str],
    rom_path: str,
    *,
    include_comments: bool | None = None,
    overwrite: bool | None = None,
) -> list[ConversionResult]:
    """Convert several FMV movies recorded on the same ROM.

    Args:
        fmv_paths: List of FMV file paths
        rom_path: Path to the ROM
        include_comments: Write comment lines (default: from config)
        overwrite: Replace existing output files (default: from config)

    Returns:
        List of ConversionResult objects for the files that converted
    """
    results = []
    for path in fmv_paths:
        try:
            result = convert_file(
                path,
                rom_path,
                include_comments=include_comments,
                overwrite=overwrite,
            )
            results.append(result)
        except (OSError, ConversionError) as e:
            warnings.warn(f"Failed to convert {path}: {e}", stacklevel=2)
    return results
