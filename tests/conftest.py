"""Pytest configuration and fixtures."""

import os
import struct
from collections.abc import Callable

import pytest

from fmv2fm2 import config


def build_fmv(
    frames: bytes = b"",
    input_mode: int = 0x80,
    rerecords: int = 0,
    savestate: bool = False,
    emulator: bytes = b"Famtasia 5.1",
    title: bytes = b"Test movie",
) -> bytes:
    """Build an FMV file in memory."""
    header = bytearray(0x90)
    header[0:4] = b"FMV\x1a"
    header[4] = 0x80 if savestate else 0x00
    header[5] = input_mode
    struct.pack_into("<I", header, 0x0A, rerecords)
    header[0x10 : 0x10 + len(emulator)] = emulator
    header[0x50 : 0x50 + len(title)] = title
    return bytes(header) + frames


@pytest.fixture
def make_fmv() -> Callable[..., bytes]:
    """Factory fixture returning FMV bytes."""
    return build_fmv


@pytest.fixture
def rom_data() -> bytes:
    """A small fake iNES image: 16-byte header plus PRG data."""
    return b"NES\x1a" + bytes(12) + bytes(range(256)) * 4


@pytest.fixture
def movie_files(tmp_path, rom_data, make_fmv):
    """Write a ROM and a two-frame FMV movie to disk."""
    rom_path = tmp_path / "Super Game (U).nes"
    rom_path.write_bytes(rom_data)
    fmv_path = tmp_path / "run.fmv"
    fmv_path.write_bytes(make_fmv(frames=b"\x01\x80", rerecords=41))
    return str(fmv_path), str(rom_path)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep user config files and FMV2FM2_* variables out of tests."""
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [])
    for key in list(os.environ):
        if key.startswith("FMV2FM2_"):
            monkeypatch.delenv(key)
    config.reset_config()
    yield
    config.reset_config()
