import os
import struct
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from unittest import mock

from embeddenator_io.formats.envelope_types import MAGIC

# =============================================================================
# Test Constants
# =============================================================================

TEXT_PAYLOAD = b"".join(f"line {index}: value={index * index}\n".encode() for index in range(400))
REPEATED_PAYLOAD = b"a" * 1000
BINARY_PAYLOAD = bytes(index % 256 for index in range(10_000))


# =============================================================================
# Envelope helpers
# =============================================================================


def build_header(
    *,
    kind: int = 1,
    codec: int = 0,
    reserved: int = 0,
    length: int = 0,
    magic: bytes = MAGIC,
) -> bytes:
    return struct.pack("<4sBBHQ", magic, kind, codec, reserved, length)


def flip_byte(data: bytes, index: int) -> bytes:
    mutable = bytearray(data)
    mutable[index] ^= 0xFF
    return bytes(mutable)


# =============================================================================
# Filesystem helpers
# =============================================================================


@contextmanager
def temp_dir() -> Generator[Path, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@contextmanager
def temp_config(toml: str) -> Generator[Path, None, None]:
    with temp_dir() as tmpdir:
        path = tmpdir / "config.toml"
        path.write_text(toml, encoding="utf-8")
        yield path


@contextmanager
def isolated_user_config() -> Generator[Path, None, None]:
    """Point the user config directory at an empty temp dir."""
    with temp_dir() as tmpdir:
        with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmpdir)}):
            os.environ.pop("EMBEDDENATOR_IO_CONFIG", None)
            yield tmpdir
