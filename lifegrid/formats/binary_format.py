"""Binary (.bgol) grid file format.

Layout:
    - width as a 4 byte little-endian signed integer
    - height as a 4 byte little-endian signed integer
    - width * height bits, row-major, least significant bit first within each
      byte, the final byte padded with zero bits

A 0 bit is a dead cell and a 1 bit an alive cell.
"""

import logging
import struct
from pathlib import Path
from typing import Union

import numpy as np

from ..core.errors import FileFormatError
from ..core.grid import Grid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

HEADER = struct.Struct("<ii")


def encode_binary(grid: Grid) -> bytes:
    """Serialize a grid to binary file content."""
    header = HEADER.pack(grid.get_width(), grid.get_height())
    packed = np.packbits(grid.state, axis=None, bitorder="little")
    return header + packed.tobytes()


def decode_binary(data: bytes) -> Grid:
    """Parse binary file content into a grid.

    Raises:
        FileFormatError: If the header is short, a dimension is negative, or
            the cell data is truncated or followed by extra bytes
    """
    if len(data) < HEADER.size:
        raise FileFormatError(f"Header needs {HEADER.size} bytes, got {len(data)}")

    width, height = HEADER.unpack_from(data)
    if width < 0 or height < 0:
        raise FileFormatError(f"Width and height must be non-negative, got {width}x{height}")

    total = width * height
    expected = (total + 7) // 8
    payload = data[HEADER.size:]
    if len(payload) < expected:
        raise FileFormatError(f"File ends unexpectedly: {len(payload)} of {expected} cell bytes")
    if len(payload) > expected:
        raise FileFormatError(f"Unexpected {len(payload) - expected} bytes after cell data")

    packed = np.asarray(bytearray(payload), dtype=np.uint8)
    bits = np.unpackbits(packed, count=total, bitorder="little")
    return Grid.from_array(bits.reshape(height, width))


def save_binary(path: PathLike, grid: Grid) -> None:
    """Save a grid as a binary file.

    Raises:
        OSError: If the file cannot be opened for writing
    """
    content = encode_binary(grid)
    with open(path, "wb") as f:
        f.write(content)

    logger.debug(f"Saved {grid.get_width()}x{grid.get_height()} grid to {path}")


def load_binary(path: PathLike) -> Grid:
    """Load a grid from a binary file.

    Raises:
        OSError: If the file cannot be opened
        FileFormatError: If the content is malformed
    """
    with open(path, "rb") as f:
        content = f.read()

    grid = decode_binary(content)
    logger.debug(f"Loaded {grid.get_width()}x{grid.get_height()} grid from {path}")
    return grid
