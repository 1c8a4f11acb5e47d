"""Helpers for the binary streams uploads arrive as."""

import os
from typing import BinaryIO


def stream_length(stream: BinaryIO) -> int:
    """Return the number of bytes left to read in a seekable stream.

    The stream position is restored before returning.
    """
    position = stream.tell()
    try:
        end = stream.seek(0, os.SEEK_END)
    finally:
        stream.seek(position)

    return max(end - position, 0)
