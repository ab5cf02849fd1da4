"""
Block-wise stream copying, with whole-stream and whole-file helpers

copy_streams() is the base for everything else in this module. Every helper
takes an optional block_size that defaults to DEFAULT_BLOCK_SIZE. Once its
arguments are valid, every helper closes the streams it is given.

Most useful helpers:
    read_whole_file(path)
    write_to_file(data, path)
"""

import io
import os
import logging
from typing import BinaryIO, Union

from .constants import DEFAULT_BLOCK_SIZE, DEFAULT_ENCODING
from .exceptions import InvalidBlockSizeError, ValidationError

logger = logging.getLogger(__name__)

PathType = Union[str, os.PathLike]
DataType = Union[bytes, bytearray, memoryview, str]


class ByteSink(io.RawIOBase):
    """In-memory binary destination whose contents survive close()"""

    def __init__(self) -> None:
        super().__init__()
        self._buffer = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        if self.closed:
            raise ValueError("write to closed ByteSink")
        view = memoryview(b)
        self._buffer += view
        return view.nbytes

    def getvalue(self) -> bytes:
        """Return everything written so far"""
        return bytes(self._buffer)


def validate_block_size(block_size: int) -> None:
    """Raise InvalidBlockSizeError unless block_size is a positive int"""
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise InvalidBlockSizeError(
            f"Block size must be an integer, got {type(block_size).__name__}"
        )
    if block_size < 1:
        raise InvalidBlockSizeError(f"Block size must be at least 1, got {block_size}")


def _close_after_failure(*handles) -> None:
    """Close every handle, logging close errors so the copy error wins"""
    for handle in handles:
        try:
            handle.close()
        except Exception as e:
            logger.warning("Error closing %r after failed copy: %s", handle, e)


def copy_streams(source: BinaryIO, destination: BinaryIO,
                 block_size: int = DEFAULT_BLOCK_SIZE) -> None:
    """
    Copy all remaining bytes from source to destination.

    Reads up to block_size bytes at a time and writes exactly the bytes
    read, until source reaches EOF. Both streams are closed at the end,
    whether the copy succeeded or not. A read or write error is re-raised
    after the streams are closed. A non-blocking source with no data ready
    raises BlockingIOError rather than being taken as EOF.

    An invalid block_size is rejected before any I/O, leaving both streams
    open.
    """
    validate_block_size(block_size)

    total = 0
    try:
        while True:
            block = source.read(block_size)
            if block is None:
                raise BlockingIOError("Source has no data available (non-blocking read)")
            if not block:
                break
            destination.write(block)
            total += len(block)
    except BaseException:
        _close_after_failure(source, destination)
        raise

    try:
        source.close()
    finally:
        destination.close()

    logger.debug("Copied %d bytes in blocks of %d", total, block_size)


def read_whole_stream(source: BinaryIO, block_size: int = DEFAULT_BLOCK_SIZE) -> bytes:
    """Read all remaining bytes from source and close it"""
    sink = ByteSink()
    copy_streams(source, sink, block_size)
    return sink.getvalue()


def read_whole_file(path: PathType, block_size: int = DEFAULT_BLOCK_SIZE) -> bytes:
    """Read the whole file at path"""
    validate_block_size(block_size)
    return read_whole_stream(open(path, "rb"), block_size)


def _as_bytes(data: DataType, encoding: str) -> bytes:
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise ValidationError(
        f"Cannot write {type(data).__name__}, expected bytes or str"
    )


def write_to_stream(data: DataType, destination: BinaryIO,
                    block_size: int = DEFAULT_BLOCK_SIZE,
                    encoding: str = DEFAULT_ENCODING) -> None:
    """
    Write data (bytes, or text encoded with encoding) to destination and close it.

    Argument errors (bad block_size or data type) are raised before any I/O
    and leave destination open.
    """
    validate_block_size(block_size)
    payload = _as_bytes(data, encoding)
    copy_streams(io.BytesIO(payload), destination, block_size)


def write_to_file(data: DataType, path: PathType,
                  block_size: int = DEFAULT_BLOCK_SIZE,
                  encoding: str = DEFAULT_ENCODING) -> None:
    """Write data to the file at path, creating or truncating it"""
    # Check arguments before truncating anything
    validate_block_size(block_size)
    payload = _as_bytes(data, encoding)
    write_to_stream(payload, open(path, "wb"), block_size)
