"""Reader for the header of mono IMA ADPCM wave files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

WAV_BUFFER_SIZE = 4096

BAD_HEADER = -1
UNSUPPORTED_FORMAT = -2
NOT_MONO = -3
NO_DATA = -4


class WaveFormatError(ValueError):
    """Raised when a wave file cannot be used; ``code`` tells why."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class WaveInfo:
    """What the header says about the sample data that follows it."""

    sample_rate: int
    block_align: int
    data_size: int


def _require(stream: BinaryIO, expected: bytes, message: str, code: int) -> None:
    if stream.read(len(expected)) != expected:
        raise WaveFormatError(message, code)


def _read_le(stream: BinaryIO, size: int, code: int) -> int:
    raw = stream.read(size)
    if len(raw) < size:
        raise WaveFormatError("wave header is truncated", code)
    return int.from_bytes(raw, "little")


def _find(stream: BinaryIO, marker: bytes, message: str, code: int) -> None:
    window = b""
    while True:
        byte = stream.read(1)
        if not byte:
            raise WaveFormatError(message, code)
        window = (window + byte)[-len(marker):]
        if window == marker:
            return


def parse_wave(stream: BinaryIO) -> WaveInfo:
    """Read a wave header, leaving ``stream`` at the start of the sample data."""
    _require(stream, b"RIFF", "not a RIFF file", BAD_HEADER)
    stream.read(4)
    _require(stream, b"WAVE", "not a WAVE file", BAD_HEADER)
    _find(stream, b"fmt ", "no format chunk", BAD_HEADER)
    stream.read(4)
    _require(stream, b"\x11\x00", "sample data is not IMA ADPCM", UNSUPPORTED_FORMAT)
    _require(stream, b"\x01\x00", "sample data is not mono", NOT_MONO)
    sample_rate = _read_le(stream, 4, BAD_HEADER)
    stream.read(4)
    block_align = _read_le(stream, 2, BAD_HEADER)
    _find(stream, b"data", "no data chunk", NO_DATA)
    data_size = _read_le(stream, 4, NO_DATA)
    return WaveInfo(sample_rate, block_align, data_size)