"""Decoder for mono IMA ADPCM sample data."""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator

BUFFER_SIZE = 4096
HEADER_SIZE = 4

STEP_TABLE = (
    7, 8, 9, 10, 11, 12, 13, 14,
    16, 17, 19, 21, 23, 25, 28, 31,
    34, 37, 41, 45, 50, 55, 60, 66,
    73, 80, 88, 97, 107, 118, 130, 143,
    157, 173, 190, 209, 230, 253, 279, 307,
    337, 371, 408, 449, 494, 544, 598, 658,
    724, 796, 876, 963, 1060, 1166, 1282, 1411,
    1552, 1707, 1878, 2066, 2272, 2499, 2749, 3024,
    3327, 3660, 4026, 4428, 4871, 5358, 5894, 6484,
    7132, 7845, 8630, 9493, 10442, 11487, 12635, 13899,
    15289, 16818, 18500, 20350, 22385, 24623, 27086, 29794,
    32767,
)

INDEX_TABLE = (-1, -1, -1, -1, 2, 4, 6, 8)

_MAX_INDEX = len(STEP_TABLE) - 1


class AdpcmDecoder:
    """Streams 16-bit samples out of block-structured IMA ADPCM data.

    Each block starts with a four-byte header, which yields one silent sample,
    followed by two samples per byte, low nibble first.
    """

    def __init__(self, stream: BinaryIO, block_align: int) -> None:
        if block_align < HEADER_SIZE:
            raise ValueError(f"block_align {block_align} is smaller than a block header")
        self._stream = stream
        self.block_align = block_align
        self._buffer = b""
        self._pos = 0
        self.reset()

    def reset(self) -> None:
        """Forget the decoding state so the next sample reads a block header."""
        self.predictor = 0
        self.step_index = 0
        self.step = 0
        self._remaining = 0
        self._high_pending = False
        self._byte = 0

    def _read_byte(self) -> int:
        if self._pos >= len(self._buffer):
            self._buffer = self._stream.read(BUFFER_SIZE)
            self._pos = 0
            if not self._buffer:
                raise EOFError("ADPCM data exhausted")
        value = self._buffer[self._pos]
        self._pos += 1
        return value

    def _nibble(self) -> int:
        if not self._high_pending:
            self._byte = self._read_byte()
            self._high_pending = True
            return self._byte & 0x0F
        self._high_pending = False
        return (self._byte & 0xF0) >> 4

    def next_sample(self) -> int:
        """Decode one sample; raises EOFError when the data runs out."""
        if self._remaining == 0:
            self._read_byte()
            self._read_byte()
            index = self._read_byte()
            if index >= 128:
                index -= 256
            self._read_byte()
            self._remaining = self.block_align * 2 - 2 * HEADER_SIZE
            self.predictor = 0
            self.step_index = min(max(index, 0), _MAX_INDEX)
            self.step = 0
            return self.predictor

        nibble = self._nibble()
        self.step = STEP_TABLE[self.step_index]
        diff = (self.step >> 3) + (nibble & 7) * (self.step >> 2)
        if nibble & 8:
            self.predictor -= diff
        else:
            self.predictor += diff
        self.predictor = min(max(self.predictor, -32768), 32767)
        self.step_index = min(max(self.step_index + INDEX_TABLE[nibble & 7], 0), _MAX_INDEX)
        self._remaining -= 1
        return self.predictor

    def __iter__(self) -> Iterator[int]:
        while True:
            try:
                sample = self.next_sample()
            except EOFError:
                return
            yield sample


def decode(data: bytes, block_align: int) -> list[int]:
    """Decode a whole buffer of ADPCM blocks into samples."""
    return list(AdpcmDecoder(io.BytesIO(data), block_align))