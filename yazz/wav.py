"""Reading of PCM WAV data."""

import os
import struct
from dataclasses import dataclass, field
from pathlib import Path

_HEADER_FORMAT = "<4sI4s4sIHHIIHH4sI"
HEADER_SIZE = struct.calcsize(_HEADER_FORMAT)
_LONG_MAX = 2**63 - 1


class WavFormatError(ValueError):
    """Raised when WAV data is malformed or uses an unsupported format."""


@dataclass
class WavHeader:
    """The canonical 44-byte RIFF/WAVE header of a PCM file."""

    riff: bytes = b"RIFF"
    chunk_size: int = 36
    wave: bytes = b"WAVE"
    fmt: bytes = b"fmt "
    subchunk1_size: int = 16
    audio_format: int = 1
    num_of_chan: int = 1
    samples_per_sec: int = 8000
    bytes_per_sec: int = 16000
    block_align: int = 2
    bits_per_sample: int = 16
    data: bytes = b"data"
    subchunk2_size: int = 0

    @classmethod
    def unpack(cls, data: bytes) -> "WavHeader":
        """Decode a header from the first bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise WavFormatError("Invalid RIFF/WAVE format: header is truncated")
        return cls(*struct.unpack_from(_HEADER_FORMAT, data))

    def pack(self) -> bytes:
        """Encode the header as its 44 little-endian bytes."""
        return struct.pack(
            _HEADER_FORMAT,
            self.riff,
            self.chunk_size,
            self.wave,
            self.fmt,
            self.subchunk1_size,
            self.audio_format,
            self.num_of_chan,
            self.samples_per_sec,
            self.bytes_per_sec,
            self.block_align,
            self.bits_per_sample,
            self.data,
            self.subchunk2_size,
        )

    def check(self) -> None:
        """Raise ``WavFormatError`` unless the header describes supported data."""
        if self.riff != b"RIFF" or self.wave != b"WAVE":
            raise WavFormatError("Invalid RIFF/WAVE format")
        if self.audio_format != 1:
            raise WavFormatError(
                "Invalid WAV format: only PCM audio format is supported"
            )
        if self.num_of_chan > 2 or self.num_of_chan == 0:
            raise WavFormatError(
                "Invalid WAV format: only 1 or 2 channels audio is supported"
            )
        if self.bits_per_sample // self.num_of_chan != 16:
            raise WavFormatError(
                "Invalid WAV format: only 16-bit per channel is supported"
            )
        if self.subchunk2_size <= 0:
            raise WavFormatError("Invalid WAV format: no sample data")
        if self.subchunk2_size > _LONG_MAX:
            raise WavFormatError("File too big")


@dataclass
class WavData:
    """Decoded samples of a WAV file, mixed down to one channel."""

    header: WavHeader
    raw_data: list[int] = field(default_factory=list)
    normalized_data: list[float] = field(default_factory=list)
    min_val: int = 0
    max_val: int = 0

    @property
    def number_of_samples(self) -> int:
        return len(self.raw_data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "WavData":
        """Decode a whole WAV file held in memory."""
        header = WavHeader.unpack(data)
        header.check()
        payload = data[HEADER_SIZE:]

        bytes_per_sample = header.bits_per_sample // 8
        expected = header.subchunk2_size // (header.num_of_chan * bytes_per_sample)

        if header.num_of_chan == 1:
            count = min(expected, len(payload) // 2)
            samples = list(struct.unpack_from(f"<{count}h", payload))
        else:
            count = min(expected, len(payload) // 4)
            values = struct.unpack_from(f"<{2 * count}h", payload)
            samples = [
                (abs(left) + abs(right)) // 2
                for left, right in zip(values[0::2], values[1::2])
            ]

        if not samples:
            raise WavFormatError("Invalid WAV format: no sample data")

        min_val = min(0, min(samples))
        max_val = max(0, max(samples))
        max_abs = float(max(abs(min_val), abs(max_val)))
        if max_abs:
            normalized = [value / max_abs for value in samples]
        else:
            normalized = [0.0] * len(samples)

        return cls(header, samples, normalized, min_val, max_val)


def read_wav(path: "str | os.PathLike[str]") -> WavData:
    """Read and decode a WAV file from disk."""
    return WavData.from_bytes(Path(path).read_bytes())