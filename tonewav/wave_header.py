"""RIFF/WAVE header for uncompressed linear PCM."""

import logging
import math
import struct
from dataclasses import dataclass

from tonewav.encoder import frame_count
from tonewav.errors import FormatOverflowError, InvalidArgumentError

logger = logging.getLogger(__name__)

HEADER_SIZE = 44
FMT_CHUNK_SIZE = 16
AUDIO_FORMAT_PCM = 1
CHANNEL_COUNT_MONO = 1

UINT32_MAX = 0xFFFFFFFF

# RIFF tag, RIFF size, WAVE tag, fmt tag, fmt size, audio format, channels,
# sample rate, byte rate, block align, bits per sample, data tag, data size
_HEADER_FORMAT = "<4sI4s4sIHHIIHH4sI"


@dataclass(frozen=True)
class WaveHeader:
    sample_rate: int
    bits_per_sample: int
    channel_count: int
    data_size: int
    audio_format: int = AUDIO_FORMAT_PCM

    @property
    def block_align(self):
        return self.channel_count * self.bits_per_sample // 8

    @property
    def byte_rate(self):
        return self.sample_rate * self.block_align

    @property
    def file_size(self):
        """Value of the RIFF size field: whole file minus the first 8 bytes."""
        return HEADER_SIZE + self.data_size - 8

    @property
    def frame_count(self):
        return self.data_size // self.block_align

    def to_bytes(self):
        return struct.pack(
            _HEADER_FORMAT,
            b"RIFF",
            self.file_size,
            b"WAVE",
            b"fmt ",
            FMT_CHUNK_SIZE,
            self.audio_format,
            self.channel_count,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            b"data",
            self.data_size,
        )


def build_header(sample_rate, bits_per_sample, duration, channel_count=CHANNEL_COUNT_MONO):
    """
    Build the header for a PCM file holding ``duration`` seconds of audio.

    The data size is derived from the same frame count the payload uses,
    so the declared and actual payload lengths always agree.

    Parameters:
    sample_rate (int): Number of samples per second
    bits_per_sample (int): Bit depth of each sample
    duration (float): Length of the audio in seconds
    channel_count (int): Number of channels

    Returns:
    WaveHeader: The header record

    Raises:
    FormatOverflowError: If the data does not fit in the 32-bit size fields
    """
    block_align = channel_count * bits_per_sample // 8
    if not math.isfinite(sample_rate * duration):
        raise FormatOverflowError(
            f"File generation failed. Duration {duration} seconds is too long to encode."
        )
    data_size = frame_count(sample_rate, duration) * block_align

    if data_size > UINT32_MAX:
        raise FormatOverflowError(
            "File generation failed. Data size exceeds the maximum limit "
            f"({data_size} > {UINT32_MAX} bytes)."
        )
    # The RIFF size field covers the rest of the header too
    if HEADER_SIZE + data_size - 8 > UINT32_MAX:
        raise FormatOverflowError(
            "File generation failed. File size exceeds the maximum limit "
            f"({HEADER_SIZE + data_size} bytes)."
        )

    header = WaveHeader(
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        channel_count=channel_count,
        data_size=data_size,
    )
    logger.debug("Built header: %s", header)
    return header


def parse_header(data):
    """Decode the first 44 bytes of a PCM WAV file into a WaveHeader."""
    if len(data) < HEADER_SIZE:
        raise InvalidArgumentError(
            f"Invalid header. Expected {HEADER_SIZE} bytes, got {len(data)}."
        )

    (riff, file_size, wave, fmt, fmt_size, audio_format, channel_count, sample_rate,
     byte_rate, block_align, bits_per_sample, data_tag, data_size) = struct.unpack(
        _HEADER_FORMAT, bytes(data[:HEADER_SIZE])
    )

    if (riff, wave, fmt, data_tag) != (b"RIFF", b"WAVE", b"fmt ", b"data"):
        raise InvalidArgumentError("Invalid header. Missing RIFF/WAVE chunk tags.")
    if fmt_size != FMT_CHUNK_SIZE:
        raise InvalidArgumentError(f"Invalid header. Unexpected fmt chunk size {fmt_size}.")

    header = WaveHeader(
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        channel_count=channel_count,
        data_size=data_size,
        audio_format=audio_format,
    )
    if (file_size, byte_rate, block_align) != (header.file_size, header.byte_rate, header.block_align):
        raise InvalidArgumentError("Invalid header. Derived size fields are inconsistent.")
    return header
