"""Pure sine tone generation into 24-bit PCM WAV files."""

from tonewav.config import ToneConfig
from tonewav.encoder import build_payload, encode_samples, frame_count
from tonewav.errors import (
    FormatOverflowError,
    InvalidArgumentError,
    OpenError,
    ToneError,
    WriteError,
)
from tonewav.generate import GenerationResult, create_wave_file, render_wave
from tonewav.sink import write_wave_file
from tonewav.source import SineWaveGenerator
from tonewav.wave_header import HEADER_SIZE, WaveHeader, build_header, parse_header

__version__ = "0.1.0"

__all__ = [
    "FormatOverflowError",
    "GenerationResult",
    "HEADER_SIZE",
    "InvalidArgumentError",
    "OpenError",
    "SineWaveGenerator",
    "ToneConfig",
    "ToneError",
    "WaveHeader",
    "WriteError",
    "build_header",
    "build_payload",
    "create_wave_file",
    "encode_samples",
    "frame_count",
    "parse_header",
    "render_wave",
    "write_wave_file",
]
