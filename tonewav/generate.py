"""Top-level wave file generation."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from tonewav.config import ToneConfig
from tonewav.encoder import build_payload
from tonewav.errors import InvalidArgumentError, ToneError
from tonewav.sink import write_wave_file
from tonewav.source import SineWaveGenerator
from tonewav.wave_header import WaveHeader, build_header

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    ok: bool
    path: str
    header: Optional[WaveHeader] = None
    error: Optional[ToneError] = None

    @property
    def message(self):
        return str(self.error) if self.error is not None else ""


def validate_arguments(frequency, duration, config):
    """
    Check the tone request against the configuration.

    Raises:
    InvalidArgumentError: If the duration is not positive, the frequency is
        negative or above the Nyquist limit, or the config is invalid
    """
    config.validate()

    if not (math.isfinite(duration) and duration > 0):
        raise InvalidArgumentError("Invalid argument. File length should be greater than 0.")
    if frequency < 0:
        raise InvalidArgumentError("Invalid argument. Wave frequency should not be negative.")
    if frequency > config.nyquist:
        raise InvalidArgumentError(
            "Invalid argument. Wave frequency should be less than or equal to half of the sample rate."
        )


def render_wave(frequency, duration, config):
    """
    Build the header and payload bytes for a tone, without touching disk.

    Returns:
    tuple: (WaveHeader, header bytes, payload bytes)
    """
    validate_arguments(frequency, duration, config)

    # Header first, so an overflow is caught before any samples are rendered
    header = build_header(config.sample_rate, config.bits_per_sample, duration, config.channel_count)

    source = SineWaveGenerator(config.amplitude, frequency, config.sample_rate)
    payload = build_payload(source, duration, config.bits_per_sample)

    if len(payload) != header.data_size:
        raise ToneError(
            f"Payload size {len(payload)} does not match header data size {header.data_size}."
        )
    return header, header.to_bytes(), payload


def create_wave_file(frequency, duration, config=None):
    """
    Generate a pure sine tone and write it as a PCM WAV file.

    Parameters:
    frequency (int): Frequency of the tone in Hz
    duration (float): Length of the file in seconds
    config (ToneConfig): Audio settings and output path, defaults if omitted

    Returns:
    GenerationResult: ``ok`` is False and ``error`` is set on any failure
    """
    if config is None:
        config = ToneConfig()
    path = config.output_path

    try:
        header, header_bytes, payload = render_wave(frequency, duration, config)
        write_wave_file(header_bytes, payload, path)
    except ToneError as e:
        logger.debug("Generation failed (%s): %s", e.kind, e)
        return GenerationResult(ok=False, path=path, error=e)

    logger.debug("Generated %d frames at %d Hz into %s", header.frame_count, config.sample_rate, path)
    return GenerationResult(ok=True, path=path, header=header)
