"""Configuration and constants for tonewav."""

from dataclasses import dataclass

from tonewav.errors import InvalidArgumentError

# Audio settings
SAMPLE_RATE = 48000
BITS_PER_SAMPLE = 24
CHANNEL_COUNT = 1

# Peak value of the generated tone. Must stay below 2**23 - 1 for 24-bit
# output, otherwise samples wrap around when truncated to 3 bytes.
DEFAULT_AMPLITUDE = 8_000_000

# Output
OUTPUT_PATH = "audio.wav"

SUPPORTED_BIT_DEPTHS = (16, 24, 32)


@dataclass(frozen=True)
class ToneConfig:
    amplitude: int = DEFAULT_AMPLITUDE
    sample_rate: int = SAMPLE_RATE
    bits_per_sample: int = BITS_PER_SAMPLE
    channel_count: int = CHANNEL_COUNT
    output_path: str = OUTPUT_PATH

    @property
    def max_amplitude(self):
        return 2 ** (self.bits_per_sample - 1) - 1

    @property
    def nyquist(self):
        return self.sample_rate / 2

    def validate(self):
        """
        Check that the configuration describes something we can encode.

        Raises:
        InvalidArgumentError: If the sample rate, bit depth, channel count
            or amplitude is out of range.
        """
        if self.sample_rate <= 0:
            raise InvalidArgumentError(
                f"Invalid argument. Sample rate should be greater than 0, got {self.sample_rate}."
            )
        if self.bits_per_sample not in SUPPORTED_BIT_DEPTHS:
            raise InvalidArgumentError(
                f"Invalid argument. Unsupported bit depth {self.bits_per_sample}, "
                f"expected one of {SUPPORTED_BIT_DEPTHS}."
            )
        if self.channel_count != 1:
            raise InvalidArgumentError("Invalid argument. Only mono output is supported.")
        if not 0 <= self.amplitude <= self.max_amplitude:
            raise InvalidArgumentError(
                f"Invalid argument. Amplitude should be between 0 and {self.max_amplitude} "
                f"for {self.bits_per_sample}-bit samples, got {self.amplitude}."
            )
        return self
