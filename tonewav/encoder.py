"""Sample payload encoding for PCM WAV files."""

import numpy as np

# Frames rendered per step when building a payload
BLOCK_FRAMES = 1 << 18


def frame_count(sample_rate, duration):
    """Number of frames in ``duration`` seconds, shared by header and payload."""
    return round(sample_rate * duration)


def encode_samples(values, bits_per_sample=24, clip=False):
    """
    Pack signed samples into little-endian bytes of ``bits_per_sample`` width.

    Each value is truncated to the target width in two's complement, so
    out-of-range values wrap. Pass ``clip=True`` to saturate them instead.

    Parameters:
    values (array-like): Signed integer samples
    bits_per_sample (int): 16, 24 or 32
    clip (bool): Saturate to the representable range before packing

    Returns:
    bytes: The encoded payload, ``len(values) * bits_per_sample // 8`` long
    """
    width = bits_per_sample // 8
    samples = np.asarray(values, dtype=np.int64)

    if clip:
        limit = 2 ** (bits_per_sample - 1)
        samples = np.clip(samples, -limit, limit - 1)

    # Keep the low `width` bytes of each little-endian int64
    raw = samples.astype("<i8", copy=False).view(np.uint8).reshape(-1, 8)
    return raw[:, :width].tobytes()


def build_payload(source, duration, bits_per_sample=24, block_frames=BLOCK_FRAMES):
    """
    Render ``duration`` seconds of ``source`` and encode it.

    Samples are rendered and packed ``block_frames`` at a time into a
    preallocated buffer, so peak memory stays close to the payload size.

    Returns:
    bytearray: The encoded payload
    """
    width = bits_per_sample // 8
    count = frame_count(source.sample_rate, duration)
    payload = bytearray(count * width)

    for start in range(0, count, block_frames):
        n = min(block_frames, count - start)
        payload[start * width:(start + n) * width] = encode_samples(
            source.samples(n, start), bits_per_sample
        )
    return payload
