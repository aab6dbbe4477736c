import argparse
import logging
import sys

from scipy.io import wavfile

from tonewav.config import DEFAULT_AMPLITUDE, OUTPUT_PATH, ToneConfig
from tonewav.generate import create_wave_file
from tonewav.wave_header import HEADER_SIZE, parse_header


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="tonewav",
        description="Create a 24-bit, 48 kHz mono WAV file containing a pure sine tone.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        'frequency',
        type=int,
        help='Wave frequency in Hz'
    )

    parser.add_argument(
        'duration',
        type=float,
        help='File length in seconds'
    )

    parser.add_argument(
        '-a', '--amplitude',
        type=int,
        default=DEFAULT_AMPLITUDE,
        help='Peak sample value (must fit in 24 bits)'
    )

    parser.add_argument(
        '-o', '--output',
        default=OUTPUT_PATH,
        help='Output WAV filename'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log each step and print the properties of the written file'
    )

    return parser.parse_args(argv)


def describe_file(path):
    """Print the header fields and the decoded properties of a WAV file"""
    with open(path, 'rb') as f:
        header = parse_header(f.read(HEADER_SIZE))

    rate, data = wavfile.read(path)
    channels = 1 if data.ndim == 1 else data.shape[1]

    print("Output WAV properties:")
    print(f"- Sample rate: {rate} Hz")
    print(f"- Channels: {channels}")
    print(f"- Sample width: {header.bits_per_sample} bits")
    print(f"- Frames: {data.shape[0]}")
    print(f"- Data size: {header.data_size} bytes")


def main(argv=None):
    args = parse_arguments(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = ToneConfig(amplitude=args.amplitude, output_path=args.output)

    print(f"Generating a wave file with wave frequency {args.frequency}Hz "
          f"and file length {args.duration} seconds...")

    result = create_wave_file(args.frequency, args.duration, config)
    if not result.ok:
        print(f'Error: "{result.message}"', file=sys.stderr)
        return 1

    if args.verbose:
        describe_file(result.path)

    print("Finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
