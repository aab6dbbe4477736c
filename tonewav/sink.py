"""Writing encoded WAV data to disk."""

import logging
import os

from tonewav.errors import OpenError, WriteError

logger = logging.getLogger(__name__)


def _write_segment(file, data, segment):
    try:
        written = file.write(data)
        # Push buffered bytes out so a failure is attributed to this segment
        file.flush()
    except OSError as e:
        raise WriteError(
            f"File generation failed. Failed to write {segment} data to file: {e}", segment
        ) from e

    if written != len(data):
        raise WriteError(
            f"File generation failed. Failed to write {segment} data to file "
            f"({written} of {len(data)} bytes written).",
            segment,
        )


def _remove_partial(path):
    try:
        os.remove(path)
    except OSError as e:
        logger.warning("Could not remove incomplete file %s: %s", path, e)


def write_wave_file(header, payload, path):
    """
    Write the header bytes followed by the payload bytes to ``path``.

    Any existing file is truncated. If a write fails the incomplete file is
    removed before the error propagates.

    Raises:
    OpenError: If the file cannot be opened for writing
    WriteError: If the header or payload is not written in full
    """
    try:
        file = open(path, "wb")
    except OSError as e:
        raise OpenError(f"File generation failed. Failed to open file {path}: {e}", path) from e

    try:
        with file:
            _write_segment(file, header, "header")
            _write_segment(file, payload, "payload")
    except WriteError:
        _remove_partial(path)
        raise
    except OSError as e:
        # Buffered data is flushed on close
        _remove_partial(path)
        raise WriteError(
            f"File generation failed. Failed to write payload data to file: {e}", "payload"
        ) from e

    logger.debug("Wrote %d bytes to %s", len(header) + len(payload), path)
    return len(header) + len(payload)
