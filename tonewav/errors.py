"""Error types raised while generating a wave file."""


class ToneError(Exception):
    """Base class for every failure tonewav reports."""

    kind = "error"


class InvalidArgumentError(ToneError):
    kind = "invalid-argument"


class FormatOverflowError(ToneError):
    """The audio data does not fit in the 32-bit size fields of the header."""

    kind = "overflow"


class OpenError(ToneError):
    kind = "open-error"

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class WriteError(ToneError):
    """A write to an open file failed or was short.

    ``segment`` names the part that failed, either ``"header"`` or ``"payload"``.
    """

    kind = "write-error"

    def __init__(self, message, segment):
        super().__init__(message)
        self.segment = segment
