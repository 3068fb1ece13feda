"""
Output streams with a fixed text encoding.

Every write is encoded explicitly before it reaches the underlying stream.
Text that cannot be encoded is not dropped silently: a diagnostic is forced
onto stderr instead, and if even that cannot be encoded the run aborts
with EncodingFailure.
"""
import sys

from errors import EncodingFailure

DEFAULT_ENCODING = "utf-8"


def _binary(stream):
    return getattr(stream, "buffer", stream)


class OutputStream:
    def __init__(self, stream, encoding: str = DEFAULT_ENCODING, fallback=None, is_stderr: bool = False):
        """
        Args:
            stream: text stream with a .buffer (sys.stdout) or a binary stream
            encoding: fixed encoding applied to every write
            fallback: stream used for forced diagnostics (default: sys.stderr)
            is_stderr: True when `stream` itself is the error stream
        """
        self.stream = stream
        self.encoding = encoding
        self.fallback = fallback
        self.is_stderr = is_stderr

    def write(self, text: str):
        try:
            data = text.encode(self.encoding)
        except (UnicodeError, LookupError):
            self.force_write_to_stderr(
                f"Failed to convert string: {ascii(text)} to bytes using encoding: {self.encoding!r}\n"
            )
            return
        self._emit(self.stream, data)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def force_write_to_stderr(self, text: str):
        try:
            data = text.encode(self.encoding)
        except (UnicodeError, LookupError) as e:
            raise EncodingFailure(f"failed to write to stderr with string: {ascii(text)}") from e
        target = self.stream if self.is_stderr else (self.fallback or sys.stderr)
        self._emit(target, data)

    @staticmethod
    def _emit(target, data: bytes):
        if hasattr(target, "buffer"):
            # keep ordering with anything already written through the text layer
            target.flush()
        out = _binary(target)
        out.write(data)
        out.flush()


def stdout(encoding: str = DEFAULT_ENCODING) -> OutputStream:
    return OutputStream(sys.stdout, encoding=encoding, fallback=sys.stderr)


def stderr(encoding: str = DEFAULT_ENCODING) -> OutputStream:
    return OutputStream(sys.stderr, encoding=encoding, is_stderr=True)
