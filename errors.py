"""
Error taxonomy for the abandoned strings finder.

Everything except FileWriteFailure is fatal for a run: main() prints a
one-line diagnostic and exits non-zero. FileWriteFailure is recovered per
resource file by the rewriter.
"""


class AbandonedStringsError(Exception):
    """Base class for all errors raised by the finder."""


class DirectoryUnreadable(AbandonedStringsError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"cannot enumerate directory: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class FileUnreadable(AbandonedStringsError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"cannot read file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedIdentifierLine(AbandonedStringsError):
    """An identifier line has an opening quote but no closing quote."""

    def __init__(self, line: str, path: str = None, line_number: int = None):
        self.line = line
        self.path = path
        self.line_number = line_number
        where = ""
        if path:
            where = f"{path}:{line_number}: " if line_number else f"{path}: "
        super().__init__(f"{where}identifier line has no closing quote: {line!r}")


class EncodingFailure(AbandonedStringsError):
    pass


class FileWriteFailure(AbandonedStringsError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"cannot write file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ConfigError(AbandonedStringsError):
    pass
