"""
File read/write collaborators: read a file into a string, and replace a
file's contents atomically.
"""
import codecs
import os
import shutil
import tempfile
from pathlib import Path

from errors import FileUnreadable, FileWriteFailure


def read_text_file(path) -> str:
    """Read a source or resource file as text.

    UTF-8 by default (a UTF-8 BOM is dropped). Files starting with a UTF-16
    BOM are decoded as UTF-16, which is how Xcode often saves .strings files.
    """
    try:
        raw = Path(path).read_bytes()
        if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            return raw.decode("utf-16")
        return raw.decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadable(str(path), str(e)) from e


def write_text_atomic(path, text: str, encoding: str = "utf-8"):
    """Replace `path` with `text`. Either the whole write lands or the
    original file is left untouched."""
    target = Path(path)
    try:
        data = text.encode(encoding)
    except (UnicodeError, LookupError) as e:
        raise FileWriteFailure(str(path), str(e)) from e

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise FileWriteFailure(str(path), str(e)) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
