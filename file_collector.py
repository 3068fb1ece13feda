"""
File Collector
Recursively enumerates project roots and returns the files whose extension
is in a requested set. Extensions are compared case-insensitively and
without the leading dot ("strings", "m", "swift").
"""
import os

from errors import DirectoryUnreadable


def _normalize_ext(ext: str) -> str:
    return ext.lower().lstrip(".")


class FileCollector:
    def __init__(self, ignore_dirs=()):
        # directory names never descended into (e.g. "Pods")
        self.ignore_dirs = set(ignore_dirs)

    def collect(self, roots: list, extensions) -> list:
        """
        Args:
            roots: directories to walk, in order
            extensions: iterable of extensions, any case, with or without dot

        Returns:
            list of paths, each joined onto the root it was found under.
            Order within a root is the traversal order, not sorted.

        Raises:
            DirectoryUnreadable: a root (or a directory below it) could not be
            enumerated. The whole call fails; no partial list is returned.
        """
        wanted = {_normalize_ext(e) for e in extensions}
        files = []
        for root in roots:
            files.extend(self._collect_root(root, wanted))
        return files

    def _collect_root(self, root: str, wanted: set) -> list:
        if not os.path.isdir(root):
            reason = "no such directory" if not os.path.exists(root) else "not a directory"
            raise DirectoryUnreadable(root, reason)

        def fail(error: OSError):
            raise DirectoryUnreadable(error.filename or root, error.strerror or str(error)) from error

        found = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=fail):
            if self.ignore_dirs:
                dirnames[:] = [d for d in dirnames if d not in self.ignore_dirs]
            for name in filenames:
                ext = os.path.splitext(name)[1]
                if ext and _normalize_ext(ext) in wanted:
                    rel = os.path.relpath(os.path.join(dirpath, name), root)
                    found.append(os.path.join(root, rel))
        return found
