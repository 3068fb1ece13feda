"""
Resource Rewriter
Removes abandoned identifier lines from .strings files.

The rewrite is strictly subtractive: comments, blank lines and anything
that does not parse as an identifier line are kept verbatim and in order.
Rewriting twice with the same removal set changes nothing the second time.
"""
from errors import FileUnreadable, FileWriteFailure, MalformedIdentifierLine
from file_io import read_text_file, write_text_atomic
from identifier_extractor import DOUBLE_QUOTE, extract_identifier_from_trimmed_line


def _keep_line(line: str, identifiers_to_remove) -> bool:
    trimmed = line.strip()
    if not trimmed.startswith(DOUBLE_QUOTE):
        return True
    try:
        identifier = extract_identifier_from_trimmed_line(trimmed)
    except MalformedIdentifierLine:
        return True
    return identifier not in identifiers_to_remove


def rewrite(contents: str, identifiers_to_remove) -> str:
    """Return `contents` without the identifier lines named in `identifiers_to_remove`.

    Lines are split and rejoined on "\\n", so "\\r\\n" files keep their "\\r".
    """
    remove = set(identifiers_to_remove)
    lines = contents.split("\n")
    return "\n".join(line for line in lines if _keep_line(line, remove))


class ResourceRewriter:
    def __init__(self, out=None, err=None, encoding: str = "utf-8"):
        self.out = out
        self.err = err
        self.encoding = encoding

    def apply(self, abandoned_map: dict) -> dict:
        """
        Rewrite every file in `abandoned_map` in place.

        A file that cannot be read back or written is reported and skipped;
        the remaining files are still processed.

        Returns:
            {"written": [paths], "failed": [{"path": ..., "error": ...}]}
        """
        results = {"written": [], "failed": []}
        for path in sorted(abandoned_map):
            if self.out is not None:
                self.out.writeln(f"\n\nNow modifying {path} ...")
            try:
                updated = rewrite(read_text_file(path), abandoned_map[path])
                write_text_atomic(path, updated, encoding=self.encoding)
            except (FileUnreadable, FileWriteFailure) as e:
                results["failed"].append({"path": path, "error": str(e)})
                if self.err is not None:
                    self.err.writeln(f"ERROR writing file: {path} ({e.reason})")
                continue
            results["written"].append(path)
        return results
