"""
Detection Engine
Two-phase scan for abandoned string identifiers:

  1. Build one corpus string from every source file under the roots.
  2. For each .strings file, extract its identifiers and keep the ones the
     corpus never references.

Phase 2 fans out one task per resource file on a thread pool. The calling
thread is the only writer of the result map: it drains the task results
after every task has finished, so the map never depends on completion order.
"""
from concurrent.futures import ThreadPoolExecutor

from file_collector import FileCollector
from file_io import read_text_file
from identifier_extractor import extract_identifiers
from reference_scanner import ReferenceScanner

SOURCE_EXTENSIONS = ("h", "m", "swift", "jsbundle")
STORYBOARD_EXTENSION = "storyboard"
RESOURCE_EXTENSIONS = ("strings",)


def source_extensions(include_storyboard: bool = False) -> set:
    exts = set(SOURCE_EXTENSIONS)
    if include_storyboard:
        exts.add(STORYBOARD_EXTENSION)
    return exts


class DetectionEngine:
    def __init__(self, collector: FileCollector = None, workers: int = None, allowlist=(), out=None, err=None):
        """
        Args:
            collector: FileCollector used for both source and resource files
            workers: scan threads; None lets ThreadPoolExecutor pick, 1 is sequential
            allowlist: identifiers never reported as abandoned
            out: OutputStream for progress lines (None = silent)
            err: OutputStream for per-file diagnostics (None = silent)
        """
        self.collector = collector or FileCollector()
        self.workers = workers
        self.allowlist = frozenset(allowlist)
        self.out = out
        self.err = err

    def build_corpus(self, roots: list, include_storyboard: bool = False) -> str:
        source_files = self.collector.collect(roots, source_extensions(include_storyboard))
        # substring search only, so file order does not matter
        return "".join(read_text_file(f) for f in source_files)

    def collect_resource_files(self, roots: list) -> list:
        return self.collector.collect(roots, RESOURCE_EXTENSIONS)

    def scan_resource_file(self, path: str, scanner: ReferenceScanner) -> tuple:
        """Returns (path, abandoned identifiers in file order)."""
        identifiers = extract_identifiers(read_text_file(path), path=path)
        candidates = [i for i in identifiers if i not in self.allowlist]
        return path, scanner.find_abandoned(candidates)

    def detect(self, roots: list, include_storyboard: bool = False) -> dict:
        """
        Returns:
            dict mapping resource file path -> abandoned identifiers.
            Files without abandoned identifiers are omitted.

        Raises:
            any AbandonedStringsError from collection, reading or parsing.
            Nothing is returned unless every resource file was scanned.
        """
        self._progress("[1/2] Building source corpus...")
        scanner = ReferenceScanner(self.build_corpus(roots, include_storyboard))
        resource_files = self.collect_resource_files(roots)
        self._progress(f"[2/2] Scanning {len(resource_files)} resource files...")
        return self.scan_all(resource_files, scanner)

    def _progress(self, line: str):
        if self.out is not None:
            self.out.writeln(line)

    def scan_all(self, resource_files: list, scanner: ReferenceScanner) -> dict:
        if not resource_files:
            return {}

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            # map() re-raises the first task error while draining
            results = list(executor.map(lambda p: self.scan_resource_file(p, scanner), resource_files))

        abandoned_map = {}
        for path, abandoned in results:
            if abandoned:
                abandoned_map[path] = abandoned
            elif self.err is not None:
                self.err.writeln(f"{path} has no abandoned identifiers")
        return abandoned_map
