import os
import tempfile
import unittest
from unittest.mock import patch
from pathlib import Path

from errors import DirectoryUnreadable
from file_collector import FileCollector


class FileCollectorTest(unittest.TestCase):
    def _tree(self, root: Path):
        (root / "App/Base.lproj").mkdir(parents=True)
        (root / "App/View.swift").write_text("")
        (root / "App/Legacy.M").write_text("")
        (root / "App/Base.lproj/Localizable.strings").write_text("")
        (root / "App/notes.txt").write_text("")
        (root / "Pods/Lib").mkdir(parents=True)
        (root / "Pods/Lib/Lib.h").write_text("")

    def test_matches_extensions_case_insensitively(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._tree(root)
            found = FileCollector().collect([tmp], {"swift", "m", "h"})
            rel = sorted(os.path.relpath(p, tmp) for p in found)
            self.assertEqual(rel, sorted([
                os.path.join("App", "View.swift"),
                os.path.join("App", "Legacy.M"),
                os.path.join("Pods", "Lib", "Lib.h"),
            ]))

    def test_paths_are_joined_onto_the_root(self):
        with tempfile.TemporaryDirectory() as tmp:
            self._tree(Path(tmp))
            found = FileCollector().collect([tmp], [".STRINGS"])
            self.assertEqual(found, [os.path.join(tmp, "App", "Base.lproj", "Localizable.strings")])

    def test_multiple_roots(self):
        with tempfile.TemporaryDirectory() as a, tempfile.TemporaryDirectory() as b:
            Path(a, "One.m").write_text("")
            Path(b, "Two.m").write_text("")
            found = FileCollector().collect([a, b], {"m"})
            self.assertEqual(found, [os.path.join(a, "One.m"), os.path.join(b, "Two.m")])

    def test_ignore_dirs_are_not_descended(self):
        with tempfile.TemporaryDirectory() as tmp:
            self._tree(Path(tmp))
            found = FileCollector(ignore_dirs=["Pods"]).collect([tmp], {"h"})
            self.assertEqual(found, [])

    def test_missing_root_fails_the_call(self):
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, "Ok.m").write_text("")
            missing = os.path.join(tmp, "does-not-exist")
            with self.assertRaises(DirectoryUnreadable) as ctx:
                FileCollector().collect([tmp, missing], {"m"})
            self.assertEqual(ctx.exception.path, missing)

    def test_unreadable_subdirectory_fails_the_call(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "Locked").mkdir()
            (root / "Locked/Hidden.m").write_text("")
            (root / "Open.m").write_text("")
            locked = os.path.join(tmp, "Locked")
            real_scandir = os.scandir

            def scandir(path="."):
                if os.fspath(path) == locked:
                    raise PermissionError(13, "Permission denied", locked)
                return real_scandir(path)

            with patch("os.scandir", side_effect=scandir):
                with self.assertRaises(DirectoryUnreadable) as ctx:
                    FileCollector().collect([tmp], {"m"})
            self.assertEqual(ctx.exception.path, locked)
            self.assertEqual(ctx.exception.reason, "Permission denied")

    def test_file_as_root_fails_the_call(self):
        with tempfile.TemporaryDirectory() as tmp:
            f = Path(tmp, "file.m")
            f.write_text("")
            with self.assertRaises(DirectoryUnreadable):
                FileCollector().collect([str(f)], {"m"})


if __name__ == "__main__":
    unittest.main()
