"""
Reporter
Renders a detection result:
  - plain-text report on stdout (files and identifiers sorted)
  - optional machine-readable JSON file
"""
import json
import uuid
from datetime import datetime, timezone

from file_io import write_text_atomic

SCHEMA_VERSION = "1.0.0"


class Reporter:
    def __init__(self, out):
        self.out = out

    def display(self, abandoned_map: dict):
        if not abandoned_map:
            self.out.writeln("No abandoned resource strings were detected.")
            return
        self.out.writeln("Abandoned resource strings were detected:")
        for path in sorted(abandoned_map):
            self.out.writeln(path)
            for identifier in sorted(abandoned_map[path]):
                self.out.writeln(f"  {identifier}")
            self.out.writeln()

    @staticmethod
    def build_json(abandoned_map: dict, roots: list, include_storyboard: bool) -> dict:
        return {
            "schema_version": SCHEMA_VERSION,
            "metadata": {
                "run_id": str(uuid.uuid4()),
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "roots": list(roots),
                "storyboard": include_storyboard,
            },
            "summary": {
                "files": len(abandoned_map),
                "identifiers": sum(len(ids) for ids in abandoned_map.values()),
            },
            "abandoned": {path: sorted(abandoned_map[path]) for path in sorted(abandoned_map)},
        }

    def write_json(self, abandoned_map: dict, path, roots: list, include_storyboard: bool = False) -> dict:
        """Write the JSON report to `path`. Raises FileWriteFailure."""
        report = self.build_json(abandoned_map, roots, include_storyboard)
        write_text_atomic(path, json.dumps(report, indent=2, ensure_ascii=False) + "\n")
        return report
