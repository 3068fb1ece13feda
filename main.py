#!/usr/bin/env python3
"""
Abandoned Strings Finder

Reports .strings identifiers that no source file references, and with
--write removes them from the resource files.

Usage:
    python3 main.py /path/to/project
    python3 main.py /path/to/app /path/to/framework --storyboard
    python3 main.py /path/to/project --write --json reports/abandoned.json

The historical bare tokens are still accepted:
    python3 main.py /path/to/project write storyboard
"""
import argparse
import sys

import output_stream
from config import load_config
from detection_engine import DetectionEngine
from errors import AbandonedStringsError, EncodingFailure, FileWriteFailure
from file_collector import FileCollector
from reporter import Reporter
from resource_rewriter import ResourceRewriter

USAGE = "Please provide the root directory for source code files as a command line argument."

STORYBOARD_TOKEN = "storyboard"
WRITE_TOKEN = "write"
# options that consume the next argument as their value
VALUE_OPTIONS = {"--workers", "--config", "--json"}


def split_legacy_tokens(argv: list) -> tuple:
    """
    Strip the bare `storyboard` / `write` tokens from the argument list.

    `storyboard` counts only as the last argument; `write` counts anywhere
    (first occurrence). A token that is the value of --workers, --config or
    --json is left alone. A root directory literally named like either token
    in those positions is taken as the flag.

    Returns:
        (remaining argv, storyboard flag, write flag)
    """
    args = list(argv)

    def is_bare(i: int) -> bool:
        return i == 0 or args[i - 1] not in VALUE_OPTIONS

    storyboard = bool(args) and args[-1] == STORYBOARD_TOKEN and is_bare(len(args) - 1)
    if storyboard:
        args.pop()
    write = False
    for i, token in enumerate(args):
        if token == WRITE_TOKEN and is_bare(i):
            del args[i]
            write = True
            break
    return args, storyboard, write


def build_arg_parser():
    desc = "Find string identifiers in .strings files that no source file references."
    epilog = "Default mode only reports. Add --write to remove abandoned identifiers from disk."
    parser = argparse.ArgumentParser(prog="abandoned-strings", description=desc, epilog=epilog)
    parser.add_argument("roots", nargs="*", help="Root directories holding source and .strings files")
    parser.add_argument("--storyboard", action="store_true", help="Also search .storyboard files for references")
    parser.add_argument("--write", action="store_true", help="Rewrite .strings files without the abandoned identifiers")
    parser.add_argument("--workers", type=int, help="Number of resource files scanned concurrently")
    parser.add_argument("--config", help="YAML configuration file (default: ./abandoned_strings.yml if present)")
    parser.add_argument("--json", dest="json_path", help="Also write the result as JSON to this path")
    parser.add_argument("--quiet", action="store_true", help="Only print the report")
    return parser


def run(args, out, err) -> int:
    try:
        config = load_config(args.config)
    except AbandonedStringsError as e:
        err.writeln(f"error: {e}")
        return 1

    if config.encoding != out.encoding:
        out = output_stream.stdout(config.encoding)
        err = output_stream.stderr(config.encoding)

    workers = args.workers if args.workers is not None else config.workers
    if workers is not None and workers < 1:
        err.writeln("error: --workers must be a positive integer")
        return 1

    engine = DetectionEngine(
        collector=FileCollector(config.ignore_dirs),
        workers=workers,
        allowlist=config.allowlist,
        out=None if args.quiet else out,
        err=None if args.quiet else err,
    )

    if not args.quiet:
        out.writeln("Searching for abandoned resource strings...")
    try:
        abandoned_map = engine.detect(args.roots, include_storyboard=args.storyboard)
    except EncodingFailure:
        raise
    except AbandonedStringsError as e:
        err.writeln(f"error: {e}")
        return 1

    reporter = Reporter(out)
    reporter.display(abandoned_map)

    if args.json_path:
        try:
            reporter.write_json(abandoned_map, args.json_path, args.roots, args.storyboard)
        except FileWriteFailure as e:
            err.writeln(f"ERROR writing report: {args.json_path} ({e.reason})")

    if args.write and abandoned_map:
        ResourceRewriter(out=out, err=err, encoding=config.encoding).apply(abandoned_map)

    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    remaining, storyboard, write = split_legacy_tokens(argv)

    args = build_arg_parser().parse_args(remaining)
    args.storyboard = args.storyboard or storyboard
    args.write = args.write or write

    out = output_stream.stdout()
    err = output_stream.stderr()

    if not args.roots:
        out.writeln(USAGE)
        return 0

    return run(args, out, err)


if __name__ == "__main__":
    sys.exit(main())
