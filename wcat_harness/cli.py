"""
cli.py — command-line entry point for the wcat differential harness.

Usage:
    wcat-harness                              # run every case
    wcat-harness tests -f "fifo" -v           # only cases whose name contains "fifo"
    wcat-harness tests --subject ./wcat --no-build
    wcat-harness tests --timeout 10           # kill any process running >10s
    wcat-harness process-asm -o processed     # strip trailing asm comments

Exit status: 0 on success, 1 when cases failed (unfiltered runs only),
2 when the run could not start.
"""

import argparse
from pathlib import Path

from .config import PREPROCESS_OUTPUT, REFERENCE_NAME, HarnessConfig
from .errors import BuildError
from .harness import run_tests
from .preprocess import process_asm
from .report import log


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wcat-harness",
        description="Differential conformance tests for wcat against the system cat.")
    sub = parser.add_subparsers(dest="command")

    tests = sub.add_parser("tests", help="run the conformance cases (default)")
    tests.add_argument("-f", "--filter", default=None,
                       help="only run cases whose name contains this text")
    tests.add_argument("-v", "--verbose", action="store_true",
                       help="log every case and every spawned command")
    tests.add_argument("--root", default=".",
                       help="project root holding wcat/wcat.asm (default: .)")
    tests.add_argument("--subject", default=None,
                       help="path to the binary under test (skips the build)")
    tests.add_argument("--reference", default=None,
                       help=f"path to the reference {REFERENCE_NAME} (default: auto-detect)")
    tests.add_argument("--timeout", type=float, default=None,
                       help="per-process wall-clock limit in seconds (default: none)")
    tests.add_argument("--no-build", action="store_true",
                       help="never assemble the subject, even if stale")

    pre = sub.add_parser("process-asm", help="strip trailing comments from *.asm")
    pre.add_argument("-o", "--output", default=PREPROCESS_OUTPUT,
                     help=f"output directory (default: {PREPROCESS_OUTPUT})")
    pre.add_argument("--root", default=".",
                     help="directory to scan for *.asm (default: .)")
    return parser


def cmd_tests(args):
    config = HarnessConfig.for_root(
        args.root,
        reference=args.reference,
        subject=args.subject,
        verbose=args.verbose,
        timeout=args.timeout,
        build=not args.no_build,
    )
    if config is None:
        log(f"[FATAL] reference {REFERENCE_NAME} not found")
        return 2
    try:
        report = run_tests(config, args.filter)
    except BuildError as e:
        log(f"[FATAL] {e}")
        return 2
    return 0 if report.ok else 1


def cmd_process_asm(args):
    root = Path(args.root)
    count = process_asm(root, args.output)
    log(f"[info] {count} file(s) processed")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["tests"])
    if args.command == "process-asm":
        return cmd_process_asm(args)
    return cmd_tests(args)
