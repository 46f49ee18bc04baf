"""
cli.py – Command-line interface for javascan.

Usage:
    python -m javascan [OPTIONS]

Options:
    --json          Emit report as JSON instead of coloured text.
    --output FILE   Write the JSON report to FILE (in addition to stdout).
    --root DIR      Scan DIR recursively instead of every local volume
                    (repeatable).
    --no-path       Do not scan the directories listed in PATH.
    --timeout SECS  Kill a probe that runs longer than SECS (default 15).
    --no-timeout    Wait for every probe however long it takes.
    --async         Run the asyncio flavour of the scan.
    --quiet         Suppress banner and informational logging.
    --verbose       Extra debug output.
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
import textwrap
from datetime import datetime, timezone

from javascan.findings import ARCH_X64, ARCH_X86, ScanReport
from javascan.scanner import PROBE_TIMEOUT, scan_java, scan_java_async


# ── ANSI colour helpers ────────────────────────────────────────────────────────

def _colour_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return os.name != "nt" and sys.stdout.isatty()


def _sgr(*codes: int) -> str:
    """ANSI select-graphic-rendition sequence, or "" when colour is off."""
    if not _colour_enabled():
        return ""
    return "\033[" + ";".join(str(c) for c in codes) + "m"


_RESET  = _sgr(0)
_BOLD   = _sgr(1)
_DIM    = _sgr(2)
_RED    = _sgr(31)
_GREEN  = _sgr(32)
_YELLOW = _sgr(33)
_HEADER = _sgr(1, 36)

_ARCH_COLOUR = {
    ARCH_X64: _GREEN,
    ARCH_X86: _YELLOW,
}


# ── Report rendering ───────────────────────────────────────────────────────────

BANNER = r"""
    _
   (_) __ ___   ____ _ ___  ___ __ _ _ __
   | |/ _` \ \ / / _` / __|/ __/ _` | '_ \
   | | (_| |\ V / (_| \__ \ (_| (_| | | | |
  _/ |\__,_| \_/ \__,_|___/\___\__,_|_| |_|
 |__/

 Installed Java runtime finder
"""


def print_banner(quiet: bool) -> None:
    if quiet:
        return
    print(f"{_HEADER}{BANNER}{_RESET}")
    print(f"  {_DIM}Scanning for Java runtimes…{_RESET}\n")


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def render_report_text(report: ScanReport, quiet: bool = False) -> str:
    lines = []

    if not quiet:
        lines.append(f"{_BOLD}{'─' * 60}{_RESET}")
        lines.append(f"{_BOLD}  Scan completed  |  platform={report.platform}  |  {_timestamp()}{_RESET}")
        lines.append(f"{_BOLD}{'─' * 60}{_RESET}")

    if not report.has_detections():
        lines.append(f"\n  {_RED}{_BOLD}✗  No Java runtime found.{_RESET}\n")
        return "\n".join(lines)

    lines.append("")
    for info in report:
        colour = _ARCH_COLOUR.get(info.architecture, "")
        lines.append(f"  {colour}[{info.architecture:^5}]{_RESET} {_BOLD}{info.version}{_RESET}")
        lines.append(f"          {_DIM}{info.path}{_RESET}")
    lines.append("")

    x64 = len(report.by_architecture(ARCH_X64))
    x86 = len(report.by_architecture(ARCH_X86))
    lines.append(
        f"  Total: {_BOLD}{report.count()}{_RESET}  "
        f"({_GREEN}{x64} x64{_RESET}, {_YELLOW}{x86} x86{_RESET})"
    )
    lines.append("")
    return "\n".join(lines)


def render_report_json(report: ScanReport) -> str:
    data = {
        "timestamp": _timestamp(),
        "platform": report.platform,
        "count": report.count(),
        "runtimes": [info.to_dict() for info in report],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


# ── Main ───────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="javascan",
        description="Find installed Java runtimes by walking disks and PATH.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
        Examples:
          python -m javascan                         # full scan
          python -m javascan --json                  # machine-readable output
          python -m javascan --root /opt --no-path   # only look under /opt
          python -m javascan --no-timeout --verbose  # wait on slow JVMs
        """),
    )
    p.add_argument("--json",    action="store_true", help="Output report as JSON")
    p.add_argument("--output",  metavar="FILE",      help="Write JSON report to FILE")
    p.add_argument("--root",    metavar="DIR", action="append", dest="roots",
                   help="Scan DIR recursively instead of all volumes (repeatable)")
    p.add_argument("--no-path", action="store_true", help="Skip directories listed in PATH")
    timing = p.add_mutually_exclusive_group()
    timing.add_argument("--timeout", metavar="SECS", type=float, default=PROBE_TIMEOUT,
                        help=f"Per-probe time limit in seconds (default {PROBE_TIMEOUT:g})")
    timing.add_argument("--no-timeout", action="store_true",
                        help="Wait for every probe without a time limit")
    p.add_argument("--async",   action="store_true", dest="use_async",
                   help="Use the asyncio scanner")
    p.add_argument("--quiet",   action="store_true", help="Suppress banner and info messages")
    p.add_argument("--verbose", action="store_true", help="Extra debug output")
    return p


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet or args.json:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    _configure_logging(args)

    if not args.quiet and not args.json:
        print_banner(quiet=False)

    timeout = None if args.no_timeout else args.timeout
    path_dirs = [] if args.no_path else None

    if args.use_async:
        report = asyncio.run(scan_java_async(args.roots, path_dirs, timeout=timeout))
    else:
        report = scan_java(args.roots, path_dirs, timeout=timeout)

    # ── Render report ─────────────────────────────────────────────────────────
    if args.json:
        output_text = render_report_json(report)
    else:
        output_text = render_report_text(report, quiet=args.quiet)
    print(output_text)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as fh:
                fh.write(output_text if args.json else render_report_json(report))
            if not args.quiet:
                print(f"  {_DIM}Report written to {args.output}{_RESET}")
        except OSError as exc:
            print(f"  {_RED}Failed to write output file: {exc}{_RESET}", file=sys.stderr)

    return 0 if report.has_detections() else 2


if __name__ == "__main__":
    sys.exit(main())
