"""
scanner.py – Orchestrates the walk, the probes and the collection into a
ScanReport.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional, Set

from javascan import platforms
from javascan.collector import collect, collect_async
from javascan.findings import JavaInfo, ScanReport
from javascan.heuristics import HeuristicKeywords, binary_matcher, default_keywords
from javascan.probe import Probe
from javascan.walker import walk

log = logging.getLogger("javascan.scanner")

# ── Tunables ──────────────────────────────────────────────────────────────────
PROBE_TIMEOUT = 15.0    # seconds a single `java -version` may take; None = no limit


def discover(
    roots: Optional[Iterable[str]] = None,
    path_dirs: Optional[Iterable[str]] = None,
    keywords: Optional[HeuristicKeywords] = None,
) -> List[Probe]:
    """
    Walk every root recursively, then every PATH directory shallowly, and
    return the probes started along the way in discovery order.
    """
    system = platforms.system()
    keywords = keywords or default_keywords()
    matcher = binary_matcher(system)
    roots = platforms.volume_roots(system) if roots is None else list(roots)
    path_dirs = platforms.search_path_dirs(system_name=system) if path_dirs is None else list(path_dirs)

    probes: List[Probe] = []

    # ── Disks ─────────────────────────────────────────────────────────────────
    for root in roots:
        log.debug("[JVM] Scanning %s", root)
        probes.extend(walk(root, matcher, True, keywords))

    log.debug("[JVM] Scanning disk finished, start scanning PATH")

    # ── PATH (not recursive: these directories are specific already) ─────────
    for directory in path_dirs:
        probes.extend(walk(directory, matcher, False, keywords))

    log.debug("[JVM] %d candidate(s) launched, collecting results", len(probes))
    return probes


def _finish(found: Set[JavaInfo]) -> ScanReport:
    report = ScanReport(platform=platforms.system())
    report.update(found)
    for info in report:
        log.info("[JVM] Found certain Java at: %s (Version: %s)", info.path, info.version)
    log.info("[JVM] Total: %d", report.count())
    return report


def scan_java(
    roots: Optional[Iterable[str]] = None,
    path_dirs: Optional[Iterable[str]] = None,
    keywords: Optional[HeuristicKeywords] = None,
    timeout: Optional[float] = PROBE_TIMEOUT,
) -> ScanReport:
    """
    Find Java runtimes on this machine.

    With no arguments every local volume and every PATH directory is
    scanned.  *roots* / *path_dirs* replace those lists; *keywords*
    replaces the directory heuristic.  Never raises for filesystem or
    process errors: unreadable directories and broken launchers are skipped.
    """
    log.info("[JVM] Start scanning available Java")
    probes = discover(roots, path_dirs, keywords)
    return _finish(collect(probes, timeout))


async def scan_java_async(
    roots: Optional[Iterable[str]] = None,
    path_dirs: Optional[Iterable[str]] = None,
    keywords: Optional[HeuristicKeywords] = None,
    timeout: Optional[float] = PROBE_TIMEOUT,
) -> ScanReport:
    """Awaitable scan_java(); the walk and each probe wait run off the event loop."""
    log.info("[JVM] Start scanning available Java")
    probes = await asyncio.to_thread(discover, roots, path_dirs, keywords)
    return _finish(await collect_async(probes, timeout))
