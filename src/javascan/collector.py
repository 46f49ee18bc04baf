"""
collector.py – Turn finished probes into a deduplicated set of JavaInfo.

Probes are waited on in the order they were discovered, in both the
blocking and the asyncio flavour.  A probe that hangs therefore holds up
everything discovered after it until the per-probe timeout kills it.
"""
from __future__ import annotations

import asyncio
import logging
import re
from typing import Iterable, Optional, Set

from javascan.findings import ARCH_X64, ARCH_X86, JavaInfo
from javascan.probe import Probe

log = logging.getLogger("javascan.collector")

# MAJOR(.MINOR)(.PATCH)([._]UPDATE)(-PRERELEASE); first match in the banner
# wins.  The pre-release tag is deliberately narrower than "-(.+)": it stops
# at whitespace or the closing quote instead of swallowing the rest of the
# line, so `"17.0.2-ea" 2022-01-18` gives 17.0.2-ea.
VERSION_PATTERN = re.compile(r'(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:[._](\d+))?(?:-([^\s"]+))?')

X64_MARKER = "64-Bit"


def parse_banner(path: str, text: str) -> Optional[JavaInfo]:
    """Build a JavaInfo from -version output, or None if no version is in it."""
    match = VERSION_PATTERN.search(text)
    if match is None:
        return None
    return JavaInfo(
        path=path,
        version=match.group(0),
        architecture=ARCH_X64 if X64_MARKER in text else ARCH_X86,
    )


def _record(probe: Probe, banner: Optional[str], found: Set[JavaInfo]) -> None:
    if banner is None:
        return
    info = parse_banner(probe.path, banner)
    if info is None:
        log.debug("[JVM] \"%s\" printed no version banner, ignoring it", probe.path)
        return
    found.add(info)


def collect(probes: Iterable[Probe], timeout: Optional[float] = None) -> Set[JavaInfo]:
    """Wait for each probe in turn and parse what it printed."""
    found: Set[JavaInfo] = set()
    for probe in probes:
        _record(probe, probe.read_banner(timeout), found)
    return found


async def collect_async(
    probes: Iterable[Probe], timeout: Optional[float] = None
) -> Set[JavaInfo]:
    """
    Same as collect(), but each wait happens in a worker thread so the event
    loop keeps running while a probe boots.
    """
    found: Set[JavaInfo] = set()
    for probe in probes:
        banner = await asyncio.to_thread(probe.read_banner, timeout)
        _record(probe, banner, found)
    return found
