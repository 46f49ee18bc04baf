"""
findings.py – Shared data structures for javascan results.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set

ARCH_X64 = "x64"
ARCH_X86 = "x86"


@dataclass(frozen=True)
class JavaInfo:
    """A confirmed Java runtime.  Equal (and hashed) on all three fields."""

    path: str               # Absolute path of the java / java.exe launcher
    version: str            # As reported in the -version banner
    architecture: str       # ARCH_X64 or ARCH_X86

    def to_dict(self) -> Dict[str, str]:
        return {
            "Path": self.path,
            "Version": self.version,
            "Architecture": self.architecture,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


@dataclass
class ScanReport:
    """Top-level container for the runtimes confirmed by a scan run."""

    platform: str
    runtimes: Set[JavaInfo] = field(default_factory=set)

    # ------------------------------------------------------------------ helpers
    def add(self, info: JavaInfo) -> bool:
        """Add *info*; returns False when an identical entry was already present."""
        if info in self.runtimes:
            return False
        self.runtimes.add(info)
        return True

    def update(self, infos) -> None:
        for info in infos:
            self.add(info)

    def has_detections(self) -> bool:
        return bool(self.runtimes)

    def by_architecture(self, architecture: str) -> List[JavaInfo]:
        return [r for r in self.sorted() if r.architecture == architecture]

    def sorted(self) -> List[JavaInfo]:
        return sorted(self.runtimes, key=lambda r: (r.path, r.version, r.architecture))

    def count(self) -> int:
        return len(self.runtimes)

    def __iter__(self) -> Iterator[JavaInfo]:
        return iter(self.sorted())

    def __contains__(self, info: object) -> bool:
        return info in self.runtimes

    def __len__(self) -> int:
        return len(self.runtimes)
