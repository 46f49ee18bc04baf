"""
walker.py – Heuristic, depth-first directory walk that launches probes.

Only the immediate entries of *root* are always looked at.  Sub-directories
are entered when recursion is on and their name passes the keyword
heuristic; once entered, a branch is followed to any depth.  Matching files
are launched the moment they are seen so probing overlaps the walk.

Failure policy:
  * PermissionError on a directory – skipped silently (far too common on a
    full-disk walk to be worth a log line).
  * Any other OSError – logged as a warning and that directory abandoned.
    Siblings and the rest of the walk are unaffected.
"""
from __future__ import annotations

import logging
import os
from typing import Callable, FrozenSet, List, Optional, Tuple

from javascan.heuristics import HeuristicKeywords, is_heuristic_directory
from javascan.probe import Probe, launch as launch_probe

log = logging.getLogger("javascan.walker")

Launcher = Callable[[str], Optional[Probe]]


def _dir_key(path: str) -> Optional[Tuple[int, int]]:
    try:
        st = os.stat(path)
    except OSError:
        return None
    if not st.st_ino:
        # Some filesystems (FAT on Windows) report no inode numbers
        return None
    return st.st_dev, st.st_ino


def walk(
    root: str,
    is_candidate: Callable[[str], bool],
    recursive: bool,
    keywords: HeuristicKeywords,
    launch: Launcher = launch_probe,
) -> List[Probe]:
    """
    Walk *root* and return a Probe for every launcher that was started.

    *is_candidate* is called with bare filenames, *launch* with absolute
    paths.  A *root* that is a file yields nothing.
    """
    probes: List[Probe] = []
    if os.path.isfile(root):
        return probes

    # Each pending directory carries the (device, inode) keys of the
    # directories above it.  A directory already on its own ancestor chain
    # is a symlink cycle; the same directory reached by a sibling alias is
    # walked again under that alias.
    stack: List[Tuple[str, FrozenSet[Tuple[int, int]]]] = [
        (os.path.abspath(root), frozenset())
    ]

    while stack:
        current, ancestors = stack.pop()
        key = _dir_key(current)
        if key is not None:
            if key in ancestors:
                continue
            ancestors = ancestors | {key}

        subdirs: List[str] = []
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    full = os.path.abspath(entry.path)
                    try:
                        is_file = entry.is_file()
                        is_dir = not is_file and entry.is_dir()
                    except OSError:
                        # e.g. a symlink into an unreadable directory
                        continue
                    if is_file:
                        if not is_candidate(entry.name):
                            continue
                        log.debug("[JVM] Found possible Java \"%s\", plan to check it", full)
                        probe = launch(full)
                        if probe is not None:
                            probes.append(probe)
                    elif (
                        recursive
                        and is_dir
                        and is_heuristic_directory(entry.name, keywords)
                    ):
                        subdirs.append(full)
        except PermissionError:
            continue
        except OSError as exc:
            log.warning(
                "[JVM] An error occurred while searching dir \"%s\", Reason: %s",
                current, exc.strerror or exc,
            )
            continue

        # Reversed so that pop() visits sub-directories in listing order
        stack.extend((path, ancestors) for path in reversed(subdirs))

    return probes
