"""
platforms.py – Host/OS helpers: volume roots, PATH entries, login name.
"""
from __future__ import annotations

import getpass
import os
import platform
import string
from typing import List, Mapping, Optional


def system() -> str:
    return platform.system()


def is_windows(system_name: Optional[str] = None) -> bool:
    return (system_name or system()) == "Windows"


def volume_roots(system_name: Optional[str] = None) -> List[str]:
    """
    Every local volume root that exists: drive letters A: to Z: on Windows,
    the single root "/" everywhere else.
    """
    if not is_windows(system_name):
        return ["/"]
    drives = []
    for letter in string.ascii_uppercase:
        drive = f"{letter}:\\"
        if os.path.isdir(drive):
            drives.append(drive)
    return drives


def search_path_dirs(
    env: Optional[Mapping[str, str]] = None,
    system_name: Optional[str] = None,
) -> List[str]:
    """
    Split the executable search path into existing directories, in order,
    without blanks or repeats.
    """
    env = os.environ if env is None else env
    raw = env.get("PATH", "")
    sep = ";" if is_windows(system_name) else ":"

    dirs: List[str] = []
    for entry in raw.split(sep):
        entry = entry.strip()
        if not entry or entry in dirs:
            continue
        if os.path.isdir(entry):
            dirs.append(entry)
    return dirs


def login_name() -> Optional[str]:
    """Return the current user's login name, or None when it can't be found."""
    try:
        return getpass.getuser() or None
    except (KeyError, OSError):
        # No USER/LOGNAME variables and no passwd entry (e.g. bare containers)
        return None
