"""
probe.py – Launch candidate launchers with -version without waiting on them.

A Probe is started as soon as the walker sees a candidate, so hundreds of
JVMs can boot in the background while the directory walk carries on.  The
collector later calls Probe.read_banner() to wait for the process and read
its stderr, which is where every JDK prints the version banner.
"""
from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional

import psutil

log = logging.getLogger("javascan.probe")

VERSION_ARG = "-version"

# Suppresses the console window when spawning from a GUI process on Windows.
# The attribute only exists there; creationflags must stay 0 elsewhere.
_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0)


class Probe:
    """A running `<path> -version` process that has not been read yet."""

    def __init__(self, path: str, process: psutil.Popen) -> None:
        self.path = path
        self.process = process

    def __repr__(self) -> str:
        return f"Probe(path={self.path!r}, pid={self.process.pid})"

    def read_banner(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Wait for the process to exit and return everything it wrote to
        stderr.  Returns None if it outlives *timeout* seconds, in which case
        the process and its children are killed.  timeout=None waits forever.
        """
        try:
            _, err = self.process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            log.warning(
                "[JVM] Probe of \"%s\" did not exit within %ss, killing it",
                self.path, timeout,
            )
            self.kill()
            return None
        except (OSError, ValueError) as exc:
            log.debug("[JVM] Could not read output of \"%s\": %s", self.path, exc)
            self.kill()
            return None
        return err or ""

    def kill(self) -> None:
        """Kill the probe and anything it spawned, then reap it."""
        try:
            children = self.process.children(recursive=True)
        except psutil.Error:
            children = []
        for proc in [self.process] + children:
            try:
                proc.kill()
            except psutil.Error:
                pass
        try:
            # Drains the pipes and reaps the zombie
            self.process.communicate()
        except (OSError, ValueError):
            pass


def launch(path: str) -> Optional[Probe]:
    """
    Start `<path> -version` with both output streams captured and return
    immediately.  Returns None (and logs why) when the file can't be run.
    """
    if not os.access(path, os.X_OK):
        log.debug("[JVM] Skipping \"%s\": not executable", path)
        return None
    try:
        process = psutil.Popen(
            [path, VERSION_ARG],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            creationflags=_CREATION_FLAGS,
        )
    except (OSError, ValueError, psutil.Error) as exc:
        log.debug("[JVM] Failed to start \"%s\": %s", path, exc)
        return None
    return Probe(path, process)
