import os
import stat

import pytest

posix_only = pytest.mark.skipif(os.name == "nt", reason="fake launchers are shell scripts")

BANNER_17 = 'java version "17.0.2" 2022-01-18 LTS\nJava HotSpot(TM) Client VM (build 17.0.2+8-LTS-86, mixed mode)'
BANNER_8_X64 = (
    'openjdk version "1.8.0_292"\n'
    "OpenJDK Runtime Environment (build 1.8.0_292-b10)\n"
    "OpenJDK 64-Bit Server VM (build 25.292-b10, mixed mode)"
)


class FakeProbe:
    """Stands in for javascan.probe.Probe without starting a process."""

    def __init__(self, path, banner=""):
        self.path = path
        self.banner = banner
        self.reads = 0

    def read_banner(self, timeout=None):
        self.reads += 1
        return self.banner


@pytest.fixture
def make_java():
    """Write an executable script that prints *banner* to stderr like `java -version`."""

    def _make(directory, banner=BANNER_17, name="java", body=None):
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / name
        if body is None:
            lines = "\n".join(f"echo '{line}' 1>&2" for line in banner.splitlines())
            body = f"{lines}\nexit 0\n"
        target.write_text(f"#!/bin/sh\n{body}")
        target.chmod(target.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return target

    return _make


@pytest.fixture
def recording_launch():
    """A launch() replacement that records paths instead of spawning them."""
    launched = []

    def _launch(path):
        launched.append(path)
        return FakeProbe(path)

    _launch.launched = launched
    return _launch
