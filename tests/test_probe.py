import logging
import time

from conftest import BANNER_17, posix_only
from javascan.probe import launch


@posix_only
def test_launch_returns_before_exit_and_reads_stderr(tmp_path, make_java):
    java = make_java(tmp_path, body=f"sleep 1\necho '{BANNER_17.splitlines()[0]}' 1>&2\necho ignored\n")
    started = time.monotonic()
    probe = launch(str(java))
    assert probe is not None
    assert time.monotonic() - started < 0.9
    banner = probe.read_banner(timeout=10)
    assert banner.strip() == BANNER_17.splitlines()[0]
    assert "ignored" not in banner


@posix_only
def test_launch_passes_version_argument(tmp_path, make_java):
    java = make_java(tmp_path, body='echo "$@" 1>&2\n')
    assert launch(str(java)).read_banner(timeout=10).strip() == "-version"


def test_non_executable_is_skipped(tmp_path):
    source = tmp_path / "Main.java"
    source.write_text("class Main {}")
    assert launch(str(source)) is None


def test_missing_file_is_skipped(tmp_path):
    assert launch(str(tmp_path / "java")) is None


@posix_only
def test_spawn_failure_is_logged(tmp_path, caplog):
    # Executable bit set but not a runnable image
    bogus = tmp_path / "java"
    bogus.write_bytes(b"\x00\x01\x02")
    bogus.chmod(0o755)
    with caplog.at_level(logging.DEBUG, logger="javascan.probe"):
        assert launch(str(bogus)) is None
    assert str(bogus) in caplog.text


@posix_only
def test_hung_probe_is_killed(tmp_path, make_java, caplog):
    java = make_java(tmp_path, body="exec sleep 60\n")
    probe = launch(str(java))
    started = time.monotonic()
    with caplog.at_level(logging.WARNING, logger="javascan.probe"):
        assert probe.read_banner(timeout=0.5) is None
    assert time.monotonic() - started < 10
    assert probe.process.poll() is not None
    assert "did not exit" in caplog.text
