import subprocess
from unittest.mock import patch

import pytest

from pingsweep.probers.ping_prober import PingProber


def completed(returncode, stdout=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


@pytest.mark.parametrize("system,expected", [
    ("Linux", ["ping", "-c", "1", "-W", "2", "10.0.0.1"]),
    ("Darwin", ["ping", "-c", "1", "-t", "2", "10.0.0.1"]),
    ("Windows", ["ping", "-n", "1", "-w", "2000", "10.0.0.1"]),
])
def test_build_command_per_platform(system, expected):
    assert PingProber(system=system).build_command("10.0.0.1", 2) == expected


def test_reply_is_reachable_and_subprocess_is_bounded():
    prober = PingProber(system="Linux", slack=3)
    with patch("pingsweep.probers.ping_prober.subprocess.run", return_value=completed(0)) as run:
        assert prober.probe("10.0.0.1", 2) is True

    assert run.call_args.kwargs["timeout"] == 5


def test_nonzero_exit_is_unreachable():
    prober = PingProber(system="Linux")
    with patch("pingsweep.probers.ping_prober.subprocess.run", return_value=completed(1)):
        assert prober.probe("10.0.0.1", 1) is False


@pytest.mark.parametrize("error", [
    subprocess.TimeoutExpired(cmd="ping", timeout=3),
    FileNotFoundError("ping"),
    PermissionError("denied"),
])
def test_errors_are_unreachable(error):
    prober = PingProber(system="Linux")
    with patch("pingsweep.probers.ping_prober.subprocess.run", side_effect=error):
        assert prober.probe("node1", 1) is False


def test_windows_requires_ttl_in_reply():
    prober = PingProber(system="Windows")
    unreachable = "Reply from 10.0.0.254: Destination host unreachable."
    reply = "Reply from 10.0.0.1: bytes=32 time<1ms TTL=64"

    with patch("pingsweep.probers.ping_prober.subprocess.run", return_value=completed(0, unreachable)):
        assert prober.probe("10.0.0.1", 1) is False
    with patch("pingsweep.probers.ping_prober.subprocess.run", return_value=completed(0, reply)):
        assert prober.probe("10.0.0.1", 1) is True
