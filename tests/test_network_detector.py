import subprocess
from unittest.mock import MagicMock, patch

import pytest

from pingsweep.core.network_detector import NetworkDetector
from pingsweep.utils.error_handler import DetectionError


def completed(stdout):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


def test_linux_uses_src_from_ip_route():
    output = "1.1.1.1 via 192.168.7.1 dev wlan0 src 192.168.7.42 uid 1000\n    cache\n"
    detector = NetworkDetector(system="Linux")

    with patch("pingsweep.core.network_detector.subprocess.run", return_value=completed(output)):
        assert detector.detect_prefix() == "192.168.7"


def test_macos_uses_default_interface_address():
    outputs = {
        "route": completed("   route to: default\n  interface: en0\n"),
        "ipconfig": completed("10.20.30.40\n"),
    }
    detector = NetworkDetector(system="Darwin")

    with patch("pingsweep.core.network_detector.subprocess.run",
               side_effect=lambda command, **kwargs: outputs[command[0]]):
        assert detector.detect_prefix() == "10.20.30"


def test_falls_back_to_socket_when_tools_fail():
    sock = MagicMock()
    sock.__enter__.return_value = sock
    sock.getsockname.return_value = ("172.16.5.9", 51234)
    detector = NetworkDetector(system="Linux")

    with patch("pingsweep.core.network_detector.subprocess.run", side_effect=FileNotFoundError("ip")), \
            patch("pingsweep.core.network_detector.socket.socket", return_value=sock):
        assert detector.detect_prefix() == "172.16.5"


def test_permission_error_from_tools_falls_back_to_socket():
    sock = MagicMock()
    sock.__enter__.return_value = sock
    sock.getsockname.return_value = ("10.4.4.4", 40000)
    detector = NetworkDetector(system="Darwin")

    with patch("pingsweep.core.network_detector.subprocess.run", side_effect=PermissionError("route")), \
            patch("pingsweep.core.network_detector.socket.socket", return_value=sock):
        assert detector.detect_prefix() == "10.4.4"


def test_raises_detection_error_when_nothing_works():
    detector = NetworkDetector(system="Linux")

    with patch("pingsweep.core.network_detector.subprocess.run", side_effect=FileNotFoundError("ip")), \
            patch("pingsweep.core.network_detector.socket.socket", side_effect=OSError("unreachable")):
        with pytest.raises(DetectionError):
            detector.detect_prefix()
