"""
Network detection for auto-detect mode.

This module provides the NetworkDetector class which finds the host's own
IPv4 address on the interface used for the default route and turns it into
the three-octet prefix swept in address-range mode.
"""

import platform
import socket
import subprocess
from typing import Callable, List, Optional

from ..utils.error_handler import DetectionError
from ..utils.logger import Logger, get_logger
from ..utils.network_utils import is_valid_ip, prefix_from_address

# Destination used only to select the outgoing route; nothing is sent to it
ROUTE_PROBE_ADDRESS = "1.1.1.1"


class NetworkDetector:
    """
    Detects the local network prefix.

    Tries the platform's routing tools first (`ip route get` on Linux,
    `route`/`ipconfig` on macOS) and falls back to asking a connected UDP
    socket for its local address.
    """

    def __init__(self, logger: Optional[Logger] = None, system: Optional[str] = None):
        """
        Initialize the NetworkDetector.

        Args:
            logger: Logger instance for diagnostics
            system: Platform name override (defaults to platform.system())
        """
        self.logger = logger or get_logger(__name__)
        self.system = (system or platform.system()).lower()

    def detect_prefix(self) -> str:
        """
        Detect the first three octets of this host's IPv4 address.

        Returns:
            str: Prefix such as "192.168.1"

        Raises:
            DetectionError: If no local IPv4 address can be determined
        """
        host_ip = self.detect_host_ip()
        prefix = prefix_from_address(host_ip)
        self.logger.debug(f"Host IP address: {host_ip}, prefix: {prefix}")
        return prefix

    def detect_host_ip(self) -> str:
        """
        Detect this host's IPv4 address on the default route.

        Raises:
            DetectionError: If every detection method fails
        """
        methods: List[Callable[[], Optional[str]]] = []
        if self.system == "linux":
            methods.append(self._get_ip_via_ip_route)
        elif self.system == "darwin":
            methods.append(self._get_ip_via_macos_route)
        methods.append(self._get_ip_via_socket)

        for method in methods:
            host_ip = method()
            if host_ip and is_valid_ip(host_ip) and host_ip != "0.0.0.0":
                return host_ip
            self.logger.debug(f"{method.__name__} found no address")

        raise DetectionError("Could not detect local IP address")

    def _run(self, command: List[str]) -> Optional[str]:
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=5,
                check=True
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            self.logger.debug(f"{command[0]} failed: {e}")
            return None
        return result.stdout

    def _get_ip_via_ip_route(self) -> Optional[str]:
        """Parse the `src` field of `ip route get` (Linux)."""
        output = self._run(["ip", "route", "get", ROUTE_PROBE_ADDRESS])
        if not output:
            return None

        # "1.1.1.1 via 192.168.1.1 dev eth0 src 192.168.1.100 uid 1000"
        for line in output.splitlines():
            parts = line.split()
            if "src" in parts:
                src_index = parts.index("src")
                if src_index + 1 < len(parts):
                    return parts[src_index + 1]
        return None

    def _get_ip_via_macos_route(self) -> Optional[str]:
        """Find the default interface with `route` and ask `ipconfig` for its address."""
        output = self._run(["route", "-n", "get", "default"])
        if not output:
            return None

        interface_name = None
        for line in output.splitlines():
            if "interface:" in line:
                interface_name = line.split(":", 1)[1].strip()
                break
        if not interface_name:
            return None

        address = self._run(["ipconfig", "getifaddr", interface_name])
        return address.strip() if address else None

    def _get_ip_via_socket(self) -> Optional[str]:
        """
        Fallback: connect a UDP socket and read its local address.

        connect() on a datagram socket only selects a route, so no packet
        leaves the host.
        """
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
                s.connect((ROUTE_PROBE_ADDRESS, 80))
                return s.getsockname()[0]
        except OSError as e:
            self.logger.debug(f"Socket method failed: {e}")
            return None
