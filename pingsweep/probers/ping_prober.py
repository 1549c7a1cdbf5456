"""
ICMP echo prober backed by the system ping command.

The timeout flag differs per platform: Linux takes -W <seconds> (reply
wait), macOS takes -t <seconds> (overall deadline) and Windows takes
-w <milliseconds>. The subprocess itself is killed after timeout + slack.
"""

import platform
import subprocess
from typing import List, Optional

from .base_prober import BaseProber
from ..utils.logger import Logger


class PingProber(BaseProber):
    """
    Prober that runs `ping` once per target.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        slack: int = 2,
        ping_command: str = "ping",
        system: Optional[str] = None,
    ):
        """
        Initialize the ping prober.

        Args:
            logger: Logger instance for debug output
            slack: Extra seconds allowed for the ping process beyond the timeout
            ping_command: Name or path of the ping binary
            system: Platform name override (defaults to platform.system())
        """
        super().__init__(logger)
        self.slack = slack
        self.ping_command = ping_command
        self.system = (system or platform.system()).lower()

    def build_command(self, target: str, timeout: int) -> List[str]:
        """
        Build the single-echo ping command for this platform.

        Args:
            target: IP address or hostname
            timeout: Seconds to wait for the reply

        Returns:
            List[str]: Command line suitable for subprocess.run
        """
        if self.system == "windows":
            return [self.ping_command, "-n", "1", "-w", str(timeout * 1000), target]
        if self.system == "darwin":
            return [self.ping_command, "-c", "1", "-t", str(timeout), target]
        return [self.ping_command, "-c", "1", "-W", str(timeout), target]

    def probe(self, target: str, timeout: int) -> bool:
        command = self.build_command(target, timeout)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=timeout + self.slack
            )
        except subprocess.TimeoutExpired:
            self._log_debug(f"Ping process for {target} exceeded {timeout + self.slack}s")
            return False
        except FileNotFoundError:
            self._log_warning(f"Ping command not found: {self.ping_command}")
            return False
        except OSError as e:
            self._log_debug(f"Ping failed for {target}: {e}")
            return False

        reachable = self._is_reply(result.returncode, result.stdout)
        self._log_debug(
            f"Ping {'successful' if reachable else 'failed or no response'}: {target}"
        )
        return reachable

    def _is_reply(self, returncode: int, output: str) -> bool:
        """
        Decide whether the ping run saw an echo reply.

        Windows ping exits 0 for "Destination host unreachable" replies from
        a router, so there a TTL field in the output is also required.
        """
        if returncode != 0:
            return False
        if self.system == "windows":
            return "ttl=" in (output or "").lower()
        return True
