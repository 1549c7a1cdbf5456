"""
Base prober interface for the ping sweep.

This module defines the abstract base class that reachability probers must
implement, so the sweep coordinator can drive the system ping in production
and a deterministic fake in tests.
"""

from abc import ABC, abstractmethod


class BaseProber(ABC):
    """
    Abstract base class for reachability probers.

    Implementations must never raise: any failure to get a reply within the
    timeout is reported as unreachable.
    """

    def __init__(self, logger=None):
        """
        Initialize the base prober.

        Args:
            logger: Logger instance for debug output
        """
        self.logger = logger

    @abstractmethod
    def probe(self, target: str, timeout: int) -> bool:
        """
        Send one reachability probe and wait for the reply.

        Args:
            target: IP address or hostname to probe
            timeout: Seconds to wait for a reply

        Returns:
            True if a reply arrived within the timeout, False otherwise
        """
        pass

    def _log_debug(self, message: str) -> None:
        """Log a debug message if logger is available."""
        if self.logger:
            self.logger.debug(message)

    def _log_warning(self, message: str) -> None:
        """Log a warning message if logger is available."""
        if self.logger:
            self.logger.warning(message)
