"""
Best-effort name resolution for reachable targets.

Lookups annotate report lines only. A failed or slow lookup yields None and
the line is printed without an annotation.
"""

import socket
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Callable, Optional

from ..utils.logger import Logger
from ..utils.network_utils import strip_root_dot


class BaseResolver(ABC):
    """
    Abstract base class for resolvers. Implementations never raise.
    """

    @abstractmethod
    def name_for_address(self, address: str) -> Optional[str]:
        """Reverse lookup; the hostname without a trailing dot, or None."""
        pass

    @abstractmethod
    def address_for_name(self, hostname: str) -> Optional[str]:
        """Forward lookup; the first address for hostname, or None."""
        pass

    def close(self) -> None:
        """Release any resources held by the resolver."""
        pass


class NullResolver(BaseResolver):
    """Resolver used when lookups are disabled."""

    def name_for_address(self, address: str) -> Optional[str]:
        return None

    def address_for_name(self, hostname: str) -> Optional[str]:
        return None


class SocketResolver(BaseResolver):
    """
    Resolver using the system resolver through the socket module.

    The socket lookup calls have no timeout of their own, so each one runs on
    a private thread pool and is abandoned after `timeout` seconds.
    """

    def __init__(self, timeout: float = 2.0, max_workers: int = 8, logger: Optional[Logger] = None):
        """
        Initialize the resolver.

        Args:
            timeout: Seconds to wait for a single lookup
            max_workers: Number of concurrent lookups
            logger: Logger instance for debug output
        """
        self.timeout = timeout
        self.logger = logger
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="resolver"
        )

    def name_for_address(self, address: str) -> Optional[str]:
        hostname = self._lookup(self._reverse, address)
        if not hostname:
            return None
        return strip_root_dot(hostname) or None

    def address_for_name(self, hostname: str) -> Optional[str]:
        return self._lookup(self._forward, hostname)

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    def _reverse(address: str) -> str:
        return socket.gethostbyaddr(address)[0]

    @staticmethod
    def _forward(hostname: str) -> Optional[str]:
        infos = socket.getaddrinfo(hostname, None)
        if not infos:
            return None
        return infos[0][4][0]

    def _lookup(self, func: Callable[[str], Optional[str]], query: str) -> Optional[str]:
        future = self._executor.submit(func, query)
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeoutError:
            future.cancel()
            self._log_debug(f"Lookup for {query} timed out after {self.timeout}s")
        except (OSError, UnicodeError) as e:
            # socket.herror and socket.gaierror are OSError subclasses
            self._log_debug(f"Lookup for {query} failed: {e}")
        return None

    def _log_debug(self, message: str) -> None:
        if self.logger:
            self.logger.debug(message)
