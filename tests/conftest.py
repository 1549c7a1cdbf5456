"""
Shared fixtures: deterministic fakes for the prober and resolver.
"""

import io
import threading
import time

import pytest

from pingsweep.probers.base_prober import BaseProber
from pingsweep.probers.resolver import BaseResolver
from pingsweep.utils.logger import LogLevel, set_log_level
from pingsweep.utils.report_printer import ReportPrinter


class FakeProber(BaseProber):
    """Reports a fixed set of targets as reachable and records every call."""

    def __init__(self, reachable=(), delay=0.0, fail_on=()):
        super().__init__()
        self.reachable = set(reachable)
        self.delay = delay
        self.fail_on = set(fail_on)
        self.calls = []
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def probe(self, target, timeout):
        with self._lock:
            self.calls.append((target, timeout))
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            if self.delay:
                time.sleep(self.delay)
            if target in self.fail_on:
                raise RuntimeError(f"probe exploded for {target}")
            return target in self.reachable
        finally:
            with self._lock:
                self.active -= 1

    @property
    def completed(self):
        with self._lock:
            return len(self.calls) - self.active


class FakeResolver(BaseResolver):
    """Answers lookups from fixed tables and records every lookup."""

    def __init__(self, names=None, addresses=None, fail=False):
        self.names = names or {}
        self.addresses = addresses or {}
        self.fail = fail
        self.lookups = []
        self.closed = False

    def name_for_address(self, address):
        self.lookups.append(("reverse", address))
        if self.fail:
            raise OSError("resolver down")
        return self.names.get(address)

    def address_for_name(self, hostname):
        self.lookups.append(("forward", hostname))
        if self.fail:
            raise OSError("resolver down")
        return self.addresses.get(hostname)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def quiet_logging():
    set_log_level(LogLevel.WARNING)
    yield
    set_log_level(LogLevel.INFO)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def printer(stream):
    return ReportPrinter(stream=stream, color=False)


def report_lines(stream):
    return stream.getvalue().splitlines()


def up_lines(stream):
    return [line for line in report_lines(stream) if line.startswith("[UP]")]
