"""
Prober and resolver implementations for the ping sweep.

This package contains the prober interface, the system ping prober and the
best-effort name resolvers used to annotate reachable targets.
"""

from .base_prober import BaseProber
from .ping_prober import PingProber
from .resolver import BaseResolver, NullResolver, SocketResolver

__all__ = [
    'BaseProber',
    'PingProber',
    'BaseResolver',
    'NullResolver',
    'SocketResolver'
]
