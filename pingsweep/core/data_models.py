"""
Core data models and enums for the ping sweep.

This module defines the data structures that flow through a sweep: the
request built from user input, the enumerated targets, the per-target
outcome and the aggregate summary.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..utils.error_handler import ConfigurationError
from ..utils.network_utils import is_integer_token, is_valid_prefix


class SweepMode(Enum):
    """How targets are enumerated."""
    ADDRESS_RANGE = "ip"
    NAME_RANGE = "host"


# Address mode always covers the host part .1 through .254
ADDRESS_SUFFIX_FIRST = 1
ADDRESS_SUFFIX_LAST = 254


@dataclass(frozen=True)
class Target:
    """
    One candidate to probe.

    Attributes:
        name: Dotted-quad address or hostname that is probed and printed
        suffix: Last octet (address mode) or zero-padded suffix (name mode)
    """
    name: str
    suffix: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SweepRequest:
    """
    Parameters for a single sweep.

    The range bounds are kept as the literal tokens the caller typed, because
    the zero-pad width in name mode is the length of the start token.

    Attributes:
        mode: Address-range or name-range enumeration
        prefix: First three octets (address mode) or hostname prefix (name mode)
        range_start: Literal start token, name mode only
        range_end: Literal end token, name mode only
        timeout: Seconds to wait for each probe reply

    Raises:
        ConfigurationError: If the prefix, bounds or timeout are unusable
    """
    mode: SweepMode
    prefix: str
    range_start: Optional[str] = None
    range_end: Optional[str] = None
    timeout: int = 1

    def __post_init__(self):
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, got {self.timeout}")

        if self.mode == SweepMode.ADDRESS_RANGE:
            if not is_valid_prefix(self.prefix):
                raise ConfigurationError(
                    f"Network prefix must be the first three octets of an IPv4 address, got {self.prefix!r}"
                )
            return

        if not self.prefix:
            raise ConfigurationError("Hostname prefix must not be empty")
        # ping would parse a leading dash as an option
        if self.prefix.startswith("-"):
            raise ConfigurationError(f"Hostname prefix must not start with '-', got {self.prefix!r}")
        if not self.range_start or not self.range_end:
            raise ConfigurationError("Hostname mode requires -r <start> and -e <end>")
        for flag, token in (("-r", self.range_start), ("-e", self.range_end)):
            if not is_integer_token(token):
                raise ConfigurationError(f"{flag} must be an integer, got {token!r}")

    @property
    def start(self) -> int:
        if self.mode == SweepMode.ADDRESS_RANGE:
            return ADDRESS_SUFFIX_FIRST
        return int(self.range_start)

    @property
    def end(self) -> int:
        if self.mode == SweepMode.ADDRESS_RANGE:
            return ADDRESS_SUFFIX_LAST
        return int(self.range_end)

    @property
    def pad_width(self) -> int:
        # Length of the token as typed: "01" pads to 2, "1" does not pad
        if self.mode == SweepMode.ADDRESS_RANGE or self.range_start is None:
            return 0
        return len(self.range_start)


@dataclass(frozen=True)
class ProbeOutcome:
    """
    Result of probing one target.

    Attributes:
        target: The probed target
        reachable: True if a reply arrived within the timeout
        annotation: Resolved hostname or address, only for reachable targets
    """
    target: Target
    reachable: bool
    annotation: Optional[str] = None


@dataclass(frozen=True)
class SweepSummary:
    """Up/down totals for a name-range sweep."""
    total_up: int = 0
    total_down: int = 0

    @property
    def total(self) -> int:
        return self.total_up + self.total_down


@dataclass
class SweepResult:
    """
    Everything a finished sweep produced.

    Attributes:
        request: The request that was swept
        outcomes: One outcome per target, in completion order
        summary: Up/down totals (name mode only, None in address mode)
        duration: Wall-clock seconds from first dispatch to barrier
    """
    request: SweepRequest
    outcomes: List[ProbeOutcome] = field(default_factory=list)
    summary: Optional[SweepSummary] = None
    duration: float = 0.0

    @property
    def reachable(self) -> List[ProbeOutcome]:
        return [outcome for outcome in self.outcomes if outcome.reachable]
