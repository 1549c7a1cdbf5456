"""
Target enumeration for address-range and name-range sweeps.
"""

from typing import List

from .data_models import (
    ADDRESS_SUFFIX_FIRST,
    ADDRESS_SUFFIX_LAST,
    SweepMode,
    SweepRequest,
    Target,
)


def address_range(prefix: str) -> List[Target]:
    """
    Enumerate prefix.1 through prefix.254.

    Args:
        prefix: First three octets, e.g. "192.168.1"

    Returns:
        List[Target]: 254 targets in ascending order
    """
    return [
        Target(name=f"{prefix}.{octet}", suffix=str(octet))
        for octet in range(ADDRESS_SUFFIX_FIRST, ADDRESS_SUFFIX_LAST + 1)
    ]


def name_range(prefix: str, start_token: str, end_token: str) -> List[Target]:
    """
    Enumerate prefix + zero-padded suffix for start..end inclusive.

    The pad width is the character length of start_token as typed, so
    "01" gives node01, node02... while "1" gives node1, node2...
    A start greater than the end yields no targets.

    Args:
        prefix: Hostname prefix, e.g. "node-"
        start_token: Literal range start
        end_token: Literal range end

    Returns:
        List[Target]: Targets in ascending numeric order
    """
    width = len(start_token)
    targets = []
    for number in range(int(start_token), int(end_token) + 1):
        suffix = f"{number:0{width}d}"
        targets.append(Target(name=f"{prefix}{suffix}", suffix=suffix))
    return targets


def enumerate_targets(request: SweepRequest) -> List[Target]:
    """Enumerate the targets for a request according to its mode."""
    if request.mode == SweepMode.ADDRESS_RANGE:
        return address_range(request.prefix)
    return name_range(request.prefix, request.range_start, request.range_end)
