"""
Network utility functions for address prefixes and lookup results.
"""

import ipaddress


def is_valid_ip(ip_address: str) -> bool:
    """
    Check if a string represents a valid IPv4 address.

    Args:
        ip_address: String to validate as IPv4 address

    Returns:
        bool: True if valid IPv4 address, False otherwise
    """
    try:
        ipaddress.IPv4Address(ip_address)
        return True
    except ipaddress.AddressValueError:
        return False


def is_valid_prefix(prefix: str) -> bool:
    """
    Check if a string is the first three octets of an IPv4 address.

    Args:
        prefix: String such as "192.168.1"

    Returns:
        bool: True if prefix + ".1" is a valid IPv4 address
    """
    if not prefix or prefix.count(".") != 2:
        return False
    return is_valid_ip(f"{prefix}.1")


def prefix_from_address(ip_address: str) -> str:
    """
    Return the first three octets of an IPv4 address.

    Args:
        ip_address: Dotted-quad address, e.g. "10.0.0.17"

    Returns:
        str: Prefix such as "10.0.0"

    Raises:
        ValueError: If ip_address is not a valid IPv4 address
    """
    address = ipaddress.IPv4Address(ip_address)
    return ".".join(str(address).split(".")[:3])


def strip_root_dot(hostname: str) -> str:
    """Remove the trailing root-domain dot from a fully qualified name."""
    return hostname[:-1] if hostname.endswith(".") else hostname


def is_integer_token(token: str) -> bool:
    """True if token parses as a base-10 integer."""
    try:
        int(token)
        return True
    except (TypeError, ValueError):
        return False
