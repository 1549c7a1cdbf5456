"""
Ping Sweep

Discovers reachable hosts across an address range or a numbered hostname
range by pinging every candidate concurrently.
"""

__version__ = "1.0.0"
