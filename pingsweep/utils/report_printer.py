"""
Console report for a sweep: header, one line per reachable target and the
closing summary.

Per-target lines are written from probe worker threads as they finish, so
every line is built in full and written under a lock with a single call.
"""

import sys
import threading
from typing import Optional, TextIO

from colorama import Fore, Style

from ..core.data_models import ProbeOutcome, SweepMode, SweepRequest, SweepSummary

SEPARATOR = "-" * 28
COMPLETION_MESSAGE = "Pingsweep scan completed. Have a nice day!"


class ReportPrinter:
    """
    Writes the sweep report to a text stream (stdout by default).
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        """
        Initialize the printer.

        Args:
            stream: Output stream, defaults to sys.stdout
            color: Colorize the [UP] tag; defaults to whether stream is a TTY
        """
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self._lock = threading.Lock()

    def write_line(self, text: str = "") -> None:
        with self._lock:
            self.stream.write(text + "\n")
            self.stream.flush()

    def detected_prefix(self, prefix: str) -> None:
        self.write_line(f"Detected network prefix: {prefix}")

    def banner(self) -> None:
        self.write_line(SEPARATOR)

    def header(self, request: SweepRequest) -> None:
        """
        Print the scan range header followed by a separator.

        Args:
            request: The sweep about to run
        """
        if request.mode == SweepMode.ADDRESS_RANGE:
            scan_range = f"{request.prefix}.{request.start} - {request.prefix}.{request.end}"
        else:
            scan_range = (
                f"{request.prefix}{request.range_start} - {request.prefix}{request.range_end}"
            )
        self.write_line(f"Scanning {scan_range} ...")
        self.write_line(SEPARATOR)

    def format_outcome(self, outcome: ProbeOutcome) -> str:
        tag = "[UP]"
        if self.color:
            tag = f"{Fore.GREEN}{Style.BRIGHT}{tag}{Style.RESET_ALL}"
        line = f"{tag} {outcome.target.name}"
        if outcome.annotation:
            line += f"  ({outcome.annotation})"
        return line

    def outcome(self, outcome: ProbeOutcome) -> None:
        """Print a reachable target; unreachable ones are not listed."""
        if outcome.reachable:
            self.write_line(self.format_outcome(outcome))

    def footer(self, summary: Optional[SweepSummary]) -> None:
        """
        Print the closing separator, the totals (name mode) and the
        completion message.

        Args:
            summary: Up/down totals, or None for an address sweep
        """
        self.write_line(SEPARATOR)
        if summary is not None:
            self.write_line(f"Nodes found: {summary.total_up}")
            self.write_line(f"Nodes not found: {summary.total_down}")
        self.write_line(COMPLETION_MESSAGE)
