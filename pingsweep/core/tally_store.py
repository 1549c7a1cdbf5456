"""
Thread-safe up/down tally for name-range sweeps.
"""

import threading
from typing import Dict

from .data_models import SweepSummary


class TallyStore:
    """
    Write-once record of each target's outcome, keyed by target name.

    Probe workers call record() concurrently; the coordinator calls
    summary() only after every worker has finished, then clear().
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._outcomes: Dict[str, bool] = {}

    def record(self, key: str, reachable: bool) -> None:
        """
        Record the outcome for one target.

        Args:
            key: Name of the target
            reachable: Whether the target answered

        Raises:
            ValueError: If key has already been recorded
        """
        with self._lock:
            if key in self._outcomes:
                raise ValueError(f"Outcome for {key!r} already recorded")
            self._outcomes[key] = reachable

    def summary(self) -> SweepSummary:
        with self._lock:
            up = sum(1 for reachable in self._outcomes.values() if reachable)
            return SweepSummary(total_up=up, total_down=len(self._outcomes) - up)

    def clear(self) -> None:
        with self._lock:
            self._outcomes.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)
