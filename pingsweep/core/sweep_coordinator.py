"""
Sweep Coordinator for the ping sweep.

This module provides the SweepCoordinator class that fans enumerated targets
out to a bounded pool of probe workers, prints each reachable target as soon
as its worker finishes, waits for every worker, and tallies the totals for
name-range sweeps.
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple

from .data_models import (
    ProbeOutcome,
    SweepMode,
    SweepRequest,
    SweepResult,
    SweepSummary,
    Target,
)
from .tally_store import TallyStore
from .target_enumerator import enumerate_targets
from ..probers.base_prober import BaseProber
from ..probers.resolver import BaseResolver, NullResolver
from ..utils.logger import Logger, get_logger
from ..utils.report_printer import ReportPrinter

DEFAULT_MAX_WORKERS = 64


class SweepCoordinator:
    """
    Runs a sweep: one probe task per target on a bounded thread pool.

    Output lines carry no ordering guarantee. The summary and completion
    message are only printed once every task has finished.
    """

    def __init__(
        self,
        prober: BaseProber,
        resolver: Optional[BaseResolver] = None,
        printer: Optional[ReportPrinter] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the coordinator.

        Args:
            prober: Reachability prober
            resolver: Name resolver for annotations (none when omitted)
            printer: Report printer, defaults to stdout
            max_workers: Maximum number of concurrent probe tasks
            logger: Logger instance for diagnostics
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self.prober = prober
        self.resolver = resolver or NullResolver()
        self.printer = printer or ReportPrinter()
        self.max_workers = max_workers
        self.logger = logger or get_logger(__name__)

    def run(self, request: SweepRequest) -> SweepResult:
        """
        Execute a complete sweep and print its report.

        Args:
            request: Validated sweep request

        Returns:
            SweepResult: Outcomes and, for name-range sweeps, the summary
        """
        targets = enumerate_targets(request)
        self.logger.debug(
            f"Sweeping {len(targets)} targets",
            mode=request.mode.value,
            timeout=request.timeout,
            workers=self.max_workers,
        )

        self.printer.header(request)
        started = time.monotonic()
        outcomes, summary = self.sweep(targets, request.mode, request.timeout)
        duration = time.monotonic() - started
        self.printer.footer(summary)

        self.logger.debug(
            f"Sweep finished in {duration:.2f}s",
            up=sum(1 for outcome in outcomes if outcome.reachable),
            total=len(outcomes),
        )
        return SweepResult(
            request=request, outcomes=outcomes, summary=summary, duration=duration
        )

    def sweep(
        self, targets: Sequence[Target], mode: SweepMode, timeout: int
    ) -> Tuple[List[ProbeOutcome], Optional[SweepSummary]]:
        """
        Probe every target concurrently and wait for all of them.

        Args:
            targets: Targets to probe
            mode: Selects the resolver lookup and whether totals are kept
            timeout: Seconds each probe waits for a reply

        Returns:
            Tuple of (outcomes in completion order, summary or None)
        """
        tally = TallyStore() if mode == SweepMode.NAME_RANGE else None
        outcomes: List[ProbeOutcome] = []

        if targets:
            workers = min(self.max_workers, len(targets))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="probe") as executor:
                futures = {
                    executor.submit(self._probe_target, target, mode, timeout, tally): target
                    for target in targets
                }
                # Barrier: every future is collected before tallying
                for future in as_completed(futures):
                    try:
                        outcomes.append(future.result())
                    except Exception as e:
                        target = futures[future]
                        self.logger.warning(f"Task for {target.name} failed, counting as down: {e}")
                        outcomes.append(ProbeOutcome(target=target, reachable=False))

        if tally is None:
            return outcomes, None

        summary = tally.summary()
        tally.clear()
        return outcomes, summary

    def _probe_target(
        self,
        target: Target,
        mode: SweepMode,
        timeout: int,
        tally: Optional[TallyStore],
    ) -> ProbeOutcome:
        """
        Probe one target, resolve it if it answered, print and record it.

        Args:
            target: Target to probe
            mode: Sweep mode
            timeout: Seconds to wait for a reply
            tally: Shared tally for name-range sweeps

        Returns:
            ProbeOutcome for the target
        """
        try:
            reachable = bool(self.prober.probe(target.name, timeout))
        except Exception as e:
            self.logger.debug(f"Probe of {target.name} raised, counting as down: {e}")
            reachable = False

        annotation = self._annotate(target, mode) if reachable else None
        outcome = ProbeOutcome(target=target, reachable=reachable, annotation=annotation)

        self.printer.outcome(outcome)
        if tally is not None:
            tally.record(target.name, reachable)
        return outcome

    def _annotate(self, target: Target, mode: SweepMode) -> Optional[str]:
        try:
            if mode == SweepMode.ADDRESS_RANGE:
                return self.resolver.name_for_address(target.name) or None
            return self.resolver.address_for_name(target.name) or None
        except Exception as e:
            self.logger.debug(f"Lookup for {target.name} raised: {e}")
            return None
