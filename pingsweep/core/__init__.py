"""
Core components of the ping sweep.
"""

from .data_models import (
    SweepMode,
    Target,
    SweepRequest,
    ProbeOutcome,
    SweepSummary,
    SweepResult
)
from .target_enumerator import address_range, name_range, enumerate_targets
from .tally_store import TallyStore

__all__ = [
    'SweepMode',
    'Target',
    'SweepRequest',
    'ProbeOutcome',
    'SweepSummary',
    'SweepResult',
    'address_range',
    'name_range',
    'enumerate_targets',
    'TallyStore'
]
