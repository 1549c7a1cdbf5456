import threading

import pytest

from pingsweep.core.data_models import SweepSummary
from pingsweep.core.tally_store import TallyStore


def test_summary_counts_up_and_down():
    tally = TallyStore()
    tally.record("01", True)
    tally.record("02", False)
    tally.record("03", True)

    assert tally.summary() == SweepSummary(total_up=2, total_down=1)
    assert tally.summary().total == 3


def test_each_key_is_write_once():
    tally = TallyStore()
    tally.record("07", True)

    with pytest.raises(ValueError):
        tally.record("07", False)
    assert tally.summary() == SweepSummary(total_up=1, total_down=0)


def test_clear_removes_everything():
    tally = TallyStore()
    tally.record("1", True)
    tally.clear()

    assert len(tally) == 0
    assert tally.summary() == SweepSummary()


def test_concurrent_writers_lose_no_updates():
    tally = TallyStore()

    def writer(offset):
        for i in range(100):
            tally.record(f"{offset}-{i}", i % 2 == 0)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert tally.summary() == SweepSummary(total_up=400, total_down=400)
