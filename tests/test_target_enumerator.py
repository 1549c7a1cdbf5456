import pytest

from pingsweep.core.data_models import SweepMode, SweepRequest, Target
from pingsweep.core.target_enumerator import address_range, enumerate_targets, name_range


def test_address_range_covers_1_to_254_in_order():
    targets = address_range("192.168.1")

    assert len(targets) == 254
    assert targets[0] == Target(name="192.168.1.1", suffix="1")
    assert targets[-1] == Target(name="192.168.1.254", suffix="254")
    assert [int(t.suffix) for t in targets] == list(range(1, 255))
    assert len({t.name for t in targets}) == 254


def test_name_range_pads_to_length_of_start_token():
    targets = name_range("node", "01", "05")

    assert [t.name for t in targets] == ["node01", "node02", "node03", "node04", "node05"]
    assert [t.suffix for t in targets] == ["01", "02", "03", "04", "05"]


def test_name_range_without_padding_when_start_has_one_digit():
    targets = name_range("node", "1", "12")

    assert len(targets) == 12
    assert targets[0].name == "node1"
    assert targets[9].name == "node10"


def test_name_range_pad_width_follows_literal_token_not_value():
    # "001" pads to three characters even though the value has one digit
    targets = name_range("onyxnode-", "001", "3")

    assert [t.name for t in targets] == ["onyxnode-001", "onyxnode-002", "onyxnode-003"]


def test_name_range_wider_values_are_not_truncated():
    targets = name_range("n", "8", "11")

    assert [t.name for t in targets] == ["n8", "n9", "n10", "n11"]


@pytest.mark.parametrize("start,end,expected", [("3", "7", 5), ("10", "10", 1), ("0", "99", 100)])
def test_name_range_count_is_end_minus_start_plus_one(start, end, expected):
    assert len(name_range("h", start, end)) == expected


def test_name_range_with_start_after_end_is_empty():
    assert name_range("node", "5", "1") == []


def test_enumerate_targets_dispatches_on_mode():
    address_request = SweepRequest(mode=SweepMode.ADDRESS_RANGE, prefix="10.0.0")
    name_request = SweepRequest(
        mode=SweepMode.NAME_RANGE, prefix="db", range_start="1", range_end="3"
    )

    assert len(enumerate_targets(address_request)) == 254
    assert [t.name for t in enumerate_targets(name_request)] == ["db1", "db2", "db3"]


def test_request_exposes_bounds_and_pad_width():
    request = SweepRequest(mode=SweepMode.NAME_RANGE, prefix="node", range_start="01", range_end="12")
    assert (request.start, request.end, request.pad_width) == (1, 12, 2)

    address_request = SweepRequest(mode=SweepMode.ADDRESS_RANGE, prefix="10.0.0")
    assert (address_request.start, address_request.end) == (1, 254)
