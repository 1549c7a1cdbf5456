import io

from pingsweep.core.data_models import (
    ProbeOutcome,
    SweepMode,
    SweepRequest,
    SweepSummary,
    Target,
)
from pingsweep.utils.report_printer import COMPLETION_MESSAGE, SEPARATOR, ReportPrinter


def test_address_header(printer, stream):
    printer.header(SweepRequest(mode=SweepMode.ADDRESS_RANGE, prefix="192.168.1"))

    assert stream.getvalue().splitlines() == [
        "Scanning 192.168.1.1 - 192.168.1.254 ...",
        SEPARATOR,
    ]


def test_name_header_uses_tokens_as_typed(printer, stream):
    request = SweepRequest(mode=SweepMode.NAME_RANGE, prefix="node", range_start="01", range_end="12")
    printer.header(request)

    assert stream.getvalue().splitlines()[0] == "Scanning node01 - node12 ..."


def test_outcome_lines(printer, stream):
    target = Target(name="10.0.0.4", suffix="4")
    printer.outcome(ProbeOutcome(target=target, reachable=True, annotation="nas.lan"))
    printer.outcome(ProbeOutcome(target=Target(name="10.0.0.5", suffix="5"), reachable=True))
    printer.outcome(ProbeOutcome(target=Target(name="10.0.0.6", suffix="6"), reachable=False))

    assert stream.getvalue().splitlines() == ["[UP] 10.0.0.4  (nas.lan)", "[UP] 10.0.0.5"]


def test_footer_with_summary(printer, stream):
    printer.footer(SweepSummary(total_up=3, total_down=9))

    assert stream.getvalue().splitlines() == [
        SEPARATOR,
        "Nodes found: 3",
        "Nodes not found: 9",
        COMPLETION_MESSAGE,
    ]


def test_footer_without_summary(printer, stream):
    printer.footer(None)

    assert stream.getvalue().splitlines() == [SEPARATOR, COMPLETION_MESSAGE]


def test_color_wraps_tag_only():
    stream = io.StringIO()
    printer = ReportPrinter(stream=stream, color=True)
    printer.outcome(ProbeOutcome(target=Target(name="h1", suffix="1"), reachable=True))

    line = stream.getvalue().rstrip("\n")
    assert line.endswith("[UP]\x1b[0m h1")
    assert "\x1b[" in line


def test_color_defaults_off_for_non_tty():
    assert ReportPrinter(stream=io.StringIO()).color is False
