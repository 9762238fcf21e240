import io

import pytest

from dhatless import FrameIndexError
from dhatless.reporters.text import TextReporter

HEADER = "Command: ./a.out\nPID: 1234\nMode: heap\nt-end: 5678 instrs\n"


def _render(report, keywords=()):
    output = io.StringIO()
    TextReporter(report, keywords).render(output)
    return output.getvalue()


class TestTextReporter:
    def test_empty_report(self, make_report):
        # GIVEN
        report = make_report()

        # WHEN
        output = _render(report)

        # THEN
        assert output == HEADER

    def test_single_allocation(self, make_report):
        # GIVEN
        report = make_report(
            pps=[{"tb": 100, "tbk": 1, "fs": [0, 1]}],
            ftbl=["at: main", "at: alloc"],
        )

        # WHEN
        output = _render(report)

        # THEN
        assert output == (
            HEADER
            + "\n==== Allocation #1 ====\n"
            + "100 bytes in 1 blocks\n"
            + "alloc\n"
            + "main\n"
        )

    def test_multiple_allocations_keep_input_order(self, make_report):
        # GIVEN
        pps = [
            {"tb": 300, "tbk": 3, "fs": [1]},
            {"tb": 100, "tbk": 1, "fs": [2]},
            {"tb": 200, "tbk": 2, "fs": [3]},
        ]
        report = make_report(pps=pps, ftbl=["[root]", "at: c", "at: a", "at: b"])

        # WHEN
        output = _render(report)

        # THEN
        assert output.count("==== Allocation #") == 3
        assert (
            output.index("==== Allocation #1 ====")
            < output.index("300 bytes in 3 blocks")
            < output.index("==== Allocation #2 ====")
            < output.index("100 bytes in 1 blocks")
            < output.index("==== Allocation #3 ====")
            < output.index("200 bytes in 2 blocks")
        )

    def test_ignored_allocation_is_not_rendered(self, make_report):
        # GIVEN
        report = make_report(
            pps=[{"tb": 100, "tbk": 1, "fs": [0, 1]}],
            ftbl=["at: main", "at: alloc"],
        )

        # WHEN
        output = _render(report, ["alloc"])

        # THEN
        assert output == HEADER

    def test_counters_stay_contiguous_when_ignoring(self, make_report):
        # GIVEN
        pps = [
            {"tb": 1, "tbk": 1, "fs": [1]},
            {"tb": 2, "tbk": 1, "fs": [2]},
            {"tb": 3, "tbk": 1, "fs": [1]},
            {"tb": 4, "tbk": 1, "fs": [2]},
        ]
        report = make_report(pps=pps, ftbl=["[root]", "at: keep", "at: drop"])

        # WHEN
        output = _render(report, ["drop"])

        # THEN
        assert "==== Allocation #1 ====\n1 bytes" in output
        assert "==== Allocation #2 ====\n3 bytes" in output
        assert "Allocation #3" not in output
        assert "drop" not in output

    def test_symbols_are_written_verbatim(self, make_report):
        # GIVEN
        report = make_report(
            pps=[{"tb": 8, "tbk": 1, "fs": [0]}], ftbl=["at: a<b>c & 'd'"]
        )

        # WHEN
        output = _render(report)

        # THEN
        assert "\na<b>c & 'd'\n" in output

    def test_resolution_error_aborts_after_partial_output(self, make_report):
        # GIVEN
        pps = [
            {"tb": 1, "tbk": 1, "fs": [0]},
            {"tb": 2, "tbk": 1, "fs": [7]},
        ]
        report = make_report(pps=pps, ftbl=["at: fine"])
        output = io.StringIO()

        # WHEN
        with pytest.raises(FrameIndexError):
            TextReporter(report).render(output)

        # THEN
        assert "==== Allocation #1 ====\n1 bytes in 1 blocks\nfine\n" in output.getvalue()
