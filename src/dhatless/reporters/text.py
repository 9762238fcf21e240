from typing import Sequence
from typing import TextIO

from .._ignore import iter_reported_sites
from .._report import Report
from .frame_tools import iter_site_frames


def format_header(report: Report) -> str:
    return (
        f"Command: {report.command}\n"
        f"PID: {report.pid}\n"
        f"Mode: {report.invocation_mode}\n"
        f"t-end: {report.time_at_end} {report.time_unit}\n"
    )


class TextReporter:
    """Render the allocation sites of a report as plain text."""

    def __init__(self, report: Report, keywords: Sequence[str] = ()) -> None:
        self.report = report
        self.keywords = tuple(keywords)

    def render(self, outfile: TextIO) -> None:
        outfile.write(format_header(self.report))
        for alloc_count, site_index, pp in iter_reported_sites(
            self.report, self.keywords
        ):
            print(f"\n==== Allocation #{alloc_count} ====", file=outfile)
            print(f"{pp.total_bytes} bytes in {pp.total_blocks} blocks", file=outfile)
            for frame in iter_site_frames(self.report, site_index):
                print(frame, file=outfile)
