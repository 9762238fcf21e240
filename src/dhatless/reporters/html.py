from typing import Iterator
from typing import Sequence
from typing import TextIO
from typing import Tuple

from .._ignore import iter_reported_sites
from .._report import ProgramPoint
from .._report import Report
from .frame_tools import iter_site_frames
from .templates import stream_report

REPORT_TITLE = "DHAT allocations report"


class HtmlReporter:
    """Render the allocation sites of a report as a collapsible HTML page."""

    def __init__(self, report: Report, keywords: Sequence[str] = ()) -> None:
        self.report = report
        self.keywords = tuple(keywords)

    def _iter_sites(self) -> Iterator[Tuple[int, ProgramPoint, Iterator[str]]]:
        for alloc_count, site_index, pp in iter_reported_sites(
            self.report, self.keywords
        ):
            yield alloc_count, pp, iter_site_frames(self.report, site_index)

    def render(self, outfile: TextIO) -> None:
        stream_report(
            kind="report",
            outfile=outfile,
            title=REPORT_TITLE,
            report=self.report,
            sites=self._iter_sites(),
        )
