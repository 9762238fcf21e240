import argparse
import sys
from pathlib import Path
from typing import Optional
from typing import Sequence
from typing import TextIO

from .._errors import DhatlessCommandError
from .._ignore import load_ignore_list
from .._report import Report
from .._report import load_report
from ..reporters import BaseReporter
from ..reporters.html import HtmlReporter
from ..reporters.text import TextReporter
from .common import cpu_profile
from .common import memory_profile
from .common import warn_if_report_is_too_big


def make_reporter(
    report: Report, keywords: Sequence[str], *, html: bool = False
) -> BaseReporter:
    if html:
        return HtmlReporter(report, keywords)
    return TextReporter(report, keywords)


class ReportCommand:
    """Generate a report with all allocations recorded in a DHAT output file"""

    def prepare_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-i",
            dest="ignore_file",
            metavar="FILE",
            help="File with keywords to ignore, one per line",
            default=None,
        )
        parser.add_argument(
            "-html",
            dest="html",
            help="Generate HTML output",
            action="store_true",
            default=False,
        )
        parser.add_argument(
            "-profile-cpu",
            dest="profile_cpu",
            help="Write a CPU profile of the run to profile.cpu",
            action="store_true",
            default=False,
        )
        parser.add_argument(
            "-profile-mem",
            dest="profile_mem",
            help="Write a memory profile of the run to profile.mem",
            action="store_true",
            default=False,
        )
        parser.add_argument(
            "report", metavar="DHAT_FILE", help="DHAT output file to report on"
        )

    def write_report(
        self,
        report_path: Path,
        ignore_file: Optional[str],
        *,
        html: bool,
        outfile: TextIO,
    ) -> None:
        try:
            keywords = load_ignore_list(ignore_file)
        except OSError as e:
            raise DhatlessCommandError(
                f"Failed to read ignore file {ignore_file}\nReason: {e}",
                exit_code=1,
            )

        try:
            warn_if_report_is_too_big(report_path)
            report = load_report(report_path)
        except OSError as e:
            raise DhatlessCommandError(
                f"Failed to read DHAT report {report_path}\nReason: {e}",
                exit_code=1,
            )

        reporter = make_reporter(report, keywords, html=html)
        try:
            reporter.render(outfile)
            outfile.flush()
        except OSError as e:
            raise DhatlessCommandError(
                f"Failed to write the report\nReason: {e}", exit_code=1
            )

    def run(self, args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        report_path = Path(args.report)
        if not report_path.exists() or not report_path.is_file():
            raise DhatlessCommandError(f"No such file: {args.report}", exit_code=1)

        with cpu_profile(args.profile_cpu), memory_profile(args.profile_mem):
            self.write_report(
                report_path,
                args.ignore_file,
                html=args.html,
                outfile=sys.stdout,
            )
