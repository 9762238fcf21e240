from ._errors import DhatlessCommandError
from ._errors import DhatlessError
from ._errors import FrameFormatError
from ._errors import FrameIndexError
from ._errors import ReportDecodeError
from ._errors import UnsupportedVersionError
from ._ignore import iter_reported_sites
from ._ignore import load_ignore_list
from ._ignore import parse_ignore_list
from ._ignore import should_ignore
from ._report import SUPPORTED_VERSION
from ._report import ProgramPoint
from ._report import Report
from ._report import load_report
from ._report import parse_report
from ._version import __version__

__all__ = [
    "DhatlessCommandError",
    "DhatlessError",
    "FrameFormatError",
    "FrameIndexError",
    "ReportDecodeError",
    "UnsupportedVersionError",
    "iter_reported_sites",
    "load_ignore_list",
    "parse_ignore_list",
    "should_ignore",
    "SUPPORTED_VERSION",
    "ProgramPoint",
    "Report",
    "load_report",
    "parse_report",
    "__version__",
]
